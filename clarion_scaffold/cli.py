"""Clarion scaffolder CLI.

Prompts for three values, in order, and writes the project into the current
working directory::

    clarion-scaffold
    python -m clarion_scaffold
"""

from __future__ import annotations

import argparse
import sys

from clarion_scaffold import __version__
from clarion_scaffold.config import GeneratorConfig
from clarion_scaffold.errors import ScaffoldError
from clarion_scaffold.scaffolder import ProjectGenerator, UserInput
from clarion_scaffold.utils import ask, console, print_error, print_success

ERROR_PREFIX = "Whoopsie-daisy! Something went wrong:"


def prompt_user_input() -> UserInput:
    """Ask for name, email and application identifier, one at a time."""
    user_name = ask("Your name")
    user_email = ask("Your email address")
    full_app_name = ask("Application name (format: @organization-name/app-name)")
    return UserInput(
        user_name=user_name,
        user_email=user_email,
        full_app_name=full_app_name,
    )


def run(config: GeneratorConfig) -> None:
    """Collect input and generate one project with *config*."""
    user_input = prompt_user_input()
    generator = ProjectGenerator(config)
    project_root = generator.generate(user_input)

    console.print()
    print_success(
        f"Okily-dokily! Your Clarion boilerplate for {user_input.full_app_name} "
        f"is ready at: {project_root}"
    )
    console.print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clarion-scaffold",
        description="Clarion scaffolder -- create backend + frontend package skeletons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "The generator asks for your name, email address and an application\n"
            "identifier such as @acme/test-app, then writes ./test-app/.\n"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``clarion-scaffold`` and ``python -m clarion_scaffold``."""
    build_parser().parse_args(argv)

    try:
        run(GeneratorConfig())
    except (ScaffoldError, OSError, EOFError, KeyboardInterrupt) as exc:
        print_error(f"{ERROR_PREFIX} {str(exc) or type(exc).__name__}")
        sys.exit(1)


if __name__ == "__main__":
    main()
