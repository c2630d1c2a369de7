"""Materialises a generation plan on disk.

Directories are created idempotently and files are created or overwritten
one at a time, in plan order.  Errors are not caught here: the first failure
aborts the run and whatever was already written stays on disk.
"""

from __future__ import annotations

from pathlib import Path
from collections.abc import Iterable

from clarion_scaffold.utils import print_created

from .models import OutputNode


def ensure_directory(path: str | Path) -> bool:
    """Create *path* and any missing parents.

    Returns:
        ``True`` if the directory did not exist before the call.
    """
    dir_path = Path(path)
    if dir_path.is_dir():
        return False
    dir_path.mkdir(parents=True, exist_ok=True)
    return True


def write_file(path: str | Path, content: str) -> Path:
    """Create or overwrite *path* with UTF-8 *content*."""
    file_path = Path(path)
    file_path.write_text(content, encoding="utf-8")
    return file_path


def write_nodes(nodes: Iterable[OutputNode], root: str | Path) -> list[Path]:
    """Write every node under *root* and echo each created path.

    Args:
        nodes: Planned nodes; a file's directory must appear before the file.
        root: Directory the node paths are relative to.

    Returns:
        Paths of the files written, in order.
    """
    base = Path(root)
    written: list[Path] = []
    for node in nodes:
        target = base / node.path
        if node.is_directory:
            if ensure_directory(target):
                print_created(target)
            continue
        write_file(target, node.content)
        print_created(target)
        written.append(target)
    return written
