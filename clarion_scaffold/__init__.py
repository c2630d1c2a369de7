"""Clarion scaffolder -- generates Clarion backend + frontend package skeletons."""

__version__ = "0.1.0"
