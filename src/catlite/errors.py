# src/catlite/errors.py
"""Exception hierarchy for catlite.

Every failure the CLI reports to the user is a :class:`CatError`, so the
entry point can map the whole family to an exit status with one ``except``.
Each error also inherits the builtin it stands for, so ``except OSError``
and friends keep working for callers of the core modules.
"""
from typing import Optional


class CatError(Exception):
    """Base exception for all catlite errors."""


class MissingFileError(CatError, FileNotFoundError):
    """A file argument does not name an existing filesystem entry."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File '{path}' does not exist")

    def __str__(self) -> str:
        return self.args[0]


class InvalidOptionError(CatError, ValueError):
    """An option token is not part of the recognized vocabulary."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"{option} is not a valid option.")


class RenderError(CatError, OSError):
    """Opening, reading or writing a file failed while rendering it.

    ``line_number`` is the 1-based physical line being processed, or None
    when the failure happened before the first line was read.
    """

    def __init__(self, path: str, cause: Exception, line_number: Optional[int] = None):
        self.path = path
        self.cause = cause
        self.line_number = line_number
        where = f"'{path}'" if line_number is None else f"'{path}' at line {line_number}"
        super().__init__(f"Error rendering {where}: {cause}")

    def __str__(self) -> str:
        return self.args[0]
