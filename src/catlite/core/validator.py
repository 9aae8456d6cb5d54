# src/catlite/core/validator.py
from pathlib import Path
from typing import Sequence

from catlite.errors import InvalidOptionError, MissingFileError
from catlite.models import ClassifiedArgs, OptionKind, ValidatedArgs


def file_exists(path: str) -> bool:
    # Path("") resolves to ".", which always exists
    if not path:
        return False
    try:
        return Path(path).exists()
    except OSError:
        # e.g. name too long or stat denied: nothing usable lives there
        return False


def validate_files(files: Sequence[str]) -> None:
    """Raises MissingFileError for the first path that does not exist."""
    for f in files:
        if not file_exists(f):
            raise MissingFileError(f)


def validate_options(options: Sequence[str]) -> bool:
    """
    Checks every option against the fixed vocabulary.
    Returns True when help was requested; -h / --help short-circuits the run
    even when other, unrecognized options are present.
    Raises InvalidOptionError for the first unrecognized option otherwise.
    """
    kinds = [OptionKind.from_token(o) for o in options]
    if OptionKind.HELP in kinds:
        return True

    for option, kind in zip(options, kinds):
        if kind is OptionKind.INVALID:
            raise InvalidOptionError(option)
    return False


def validate_arguments(classified: ClassifiedArgs) -> ValidatedArgs:
    """Files first, then options: a bad file is always the one reported."""
    validate_files(classified.files)
    help_requested = validate_options(classified.options)
    return ValidatedArgs(
        options=classified.options,
        files=classified.files,
        help_requested=help_requested,
    )
