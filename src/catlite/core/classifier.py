# src/catlite/core/classifier.py
from typing import List, Sequence

from catlite.config import OPTION_PREFIX
from catlite.models import ClassifiedArgs


def is_option(arg: str) -> bool:
    """True if the argument starts with a dash. The empty string is not an option."""
    return arg.startswith(OPTION_PREFIX)


def classify_arguments(args: Sequence[str]) -> ClassifiedArgs:
    """
    Splits raw arguments (program name excluded) into options and files.
    Classification looks only at the first character, so options and files
    may be interleaved freely on the command line.
    """
    options: List[str] = []
    files: List[str] = []
    for arg in args:
        if is_option(arg):
            options.append(arg)
        else:
            files.append(arg)
    return ClassifiedArgs(options=tuple(options), files=tuple(files))
