# src/catlite/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from catlite.config import NUMBER_NONBLANK_OPTIONS, NUMBER_OPTIONS, VALID_OPTIONS


class OptionKind(Enum):
    NUMBER = "number"
    NUMBER_NONBLANK = "number-nonblank"
    HELP = "help"
    INVALID = "invalid"

    @classmethod
    def from_token(cls, token: str) -> "OptionKind":
        """Maps an option token to its kind by exact match."""
        if token not in VALID_OPTIONS:
            return cls.INVALID
        if token in NUMBER_OPTIONS:
            return cls.NUMBER
        if token in NUMBER_NONBLANK_OPTIONS:
            return cls.NUMBER_NONBLANK
        return cls.HELP


class NumberingMode(Enum):
    NONE = "none"
    NUMBER = "number"
    NUMBER_NONBLANK = "number-nonblank"

    @classmethod
    def from_options(cls, options: Iterable[str]) -> "NumberingMode":
        """
        Picks the numbering mode for a render pass.
        -b / --number-nonblank wins over -n / --number, whatever the order.
        """
        kinds = {OptionKind.from_token(o) for o in options}
        if OptionKind.NUMBER_NONBLANK in kinds:
            return cls.NUMBER_NONBLANK
        if OptionKind.NUMBER in kinds:
            return cls.NUMBER
        return cls.NONE


@dataclass(frozen=True)
class ClassifiedArgs:
    """Command-line arguments split into options and files, order preserved."""
    options: Tuple[str, ...]
    files: Tuple[str, ...]


@dataclass(frozen=True)
class ValidatedArgs:
    options: Tuple[str, ...]
    files: Tuple[str, ...]
    help_requested: bool = False

    @property
    def numbering(self) -> NumberingMode:
        return NumberingMode.from_options(self.options)
