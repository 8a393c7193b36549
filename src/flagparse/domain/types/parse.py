"""Parse outcome domain types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = ["FlagErrorKind", "ParseError", "ParseResult"]


class FlagErrorKind(Enum):
    """Kinds of command-line errors detected while parsing.

    The value is the reason shown to the user.
    """

    UNKNOWN = "unknown flag"
    NO_VALUE = "no value provided"
    INVALID_NUMBER = "invalid number"
    INTEGER_OVERFLOW = "integer overflow"


@dataclass(frozen=True)
class ParseError:
    """The first error hit during a parse pass."""

    kind: FlagErrorKind
    flag_name: str


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one parse pass.

    ``rest`` holds the leftover positional arguments and is empty on failure.
    """

    error: Optional[ParseError] = None
    rest: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, rest: list[str]) -> "ParseResult":
        return cls(error=None, rest=tuple(rest))

    @classmethod
    def failure(cls, kind: FlagErrorKind, flag_name: str) -> "ParseResult":
        return cls(error=ParseError(kind=kind, flag_name=flag_name))
