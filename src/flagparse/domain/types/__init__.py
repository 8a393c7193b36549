"""Shared domain types."""

from flagparse.domain.types.flag import FlagType, FlagValue, UINT64_MAX
from flagparse.domain.types.parse import FlagErrorKind, ParseError, ParseResult

__all__ = [
    "FlagType",
    "FlagValue",
    "UINT64_MAX",
    "FlagErrorKind",
    "ParseError",
    "ParseResult",
]
