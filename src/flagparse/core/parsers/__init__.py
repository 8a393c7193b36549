"""Argument parsing package for command-line flags."""

from flagparse.core.parsers.flag_parser import FlagParser
from flagparse.core.parsers.numbers import parse_uint64
from flagparse.core.parsers.tokens import (
    FLAG_PREFIX,
    TERMINATOR,
    TokenKind,
    classify_token,
    strip_flag_prefix,
)

__all__ = [
    "FlagParser",
    "parse_uint64",
    "FLAG_PREFIX",
    "TERMINATOR",
    "TokenKind",
    "classify_token",
    "strip_flag_prefix",
]
