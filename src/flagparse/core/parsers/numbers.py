"""Conversion of flag value tokens to unsigned 64-bit integers."""

import re
from typing import Union

from flagparse.domain.types import FlagErrorKind, UINT64_MAX

__all__ = ["parse_uint64"]

_DIGITS = re.compile(r"[0-9]+")
_UINT64_MAX_DIGITS = len(str(UINT64_MAX))


def parse_uint64(text: str) -> Union[int, FlagErrorKind]:
    """
    Parse a whole token as a base-10 unsigned 64-bit integer.

    Only ASCII digits are accepted. Signs, surrounding whitespace,
    underscores and partial numbers are rejected.

    Examples:
        '42'                   -> 42
        '007'                  -> 7
        ''                     -> INVALID_NUMBER
        '12 '                  -> INVALID_NUMBER
        '18446744073709551616' -> INTEGER_OVERFLOW

    Args:
        text: The value token

    Returns:
        The parsed integer, or the error kind describing why it was rejected
    """
    if not _DIGITS.fullmatch(text):
        return FlagErrorKind.INVALID_NUMBER
    significant = text.lstrip("0") or "0"
    # int() refuses very long digit strings, so decide by length first
    if len(significant) > _UINT64_MAX_DIGITS:
        return FlagErrorKind.INTEGER_OVERFLOW
    value = int(significant)
    if value > UINT64_MAX:
        return FlagErrorKind.INTEGER_OVERFLOW
    return value
