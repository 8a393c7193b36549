"""Flag-related domain types."""

from enum import Enum
from typing import Optional, Union

__all__ = ["FlagType", "FlagValue", "UINT64_MAX"]

UINT64_MAX = 2**64 - 1

# One flag holds exactly one of these, selected by its FlagType
FlagValue = Union[bool, int, Optional[str]]


class FlagType(Enum):
    """Type of a declared flag.

    The type is fixed at declaration and decides how the parser consumes
    the flag's value from the command line.
    """

    BOOL = "bool"
    UINT64 = "uint64"
    STR = "str"
