"""Command-line flag parsing in the style of Go's ``flag`` package.

Declare flags, parse ``sys.argv``, then read values through the returned
handles::

    import sys
    import flagparse

    help_ = flagparse.flag_bool("help", False, "Print this help and exit")
    size = flagparse.flag_uint64("size", 0, "Size of the thing")
    output = flagparse.flag_str("output", "output.txt", "Output file path")

    if not flagparse.parse(sys.argv).ok:
        flagparse.print_error(sys.stderr)
        flagparse.print_options(sys.stderr)
        sys.exit(1)

The module-level functions operate on a process-wide default context. Use
:class:`FlagContext` directly for isolated registries.
"""

from typing import Optional, Sequence

from flagparse.core import (
    Flag,
    FlagContext,
    FlagHandle,
    FlagParser,
    FlagRegistry,
    get_default_context,
    name_of,
    reset_default_context,
)
from flagparse.domain.protocols import OutputSink
from flagparse.domain.types import FlagErrorKind, FlagType, ParseError, ParseResult, UINT64_MAX
from flagparse.errors import (
    DuplicateFlagError,
    FlagError,
    InvalidDefaultError,
    InvalidFlagNameError,
    RegistryFullError,
)

__version__ = "0.1.0"

__all__ = [
    "Flag",
    "FlagContext",
    "FlagHandle",
    "FlagParser",
    "FlagRegistry",
    "FlagType",
    "FlagErrorKind",
    "ParseError",
    "ParseResult",
    "UINT64_MAX",
    "FlagError",
    "RegistryFullError",
    "DuplicateFlagError",
    "InvalidFlagNameError",
    "InvalidDefaultError",
    "get_default_context",
    "reset_default_context",
    "name_of",
    "flag_bool",
    "flag_uint64",
    "flag_str",
    "parse",
    "rest_args",
    "rest_argc",
    "rest_argv",
    "print_error",
    "print_options",
]


def flag_bool(name: str, default: bool = False, description: str = "") -> FlagHandle[bool]:
    return get_default_context().flag_bool(name, default, description)


def flag_uint64(name: str, default: int = 0, description: str = "") -> FlagHandle[int]:
    return get_default_context().flag_uint64(name, default, description)


def flag_str(name: str, default: Optional[str] = None, description: str = "") -> FlagHandle[Optional[str]]:
    return get_default_context().flag_str(name, default, description)


def parse(args: Optional[Sequence[str]] = None) -> ParseResult:
    """Parse ``args`` (``sys.argv`` when omitted) against the default context."""
    return get_default_context().parse(args)


def rest_args() -> list[str]:
    return get_default_context().rest_args()


def rest_argc() -> int:
    return get_default_context().rest_argc()


def rest_argv() -> list[str]:
    return get_default_context().rest_argv()


def print_error(stream: Optional[OutputSink] = None) -> None:
    """Write the error from the last failed parse (stderr by default)."""
    get_default_context().print_error(stream)


def print_options(stream: Optional[OutputSink] = None) -> None:
    """Write the usage listing of all declared flags (stdout by default)."""
    get_default_context().print_options(stream)
