"""
Formatting helpers for parse errors and flag usage listings.

The ``format_*`` functions build the exact text written to plain streams;
user-supplied names, descriptions and defaults pass through unchanged.
The ``render_*`` functions build the same text as styled Rich ``Text``
for terminals.
"""

from __future__ import annotations

from typing import Iterable

from rich.text import Text

from flagparse.core.registry import Flag
from flagparse.domain.types import FlagType, ParseError

NO_ERROR_MESSAGE = (
    "Operation Failed Successfully! Please tell the developer of this software "
    "that they don't know what they are doing! :)"
)

NAME_INDENT = "    "
DETAIL_INDENT = "        "


def format_default(flag: Flag) -> str | None:
    """
    Return the text shown after 'Default:' for a flag, or None to omit the line.

    Bool defaults are shown only when true, uint64 defaults always, and
    string defaults whenever one was given (even an empty one).
    """
    if flag.type is FlagType.BOOL:
        return "true" if flag.default else None
    if flag.type is FlagType.UINT64:
        return str(flag.default)
    return None if flag.default is None else str(flag.default)


def format_error(error: ParseError | None) -> str:
    """Return the error line for ``error``, or the no-error placeholder."""
    if error is None:
        return NO_ERROR_MESSAGE
    return f"ERROR: -{error.flag_name}: {error.kind.value}\n"


def format_options(flags: Iterable[Flag]) -> str:
    """Return the usage listing for ``flags``, in declaration order."""
    lines = []
    for flag in flags:
        lines.append(f"{NAME_INDENT}-{flag.name}\n")
        lines.append(f"{DETAIL_INDENT}{flag.description}\n")
        default = format_default(flag)
        if default is not None:
            lines.append(f"{DETAIL_INDENT}Default: {default}\n")
    return "".join(lines)


def render_error(error: ParseError | None) -> Text:
    """Return the Rich Text for a parse error line."""
    if error is None:
        return Text(NO_ERROR_MESSAGE, style="yellow")
    text = Text()
    text.append("ERROR:", style="bold red")
    text.append(" ")
    text.append(f"-{error.flag_name}", style="bold")
    text.append(f": {error.kind.value}\n")
    return text


def render_options(flags: Iterable[Flag]) -> Text:
    """Return the Rich Text for the usage listing, in declaration order."""
    text = Text()
    for flag in flags:
        text.append(NAME_INDENT)
        text.append(f"-{flag.name}", style="bold cyan")
        text.append("\n")
        text.append(f"{DETAIL_INDENT}{flag.description}\n")
        default = format_default(flag)
        if default is not None:
            text.append(DETAIL_INDENT)
            text.append(f"Default: {default}", style="dim")
            text.append("\n")
    return text
