"""Classification of command-line tokens."""

from enum import Enum

__all__ = ["TokenKind", "FLAG_PREFIX", "TERMINATOR", "classify_token", "strip_flag_prefix"]

FLAG_PREFIX = "-"
TERMINATOR = "--"


class TokenKind(Enum):
    """What a token means to the flag scanner."""

    POSITIONAL = "positional"  # ends flag scanning, kept in the leftovers
    TERMINATOR = "terminator"  # ends flag scanning, dropped
    FLAG = "flag"


def classify_token(token: str) -> TokenKind:
    """
    Classify a single argument.

    Examples:
        'file.txt' -> POSITIONAL
        ''         -> POSITIONAL
        '--'       -> TERMINATOR
        '-verbose' -> FLAG
        '-'        -> FLAG (with an empty name)
    """
    if not token.startswith(FLAG_PREFIX):
        return TokenKind.POSITIONAL
    if token == TERMINATOR:
        return TokenKind.TERMINATOR
    return TokenKind.FLAG


def strip_flag_prefix(token: str) -> str:
    """Remove exactly one leading dash: '-size' -> 'size', '---x' -> '--x'."""
    return token[len(FLAG_PREFIX):]
