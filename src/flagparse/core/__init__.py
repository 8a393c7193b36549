"""Core flag machinery: registry, parser and context."""

from flagparse.core.registry import Flag, FlagHandle, FlagRegistry, name_of
from flagparse.core.parsers import FlagParser
from flagparse.core.context import FlagContext, get_default_context, reset_default_context

__all__ = [
    "Flag",
    "FlagHandle",
    "FlagRegistry",
    "name_of",
    "FlagParser",
    "FlagContext",
    "get_default_context",
    "reset_default_context",
]
