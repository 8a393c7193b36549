"""Exceptions raised for flag declaration mistakes.

These signal programming errors made while declaring flags. Problems with the
command line itself are never raised; they are reported through
``ParseResult.error``.
"""

__all__ = [
    "FlagError",
    "RegistryFullError",
    "DuplicateFlagError",
    "InvalidFlagNameError",
    "InvalidDefaultError",
]


class FlagError(Exception):
    """Base class for flag declaration errors."""


class RegistryFullError(FlagError):
    """Raised when a registry already holds its maximum number of flags."""

    def __init__(self, capacity: int, name: str):
        self.capacity = capacity
        self.name = name
        super().__init__(f"Cannot declare flag '-{name}': registry capacity of {capacity} flags reached")


class DuplicateFlagError(FlagError):
    """Raised when a flag name is declared twice in the same registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Flag '-{name}' is already declared")


class InvalidFlagNameError(FlagError, ValueError):
    """Raised for empty names or names that include the leading dash."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Invalid flag name {name!r}: {reason}")


class InvalidDefaultError(FlagError, ValueError):
    """Raised when a default value does not fit the flag type."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Invalid default for flag '-{name}': {reason}")
