"""Ordered registry of declared flags.

Flags are kept in declaration order, which is also the order usage text is
rendered in. Each declaration returns a :class:`FlagHandle` that reads the
flag's current value and carries its name, so callers can identify a flag
from the handle they hold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

from flagparse.config import DEFAULT_CAPACITY
from flagparse.domain.types import FlagType, FlagValue, UINT64_MAX
from flagparse.errors import (
    DuplicateFlagError,
    InvalidDefaultError,
    InvalidFlagNameError,
    RegistryFullError,
)
from flagparse.logger import get_logger

logger = get_logger("registry")

T = TypeVar("T")

__all__ = ["Flag", "FlagHandle", "FlagRegistry", "name_of"]


@dataclass
class Flag:
    """One declared option."""

    type: FlagType
    name: str
    description: str
    default: FlagValue
    value: FlagValue


class FlagHandle(Generic[T]):
    """Stable reference to a declared flag.

    ``handle.value`` always reflects the latest parse.

    Example:
        >>> registry = FlagRegistry()
        >>> verbose = registry.declare(FlagType.BOOL, "verbose", False, "Chatty output")
        >>> verbose.value
        False
        >>> verbose.name
        'verbose'
    """

    __slots__ = ("_flag",)

    def __init__(self, flag: Flag):
        self._flag = flag

    @property
    def value(self) -> T:
        return self._flag.value  # type: ignore[return-value]

    @property
    def name(self) -> str:
        return self._flag.name

    @property
    def type(self) -> FlagType:
        return self._flag.type

    @property
    def default(self) -> T:
        return self._flag.default  # type: ignore[return-value]

    @property
    def description(self) -> str:
        return self._flag.description

    def __repr__(self) -> str:
        return f"FlagHandle(name={self.name!r}, type={self.type.value}, value={self.value!r})"


def name_of(handle: FlagHandle) -> str:
    """Return the name of the flag a handle belongs to."""
    if not isinstance(handle, FlagHandle):
        raise TypeError(f"Expected a FlagHandle, got {type(handle).__name__}")
    return handle.name


def _check_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidFlagNameError(str(name), "name must be a non-empty string")
    if name.startswith("-"):
        raise InvalidFlagNameError(name, "leave out the leading dash")


def _check_default(flag_type: FlagType, name: str, default: FlagValue) -> None:
    if flag_type is FlagType.BOOL:
        if not isinstance(default, bool):
            raise InvalidDefaultError(name, f"expected bool, got {type(default).__name__}")
    elif flag_type is FlagType.UINT64:
        if isinstance(default, bool) or not isinstance(default, int):
            raise InvalidDefaultError(name, f"expected int, got {type(default).__name__}")
        if not 0 <= default <= UINT64_MAX:
            raise InvalidDefaultError(name, f"{default} is outside the unsigned 64-bit range")
    elif flag_type is FlagType.STR:
        if default is not None and not isinstance(default, str):
            raise InvalidDefaultError(name, f"expected str or None, got {type(default).__name__}")


class FlagRegistry:
    """Declaration-ordered collection of flags with a fixed capacity.

    Thread safety:
        Not thread-safe on its own. :class:`~flagparse.core.context.FlagContext`
        serializes access to the registry it owns.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"Registry capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._flags: list[Flag] = []
        self._by_name: dict[str, Flag] = {}

    def declare(
        self,
        flag_type: FlagType,
        name: str,
        default: FlagValue,
        description: str = "",
    ) -> FlagHandle:
        """
        Append a new flag whose current value starts at ``default``.

        Args:
            flag_type: Type of the flag
            name: Command-line name without the leading dash
            default: Initial and displayed default value
            description: Help text shown in usage output

        Returns:
            Handle to the new flag

        Raises:
            RegistryFullError: If the registry is at capacity
            InvalidFlagNameError: If the name is empty or starts with a dash
            DuplicateFlagError: If the name is already declared
            InvalidDefaultError: If the default does not fit the flag type
        """
        try:
            if len(self._flags) >= self.capacity:
                raise RegistryFullError(self.capacity, name)
            _check_name(name)
            if name in self._by_name:
                raise DuplicateFlagError(name)
            _check_default(flag_type, name, default)
        except Exception as e:
            logger.error(f"Flag declaration failed: {e}")
            raise

        flag = Flag(
            type=flag_type,
            name=name,
            description=description or "",
            default=default,
            value=default,
        )
        self._flags.append(flag)
        self._by_name[name] = flag
        logger.debug(f"Declared {flag_type.value} flag '-{name}' (default={default!r})")
        return FlagHandle(flag)

    def find(self, name: str) -> Optional[Flag]:
        """Return the flag declared under ``name``, or None."""
        return self._by_name.get(name)

    def clear(self) -> None:
        """Forget every declared flag."""
        count = len(self._flags)
        self._flags.clear()
        self._by_name.clear()
        logger.debug(f"Registry cleared ({count} flags removed)")

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name
