"""Flag context: a registry plus the outcome of its last parse.

A process-wide default context backs the module-level API in
:mod:`flagparse`; separate contexts can be created for isolation.

Example:
    ```python
    ctx = FlagContext()
    size = ctx.flag_uint64("size", 0, "Size of the thing")
    result = ctx.parse(["prog", "-size", "42", "input.txt"])
    if not result.ok:
        ctx.print_error(sys.stderr)
        ctx.print_options(sys.stderr)
        sys.exit(1)
    size.value          # 42
    ctx.rest_args()     # ['input.txt']
    ```
"""

from __future__ import annotations

import sys
import threading
from functools import lru_cache
from typing import Callable, Optional, Sequence

from flagparse.config import DEFAULT_CAPACITY, load_config
from flagparse.core.parsers import FlagParser
from flagparse.core.registry import FlagHandle, FlagRegistry
from flagparse.domain.protocols import ArgumentParser, OutputSink
from flagparse.domain.types import FlagType, ParseError, ParseResult
from flagparse.logger import get_logger
from flagparse.presentation import format_error, format_options, print_error, print_options

logger = get_logger("context")

__all__ = ["FlagContext", "get_default_context", "reset_default_context"]


class FlagContext:
    """Owns a flag registry and remembers the result of the latest parse.

    Thread safety:
        Declaration and parsing are serialized by an internal lock. ``parse``
        is not reentrant; concurrent parses of the same context run one after
        the other and the last one to finish wins ``last_result``.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        parser_factory: Callable[[FlagRegistry], ArgumentParser] = FlagParser,
    ):
        self.registry = FlagRegistry(capacity=capacity)
        self.parser: ArgumentParser = parser_factory(self.registry)
        self._lock = threading.Lock()
        self._last_result = ParseResult()

    # Declaration

    def flag_bool(self, name: str, default: bool = False, description: str = "") -> FlagHandle[bool]:
        """Declare a presence switch; it becomes True when ``-name`` is seen."""
        return self._declare(FlagType.BOOL, name, default, description)

    def flag_uint64(self, name: str, default: int = 0, description: str = "") -> FlagHandle[int]:
        """Declare an unsigned 64-bit integer flag taking the next token as its value."""
        return self._declare(FlagType.UINT64, name, default, description)

    def flag_str(
        self, name: str, default: Optional[str] = None, description: str = ""
    ) -> FlagHandle[Optional[str]]:
        """Declare a string flag taking the next token verbatim as its value."""
        return self._declare(FlagType.STR, name, default, description)

    def _declare(self, flag_type: FlagType, name: str, default, description: str) -> FlagHandle:
        with self._lock:
            return self.registry.declare(flag_type, name, default, description)

    # Parsing

    def parse(self, args: Optional[Sequence[str]] = None) -> ParseResult:
        """
        Parse ``args`` (``sys.argv`` when omitted) and remember the result.

        Returns:
            ParseResult; on failure ``result.error`` names the kind and flag
        """
        if args is None:
            args = sys.argv
        with self._lock:
            result = self.parser.parse(args)
            self._last_result = result
        if result.ok:
            logger.debug(f"Parse succeeded with {len(result.rest)} leftover arguments")
        return result

    @property
    def last_result(self) -> ParseResult:
        return self._last_result

    @property
    def error(self) -> Optional[ParseError]:
        """Error from the latest parse, or None."""
        return self._last_result.error

    def rest_args(self) -> list[str]:
        """Leftover positional arguments from the latest parse."""
        return list(self._last_result.rest)

    def rest_argc(self) -> int:
        return len(self._last_result.rest)

    def rest_argv(self) -> list[str]:
        return self.rest_args()

    # Reports

    def format_error(self) -> str:
        return format_error(self.error)

    def format_options(self) -> str:
        return format_options(self.registry)

    def print_error(self, stream: Optional[OutputSink] = None, color: Optional[bool] = None) -> None:
        """Write the latest error (stderr by default).

        Only meaningful after a failed parse; otherwise a placeholder line
        is written.
        """
        print_error(self.error, stream, color)

    def print_options(self, stream: Optional[OutputSink] = None, color: Optional[bool] = None) -> None:
        """Write the usage listing of every declared flag (stdout by default)."""
        print_options(self.registry, stream, color)

    def reset(self) -> None:
        """Drop all declared flags and the last parse result."""
        with self._lock:
            self.registry.clear()
            self._last_result = ParseResult()


@lru_cache(maxsize=1)
def get_default_context() -> FlagContext:
    """Return the process-wide context used by the module-level API."""
    config = load_config()
    logger.debug(f"Creating default flag context (capacity={config.capacity})")
    return FlagContext(capacity=config.capacity)


def reset_default_context() -> FlagContext:
    """Replace the process-wide context with a fresh one."""
    get_default_context.cache_clear()  # type: ignore[attr-defined]
    return get_default_context()
