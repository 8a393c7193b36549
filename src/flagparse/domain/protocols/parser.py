"""Argument parser protocol."""

from typing import Protocol, Sequence

from flagparse.domain.types import ParseResult

__all__ = ["ArgumentParser"]


class ArgumentParser(Protocol):
    """Protocol for argument parsers.

    This protocol defines the interface for consuming a process argument
    vector against a set of declared flags.
    """

    def parse(self, args: Sequence[str]) -> ParseResult:
        """Parse a full argument vector.

        Args:
            args: Argument strings; the first one is the program name and is skipped

        Returns:
            ParseResult carrying either the leftover arguments or the first error
        """
        ...
