"""Flag parser that walks an argument vector against a registry."""

from typing import Sequence

from flagparse.core.parsers.numbers import parse_uint64
from flagparse.core.parsers.tokens import TokenKind, classify_token, strip_flag_prefix
from flagparse.core.registry import Flag, FlagRegistry
from flagparse.domain.types import FlagErrorKind, FlagType, ParseResult
from flagparse.logger import get_logger

logger = get_logger("parsers")


class FlagParser:
    """
    Parser for ``-name [value]`` style flags.

    Scanning rules:
    - The first argument (program name) is skipped
    - A token not starting with '-' stops scanning; it and everything after it are leftovers
    - '--' stops scanning; everything after it is leftover
    - '-name' must match a declared flag, otherwise parsing fails
    - Bool flags take no value, string and uint64 flags consume the next token

    Flag values are updated in place as they are seen. Parsing stops at the
    first error and values set before it are kept.
    """

    def __init__(self, registry: FlagRegistry):
        self.registry = registry

    def parse(self, args: Sequence[str]) -> ParseResult:
        """
        Parse a full argument vector.

        Examples:
            ['prog', '-verbose', 'in.txt'] -> ok, rest=('in.txt',)
            ['prog', '--', '-verbose']     -> ok, rest=('-verbose',)
            ['prog', '-count', 'abc']      -> INVALID_NUMBER for 'count'

        Args:
            args: Argument strings; the first one is the program name

        Returns:
            ParseResult with the leftover arguments or the first error
        """
        remaining = list(args[1:])
        i = 0
        while i < len(remaining):
            token = remaining[i]
            kind = classify_token(token)

            if kind is TokenKind.POSITIONAL:
                logger.debug(f"Positional argument '{token}' ends flag parsing")
                return ParseResult.success(remaining[i:])

            if kind is TokenKind.TERMINATOR:
                logger.debug("Terminator '--' ends flag parsing")
                return ParseResult.success(remaining[i + 1:])

            name = strip_flag_prefix(token)
            flag = self.registry.find(name)
            if flag is None:
                return self._fail(FlagErrorKind.UNKNOWN, name)

            i += 1
            if flag.type is FlagType.BOOL:
                flag.value = True
                logger.debug(f"Parsed flag '-{name}' = True")
                continue

            if i >= len(remaining):
                return self._fail(FlagErrorKind.NO_VALUE, name)

            value_token = remaining[i]
            i += 1
            error = self._assign(flag, value_token)
            if error is not None:
                return self._fail(error, name)

        return ParseResult.success([])

    def _assign(self, flag: Flag, text: str) -> FlagErrorKind | None:
        """Store a value token into a string or uint64 flag."""
        if flag.type is FlagType.STR:
            flag.value = text
        else:
            parsed = parse_uint64(text)
            if isinstance(parsed, FlagErrorKind):
                return parsed
            flag.value = parsed
        logger.debug(f"Parsed flag '-{flag.name}' = {flag.value!r}")
        return None

    def _fail(self, kind: FlagErrorKind, name: str) -> ParseResult:
        logger.debug(f"Parse failed on '-{name}': {kind.value}")
        return ParseResult.failure(kind, name)
