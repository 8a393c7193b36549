"""Write formatted reports to caller-supplied streams.

Plain streams receive the ``format_*`` text unchanged. Styled output goes
through a Rich console and is used when ``color`` is True, or when it is
None and the stream is a terminal. Environment variables such as
``FORCE_COLOR`` do not turn styling on for plain streams.
"""

from __future__ import annotations

import sys
from typing import Iterable

from rich.console import Console

from flagparse.core.registry import Flag
from flagparse.domain.protocols import OutputSink
from flagparse.domain.types import ParseError
from flagparse.presentation.formatters import (
    format_error,
    format_options,
    render_error,
    render_options,
)


def _use_color(stream: OutputSink, color: bool | None) -> bool:
    if color is not None:
        return color
    isatty = getattr(stream, "isatty", None)
    return bool(isatty is not None and isatty())


def _console(stream: OutputSink) -> Console:
    return Console(
        file=stream,  # type: ignore[arg-type]
        force_terminal=True,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
    )


def print_error(
    error: ParseError | None,
    stream: OutputSink | None = None,
    color: bool | None = None,
) -> None:
    """Write the error line for ``error`` (stderr by default)."""
    stream = stream if stream is not None else sys.stderr
    if _use_color(stream, color):
        _console(stream).print(render_error(error), end="")
    else:
        stream.write(format_error(error))


def print_options(
    flags: Iterable[Flag],
    stream: OutputSink | None = None,
    color: bool | None = None,
) -> None:
    """Write the usage listing for ``flags`` (stdout by default)."""
    stream = stream if stream is not None else sys.stdout
    if _use_color(stream, color):
        _console(stream).print(render_options(flags), end="")
    else:
        stream.write(format_options(flags))
