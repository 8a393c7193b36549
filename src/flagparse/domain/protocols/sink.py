"""Output sink protocol."""

from typing import Protocol

__all__ = ["OutputSink"]


class OutputSink(Protocol):
    """Anything text reports can be written to (``sys.stdout``, ``io.StringIO``, files)."""

    def write(self, text: str, /) -> int: ...

    def flush(self) -> None: ...
