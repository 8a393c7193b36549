"""Domain protocols - interfaces for parsers and output sinks.

Using protocols keeps the parser swappable in tests and lets the printing
helpers accept any stream-like object.
"""

from flagparse.domain.protocols.parser import ArgumentParser
from flagparse.domain.protocols.sink import OutputSink

__all__ = [
    "ArgumentParser",
    "OutputSink",
]
