"""Text output helpers shared by every descriptor writer."""

from buildgen.io.indenting_writer import (
    IndentingWriter,
    IndentingWriterFactory,
    IndentStrategy,
    SimpleIndentStrategy,
)

__all__ = [
    "IndentStrategy",
    "IndentingWriter",
    "IndentingWriterFactory",
    "SimpleIndentStrategy",
]
