"""Line-oriented text sink with scoped indentation.

Every descriptor writer emits its output through an ``IndentingWriter``. The
writer prepends the current indent lazily, on the first text written after a
line break, so blank lines never carry trailing whitespace.

Quick usage::

    out = io.StringIO()
    writer = IndentingWriter(out)
    writer.println("plugins {")
    with writer.indented():
        writer.println("id 'java'")
    writer.println("}")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TextIO

logger = logging.getLogger(__name__)

IndentStrategy = Callable[[int], str]

DEFAULT_INDENT = "    "


class SimpleIndentStrategy:
    """Indent strategy repeating a fixed string once per level."""

    def __init__(self, indent: str) -> None:
        if not indent:
            raise ValueError("Indent must not be empty")
        self.indent = indent

    def __call__(self, level: int) -> str:
        return self.indent * level

    def __repr__(self) -> str:
        return f"SimpleIndentStrategy({self.indent!r})"


class IndentingWriter:
    """Write text to *out*, indenting each new line by the current level.

    Args:
        out: Any text stream (``io.StringIO``, an open file...).
        indent_strategy: Maps an indentation level to its prefix. Defaults to
            four spaces per level.
        line_separator: String written by :meth:`println`.
    """

    def __init__(
        self,
        out: TextIO,
        indent_strategy: IndentStrategy | None = None,
        line_separator: str = "\n",
    ) -> None:
        self.out = out
        self.indent_strategy = indent_strategy or SimpleIndentStrategy(DEFAULT_INDENT)
        self.line_separator = line_separator
        self.level = 0
        self._indent = ""
        self._prepend_indent = True

    def print(self, text: str) -> None:
        """Write *text* without a line break."""
        if not text:
            return
        if self._prepend_indent:
            self.out.write(self._indent)
            self._prepend_indent = False
        self.out.write(text)

    def println(self, text: str = "") -> None:
        """Write *text* followed by a line break."""
        self.print(text)
        self.out.write(self.line_separator)
        self._prepend_indent = True

    @contextmanager
    def indented(self) -> Iterator[IndentingWriter]:
        """Increase the indentation level for the duration of the block.

        The previous level is restored on every exit path, including when the
        block raises.
        """
        self._set_level(self.level + 1)
        try:
            yield self
        finally:
            self._set_level(self.level - 1)

    def _set_level(self, level: int) -> None:
        self.level = level
        self._indent = self.indent_strategy(level)


class IndentingWriterFactory:
    """Create ``IndentingWriter`` instances configured per content type.

    Content identifiers used by the writers are ``maven``, ``gradle`` and
    ``gradle-settings``. Unknown identifiers fall back to the default strategy.
    """

    def __init__(
        self,
        default_strategy: IndentStrategy | None = None,
        strategies: dict[str, IndentStrategy] | None = None,
    ) -> None:
        self.default_strategy = default_strategy or SimpleIndentStrategy(DEFAULT_INDENT)
        self.strategies: dict[str, IndentStrategy] = dict(strategies or {})

    @classmethod
    def with_default_settings(cls) -> IndentingWriterFactory:
        """Return a factory that indents every content type with four spaces."""
        return cls()

    @classmethod
    def from_config(cls, config) -> IndentingWriterFactory:
        """Build a factory from a :class:`buildgen.config.GeneratorConfig`."""
        indent = config.indent
        return cls(
            SimpleIndentStrategy(indent.default),
            {content_id: SimpleIndentStrategy(value) for content_id, value in indent.as_dict().items()},
        )

    def indenting_strategy(self, content_id: str, strategy: IndentStrategy) -> IndentingWriterFactory:
        """Register *strategy* for *content_id* and return the factory."""
        self.strategies[content_id] = strategy
        return self

    def create_indenting_writer(self, content_id: str, out: TextIO) -> IndentingWriter:
        """Return a writer for *content_id* writing to *out*."""
        strategy = self.strategies.get(content_id, self.default_strategy)
        logger.debug("Creating writer for %s with %r", content_id, strategy)
        return IndentingWriter(out, strategy)
