"""Exceptions raised by the build model and its writers.

Two families exist. ``BuildModelError`` is raised by a builder the moment a
call breaks the model contract, so the caller sees the offending line in the
traceback. ``DialectError`` is raised by a script writer before any output is
produced, when the model uses features the target dialect cannot express.
"""

from __future__ import annotations


class BuildModelError(ValueError):
    """Raised when a builder call violates the build model contract."""


class DialectError(Exception):
    """Raised when a build cannot be expressed in the requested dialect.

    Attributes:
        dialect: Name of the file flavour being rendered (``build.gradle.kts``).
        problems: Every legality problem found by the validation pass.
    """

    def __init__(self, dialect: str, problems: list[str]) -> None:
        self.dialect = dialect
        self.problems = list(problems)
        super().__init__(f"{dialect} scripts cannot be rendered: " + "; ".join(self.problems))
