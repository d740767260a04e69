"""Keyed, insertion-ordered containers of builders.

Every collection of the build model (dependencies, BOMs, repositories,
plugins, tasks, profiles...) is a ``BuilderContainer``: a map from a caller
supplied key to a mutable builder. Customizing a key twice mutates the same
builder, so independent contributors can refine an entry without knowing who
created it. Snapshots are only produced when a writer asks for ``values()``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, Protocol, TypeVar

S = TypeVar("S", covariant=True)


class Builder(Protocol[S]):
    def build(self) -> S: ...


B = TypeVar("B", bound=Builder)
T = TypeVar("T")


class BuilderContainer(Generic[B, T]):
    """Ordered ``key -> builder`` map built on a customize-or-create primitive.

    Args:
        factory: Called with the key to create the builder of an unknown entry.
    """

    def __init__(self, factory: Callable[[str], B]) -> None:
        self._factory = factory
        self._builders: dict[str, B] = {}

    def customize(self, key: str, mutator: Callable[[B], object] | None = None) -> B:
        """Return the builder for *key*, creating it if needed, then apply *mutator*."""
        builder = self._builders.get(key)
        if builder is None:
            builder = self._factory(key)
            self._builders[key] = builder
        if mutator is not None:
            mutator(builder)
        return builder

    def add(self, key: str) -> B:
        """Make sure an entry exists for *key* and return its builder."""
        return self.customize(key)

    def remove(self, key: str) -> bool:
        """Remove *key*; return whether an entry was actually removed."""
        return self._builders.pop(key, None) is not None

    def has(self, key: str) -> bool:
        return key in self._builders

    def ids(self) -> list[str]:
        return list(self._builders)

    def is_empty(self) -> bool:
        return not self._builders

    def values(self) -> list[T]:
        """Return a snapshot of every entry, in insertion order."""
        return [builder.build() for builder in self._builders.values()]

    def __contains__(self, key: object) -> bool:
        return key in self._builders

    def __len__(self) -> int:
        return len(self._builders)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._builders))
