"""Build properties and version properties."""

from __future__ import annotations

from buildgen.model.version import VersionProperty


class PropertyContainer:
    """Plain properties plus version properties, both rendered sorted by name."""

    def __init__(self) -> None:
        self._properties: dict[str, str] = {}
        self._versions: dict[str, tuple[VersionProperty, str]] = {}

    def is_empty(self) -> bool:
        return not self._properties and not self._versions

    def has(self, name: str) -> bool:
        return name in self._properties or name in self._versions

    def property(self, name: str, value: str) -> PropertyContainer:
        """Register or replace the property *name*."""
        self._properties[name] = value
        return self

    def version(self, prop: VersionProperty | str, value: str) -> PropertyContainer:
        """Register or replace the version property named like *prop*.

        Strings are internal properties. A later registration under the same
        name replaces the earlier one, whatever its ``internal`` flag.
        """
        if isinstance(prop, str):
            prop = VersionProperty.of(prop)
        self._versions[prop.name] = (prop, value)
        return self

    def values(self) -> list[tuple[str, str]]:
        return sorted(self._properties.items())

    def versions(self) -> list[tuple[VersionProperty, str]]:
        return [self._versions[name] for name in sorted(self._versions)]
