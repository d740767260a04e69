"""Free-form nested configuration trees.

Plugin, execution and report configuration blocks are modelled as an ordered
list of named settings. A setting holds either a scalar string or a list of
child settings; the two shapes are distinct variants tagged by ``kind`` so
writers never have to guess at a value's type.

Example, building ``<args><arg>-Xjsr305=strict</arg></args>``::

    builder = ConfigurationBuilder()
    builder.add("args", lambda args: args.add("arg", "-Xjsr305=strict"))
    configuration = builder.build()
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from buildgen.exceptions import BuildModelError


class ScalarSetting(BaseModel):
    """A leaf setting with a string value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    name: str
    value: str


class NestedSetting(BaseModel):
    """A setting grouping an ordered list of child settings."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["nested"] = "nested"
    name: str
    children: tuple[Setting, ...] = ()


Setting = Annotated[Union[ScalarSetting, NestedSetting], Field(discriminator="kind")]

NestedSetting.model_rebuild()


class Configuration(BaseModel):
    """Immutable snapshot of a configuration tree."""

    model_config = ConfigDict(frozen=True)

    settings: tuple[Setting, ...] = ()

    def is_empty(self) -> bool:
        return not self.settings


class _Entry:
    __slots__ = ("name", "value")

    def __init__(self, name: str, value: str | ConfigurationBuilder) -> None:
        self.name = name
        self.value = value

    @property
    def is_nested(self) -> bool:
        return isinstance(self.value, ConfigurationBuilder)


class ConfigurationBuilder:
    """Mutable accumulator for a :class:`Configuration`.

    A name used for a scalar can never hold children and vice versa; mixing
    the two raises :class:`BuildModelError` at the offending call.
    """

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    def add(self, name: str, value: str | Callable[[ConfigurationBuilder], object]) -> ConfigurationBuilder:
        """Append a setting.

        Args:
            name: Name of the setting. Repeated names are allowed and keep
                their declaration order (``<arg>`` lists for instance).
            value: A scalar string, or a callable receiving a fresh nested
                builder to populate.

        Returns:
            This builder.
        """
        if callable(value):
            self._check_kind(name, nested=True)
            nested = ConfigurationBuilder()
            value(nested)
            self._entries.append(_Entry(name, nested))
        else:
            self._check_kind(name, nested=False)
            self._entries.append(_Entry(name, value))
        return self

    def configure(self, name: str, customizer: Callable[[ConfigurationBuilder], object]) -> ConfigurationBuilder:
        """Customize the nested setting *name*, creating it if necessary.

        Raises:
            BuildModelError: If *name* already holds a scalar value.
        """
        entry = self._find(name)
        if entry is None:
            entry = _Entry(name, ConfigurationBuilder())
            self._entries.append(entry)
        elif not entry.is_nested:
            raise BuildModelError(
                f"Could not customize parameter '{name}', "
                f"a single value {entry.value} is already registered"
            )
        customizer(entry.value)
        return self

    def is_empty(self) -> bool:
        return not self._entries

    def build(self) -> Configuration:
        return Configuration(settings=self._build_settings())

    def _build_settings(self) -> tuple[Setting, ...]:
        settings: list[Setting] = []
        for entry in self._entries:
            if entry.is_nested:
                settings.append(NestedSetting(name=entry.name, children=entry.value._build_settings()))
            else:
                settings.append(ScalarSetting(name=entry.name, value=entry.value))
        return tuple(settings)

    def _find(self, name: str) -> _Entry | None:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def _check_kind(self, name: str, nested: bool) -> None:
        entry = self._find(name)
        if entry is None or entry.is_nested == nested:
            return
        if nested:
            raise BuildModelError(
                f"Could not add nested parameter '{name}', "
                f"a single value {entry.value} is already registered"
            )
        raise BuildModelError(
            f"Could not add value '{name}', a nested parameter with that name is already registered"
        )
