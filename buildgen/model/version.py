"""Version properties and references.

A version is either a literal (``3.2.0``) or a reference to a named property
(``${kotlin.version}``). Property names are restricted to lowercase letters,
digits, dots and dashes so they can be rendered in every target grammar.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

_TOKEN_SEPARATOR = re.compile(r"[-.]")


class VersionProperty(BaseModel):
    """A named version property.

    Internal properties are owned by the generated build and are rendered with
    the dialect's native naming (camel case in scripts). External properties
    are provided by a plugin or parent and keep their standard name.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    internal: bool = True

    @field_validator("name")
    @classmethod
    def _check_characters(cls, value: str) -> str:
        if not value:
            raise ValueError("Version property name must not be empty")
        for char in value:
            if not (char.islower() or char.isdigit() or char in ".-"):
                raise ValueError(f"Unsupported character '{char}' for '{value}'")
        return value

    @classmethod
    def of(cls, name: str, internal: bool = True) -> VersionProperty:
        """Create a property, validating *name*."""
        return cls(name=name, internal=internal)

    def to_standard_format(self) -> str:
        """Return the name as declared, e.g. ``spring-boot.version``."""
        return self.name

    def to_camel_case_format(self) -> str:
        """Return the camel-cased name, e.g. ``springBootVersion``."""
        tokens = _TOKEN_SEPARATOR.split(self.name)
        return tokens[0] + "".join(token[:1].upper() + token[1:] for token in tokens[1:])

    def __lt__(self, other: VersionProperty) -> bool:
        return self.name < other.name

    def __str__(self) -> str:
        return self.name


class VersionReference(BaseModel):
    """Either a literal version or a reference to a :class:`VersionProperty`."""

    model_config = ConfigDict(frozen=True)

    value: str | None = None
    version_property: VersionProperty | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> VersionReference:
        if (self.value is None) == (self.version_property is None):
            raise ValueError("A version reference needs either a value or a property")
        return self

    @classmethod
    def of_value(cls, value: str) -> VersionReference:
        return cls(value=value)

    @classmethod
    def of_property(cls, prop: VersionProperty | str) -> VersionReference:
        """Reference *prop*; a plain string is treated as an internal property."""
        if isinstance(prop, str):
            prop = VersionProperty.of(prop)
        return cls(version_property=prop)

    @property
    def is_property(self) -> bool:
        return self.version_property is not None

    def __str__(self) -> str:
        if self.version_property is not None:
            return "${" + self.version_property.to_standard_format() + "}"
        return self.value or ""
