"""Unit tests for version properties and references (buildgen.model.version).

Tests cover:
- Standard and camel-case rendering of property names
- Character validation of property names
- Exactly-one rule of VersionReference
- Immutability and ordering
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from buildgen.model import VersionProperty, VersionReference


class TestVersionProperty:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("name", "camel"),
        [
            ("spring-boot.version", "springBootVersion"),
            ("kotlin.version", "kotlinVersion"),
            ("version", "version"),
            ("a1-b2.c3", "a1B2C3"),
        ],
    )
    def test_camel_case(self, name, camel):
        assert VersionProperty.of(name).to_camel_case_format() == camel

    @pytest.mark.unit
    def test_standard_format(self):
        assert VersionProperty.of("spring-boot.version").to_standard_format() == "spring-boot.version"

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["Spring.version", "spring_boot", "spring boot", "kotlin/version", ""])
    def test_invalid_characters(self, name):
        with pytest.raises(ValidationError):
            VersionProperty.of(name)

    @pytest.mark.unit
    def test_internal_by_default(self):
        assert VersionProperty.of("a.version").internal is True
        assert VersionProperty.of("a.version", internal=False).internal is False

    @pytest.mark.unit
    def test_frozen(self):
        prop = VersionProperty.of("a.version")
        with pytest.raises(ValidationError):
            prop.name = "b.version"

    @pytest.mark.unit
    def test_sortable(self):
        names = ["b.version", "a.version", "c.version"]
        ordered = sorted(VersionProperty.of(name) for name in names)
        assert [str(prop) for prop in ordered] == ["a.version", "b.version", "c.version"]


class TestVersionReference:
    @pytest.mark.unit
    def test_literal(self):
        reference = VersionReference.of_value("1.0")
        assert not reference.is_property
        assert str(reference) == "1.0"

    @pytest.mark.unit
    def test_property_from_string(self):
        reference = VersionReference.of_property("kotlin.version")
        assert reference.is_property
        assert reference.version_property.internal is True
        assert str(reference) == "${kotlin.version}"

    @pytest.mark.unit
    def test_neither_value_nor_property(self):
        with pytest.raises(ValidationError):
            VersionReference()

    @pytest.mark.unit
    def test_both_value_and_property(self):
        with pytest.raises(ValidationError):
            VersionReference(value="1.0", version_property=VersionProperty.of("a.version"))

    @pytest.mark.unit
    def test_property_name_validated(self):
        with pytest.raises(ValidationError):
            VersionReference.of_property("Invalid")
