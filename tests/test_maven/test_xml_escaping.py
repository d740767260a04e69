"""Unit tests for XML text escaping (buildgen.maven.writer.escape_xml).

Tests cover:
- Each of the five special characters
- Single-pass replacement (no double escaping)
- Characters outside the special set are preserved
- Escaping applied to element text in a rendered pom
"""

from __future__ import annotations

import pytest

from buildgen.maven import escape_xml


class TestEscapeXml:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "escaped"),
        [
            ("'", "&apos;"),
            ('"', "&quot;"),
            ("<", "&lt;"),
            (">", "&gt;"),
            ("&", "&amp;"),
        ],
    )
    def test_special_characters(self, raw, escaped):
        assert escape_xml(raw) == escaped

    @pytest.mark.unit
    def test_existing_entities_are_escaped_once(self):
        assert escape_xml("&lt;") == "&amp;lt;"

    @pytest.mark.unit
    def test_other_characters_are_kept(self):
        text = "Démo été 日本 \t tab / slash ${property}"
        assert escape_xml(text) == text

    @pytest.mark.unit
    def test_empty_string(self):
        assert escape_xml("") == ""

    @pytest.mark.unit
    def test_property_values_are_escaped(self, maven_build, render_pom):
        maven_build.properties.property("argLine", "-Dfoo=\"a&b\"")
        assert "        <argLine>-Dfoo=&quot;a&amp;b&quot;</argLine>" in render_pom(maven_build)
