"""Shared pytest fixtures for the buildgen test suite.

Provides reusable fixtures for:
- Rendering helpers returning output as text or lines
- A minimal demo build for each build system
- A full JSON build description on disk
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from buildgen.gradle import GradleBuild, GradleBuildWriter, GradleSettingsWriter
from buildgen.maven import MavenBuild, MavenBuildWriter


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------

def lines_of(text: str) -> list[str]:
    return text.splitlines()


@pytest.fixture
def render_pom():
    """Render a Maven build with four-space indentation and return its lines."""
    def _render(build: MavenBuild) -> list[str]:
        return lines_of(MavenBuildWriter().write(build))
    return _render


@pytest.fixture
def render_groovy():
    """Render a Gradle build with the Groovy DSL and return its lines."""
    def _render(build: GradleBuild) -> list[str]:
        return lines_of(GradleBuildWriter.groovy().write(build))
    return _render


@pytest.fixture
def render_kotlin():
    """Render a Gradle build with the Kotlin DSL and return its lines."""
    def _render(build: GradleBuild) -> list[str]:
        return lines_of(GradleBuildWriter.kotlin().write(build))
    return _render


@pytest.fixture
def render_settings():
    """Render Gradle settings; ``kotlin=True`` selects the Kotlin DSL."""
    def _render(build: GradleBuild, kotlin: bool = False) -> list[str]:
        writer = GradleSettingsWriter.kotlin() if kotlin else GradleSettingsWriter.groovy()
        return lines_of(writer.write(build))
    return _render


def contains_sequence(lines: list[str], *expected: str) -> bool:
    """True when *expected* appears in *lines* as consecutive lines."""
    size = len(expected)
    return any(tuple(lines[i:i + size]) == expected for i in range(len(lines) - size + 1))


@pytest.fixture
def sequence():
    """Expose :func:`contains_sequence` to tests."""
    return contains_sequence


# ---------------------------------------------------------------------------
# Builds
# ---------------------------------------------------------------------------

@pytest.fixture
def maven_build() -> MavenBuild:
    """Maven build with com.example:demo:0.0.1-SNAPSHOT coordinates."""
    build = MavenBuild()
    build.settings.coordinates("com.example", "demo").version("0.0.1-SNAPSHOT")
    return build


@pytest.fixture
def gradle_build() -> GradleBuild:
    """Gradle build with com.example:demo:0.0.1-SNAPSHOT coordinates."""
    build = GradleBuild()
    build.settings.coordinates("com.example", "demo").version("0.0.1-SNAPSHOT")
    return build


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_description_data() -> dict[str, Any]:
    """A description exercising the common, Maven and Gradle sections."""
    return {
        "group": "com.example",
        "artifact": "demo",
        "version": "1.0.1-SNAPSHOT",
        "version_properties": [
            {"name": "spring-cloud.version", "value": "2023.0.1"},
        ],
        "dependencies": [
            {"id": "web", "group_id": "org.springframework.boot", "artifact_id": "spring-boot-starter-web"},
            {
                "id": "lombok",
                "group_id": "org.projectlombok",
                "artifact_id": "lombok",
                "scope": "annotation-processor",
            },
            {
                "id": "test",
                "group_id": "org.springframework.boot",
                "artifact_id": "spring-boot-starter-test",
                "scope": "test-compile",
                "exclusions": [{"group_id": "org.junit.vintage", "artifact_id": "junit-vintage-engine"}],
            },
        ],
        "boms": [
            {
                "id": "spring-cloud",
                "group_id": "org.springframework.cloud",
                "artifact_id": "spring-cloud-dependencies",
                "version_property": "spring-cloud.version",
                "order": 1,
            },
        ],
        "repositories": [
            {"id": "maven-central"},
            {"id": "spring-milestones", "name": "Spring Milestones", "url": "https://repo.spring.io/milestone"},
        ],
        "maven": {
            "parent": {
                "group_id": "org.springframework.boot",
                "artifact_id": "spring-boot-starter-parent",
                "version": "3.2.0",
            },
            "name": "demo",
            "description": "Demo project for Spring Boot",
            "properties": {"java.version": "17"},
            "plugins": [
                {"group_id": "org.springframework.boot", "artifact_id": "spring-boot-maven-plugin"},
            ],
        },
        "gradle": {
            "plugins": [
                {"id": "java"},
                {"id": "org.springframework.boot", "version": "3.2.0"},
            ],
            "toolchain": 17,
            "tasks": [
                {"name": "test", "invocations": [{"target": "useJUnitPlatform"}]},
            ],
        },
    }


@pytest.fixture
def description_file(tmp_path: Path, sample_description_data: dict[str, Any]) -> Path:
    """The sample description written to a temporary JSON file."""
    path = tmp_path / "demo.json"
    path.write_text(json.dumps(sample_description_data, indent=2), encoding="utf-8")
    return path
