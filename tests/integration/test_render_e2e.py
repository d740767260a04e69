"""Integration tests for rendering a JSON description to disk.

These tests run the command line entry point against the sample
description fixture and verify the generated pom.xml, Gradle scripts and
settings files. Checks compare stripped lines so they hold for any
configured indentation.

No external services are required.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from buildgen.cli import main


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _stripped_lines(path: Path) -> list[str]:
    return [line.strip() for line in path.read_text(encoding="utf-8").splitlines()]


@pytest.fixture
def rendered(description_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Render every format for the sample description and return the output dir."""
    for name in ("BUILDGEN_FORMATS", "BUILDGEN_MAVEN_INDENT", "BUILDGEN_GRADLE_INDENT"):
        monkeypatch.delenv(name, raising=False)
    out_dir = tmp_path / "demo"
    main([str(description_file), "-o", str(out_dir)])
    return out_dir


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestRenderToDisk:
    """Render the sample description and inspect each file."""

    def test_pom(self, rendered: Path) -> None:
        lines = _stripped_lines(rendered / "pom.xml")
        assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
        assert lines[-1] == "</project>"
        assert "<artifactId>spring-boot-starter-parent</artifactId>" in lines
        assert "<java.version>17</java.version>" in lines
        assert "<spring-cloud.version>2023.0.1</spring-cloud.version>" in lines
        assert "<description>Demo project for Spring Boot</description>" in lines
        assert "<scope>test</scope>" in lines
        assert "<artifactId>junit-vintage-engine</artifactId>" in lines
        assert "<version>${spring-cloud.version}</version>" in lines
        # Maven Central is implicit in a POM.
        assert "<id>maven-central</id>" not in lines
        assert "<url>https://repo.spring.io/milestone</url>" in lines

    def test_pom_dependency_order(self, rendered: Path) -> None:
        content = (rendered / "pom.xml").read_text(encoding="utf-8")
        web = content.index("<artifactId>spring-boot-starter-web</artifactId>")
        lombok = content.index("<artifactId>lombok</artifactId>")
        test = content.index("<artifactId>spring-boot-starter-test</artifactId>")
        assert web < lombok < test
        assert content.index("<dependencies>") < content.index("<dependencyManagement>")

    def test_groovy_build(self, rendered: Path) -> None:
        lines = _stripped_lines(rendered / "build.gradle")
        assert lines[:4] == ["plugins {", "id 'java'", "id 'org.springframework.boot' version '3.2.0'", "}"]
        assert "group = 'com.example'" in lines
        assert "version = '1.0.1-SNAPSHOT'" in lines
        assert "languageVersion = JavaLanguageVersion.of(17)" in lines
        assert "set('springCloudVersion', \"2023.0.1\")" in lines
        assert "annotationProcessor 'org.projectlombok:lombok'" in lines
        assert "exclude group: 'org.junit.vintage', module: 'junit-vintage-engine'" in lines
        assert 'mavenBom "org.springframework.cloud:spring-cloud-dependencies:${springCloudVersion}"' in lines
        assert "tasks.named('test') {" in lines
        assert "useJUnitPlatform()" in lines

    def test_kotlin_build(self, rendered: Path) -> None:
        lines = _stripped_lines(rendered / "build.gradle.kts")
        assert lines[:4] == ["plugins {", "java", 'id("org.springframework.boot") version "3.2.0"', "}"]
        assert 'extra["springCloudVersion"] = "2023.0.1"' in lines
        assert 'annotationProcessor("org.projectlombok:lombok")' in lines
        assert (
            'mavenBom("org.springframework.cloud:spring-cloud-dependencies:${property("springCloudVersion")}")'
            in lines
        )
        assert 'tasks.named("test") {' in lines

    def test_settings(self, rendered: Path) -> None:
        groovy = _stripped_lines(rendered / "settings.gradle")
        kotlin = _stripped_lines(rendered / "settings.gradle.kts")
        assert groovy == ["rootProject.name = 'demo'"]
        assert kotlin == ['rootProject.name = "demo"']

    def test_rendering_is_repeatable(self, rendered: Path, description_file: Path, tmp_path: Path) -> None:
        again = tmp_path / "again"
        main([str(description_file), "-o", str(again)])
        for path in rendered.iterdir():
            assert (again / path.name).read_text(encoding="utf-8") == path.read_text(encoding="utf-8")
