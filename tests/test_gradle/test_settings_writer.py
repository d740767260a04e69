"""Unit tests for GradleSettingsWriter (buildgen.gradle.settings_writer).

Tests cover:
- Root project name only
- pluginManagement with repositories and credentials
- Plugin resolution mappings in both dialects
- Mapping without a version is rejected
"""

from __future__ import annotations

import pytest

from buildgen.exceptions import BuildModelError
from buildgen.model import Dependency, VersionReference


def mapping_dependency(version: str | None = "1.0") -> Dependency:
    return Dependency(
        group_id="org.example",
        artifact_id="example-plugin",
        version=VersionReference.of_value(version) if version else None,
    )


class TestRootProject:
    @pytest.mark.unit
    def test_groovy(self, gradle_build, render_settings):
        assert render_settings(gradle_build) == ["rootProject.name = 'demo'"]

    @pytest.mark.unit
    def test_kotlin(self, gradle_build, render_settings):
        assert render_settings(gradle_build, kotlin=True) == ['rootProject.name = "demo"']


class TestPluginManagement:
    @pytest.mark.unit
    def test_repositories_groovy(self, gradle_build, render_settings):
        gradle_build.plugin_repositories.add("maven-central")
        gradle_build.plugin_repositories.add("spring-milestones", url="https://repo.spring.io/milestone")
        assert render_settings(gradle_build) == [
            "pluginManagement {",
            "    repositories {",
            "        mavenCentral()",
            "        maven { url 'https://repo.spring.io/milestone' }",
            "        gradlePluginPortal()",
            "    }",
            "}",
            "rootProject.name = 'demo'",
        ]

    @pytest.mark.unit
    def test_repository_with_credentials_kotlin(self, gradle_build, render_settings):
        gradle_build.plugin_repositories.add("private", url="https://repo.example.com").credentials("user", "secret")
        assert render_settings(gradle_build, kotlin=True) == [
            "pluginManagement {",
            "    repositories {",
            "        maven {",
            '            url = uri("https://repo.example.com")',
            "            credentials {",
            '                username = "user"',
            '                password = "secret"',
            "            }",
            "        }",
            "        gradlePluginPortal()",
            "    }",
            "}",
            'rootProject.name = "demo"',
        ]

    @pytest.mark.unit
    def test_mapping_groovy(self, gradle_build, render_settings):
        gradle_build.settings.map_plugin("org.example.plugin", mapping_dependency())
        assert render_settings(gradle_build) == [
            "pluginManagement {",
            "    repositories {",
            "        gradlePluginPortal()",
            "    }",
            "    resolutionStrategy {",
            "        eachPlugin {",
            "            if (requested.id.id == 'org.example.plugin') {",
            "                useModule('org.example:example-plugin:1.0')",
            "            }",
            "        }",
            "    }",
            "}",
            "rootProject.name = 'demo'",
        ]

    @pytest.mark.unit
    def test_mapping_kotlin(self, gradle_build, render_settings, sequence):
        gradle_build.settings.map_plugin("org.example.plugin", mapping_dependency())
        assert sequence(
            render_settings(gradle_build, kotlin=True),
            "        eachPlugin {",
            '            if (requested.id.id == "org.example.plugin") {',
            '                useModule("org.example:example-plugin:1.0")',
            "            }",
            "        }",
        )

    @pytest.mark.unit
    def test_mapping_requires_version(self, gradle_build):
        with pytest.raises(BuildModelError, match="Mapping for plugin 'org.example.plugin' must have a version"):
            gradle_build.settings.map_plugin("org.example.plugin", mapping_dependency(None))

    @pytest.mark.unit
    def test_mapping_replaced_by_id(self, gradle_build):
        gradle_build.settings.map_plugin("org.example.plugin", mapping_dependency("1.0"))
        gradle_build.settings.map_plugin("org.example.plugin", mapping_dependency("2.0"))
        (mapping,) = gradle_build.snapshot().settings.plugin_mappings
        assert mapping.dependency.version.value == "2.0"
