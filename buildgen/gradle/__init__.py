"""Gradle build model, script writers and settings writer.

Quick usage::

    from buildgen.gradle import GradleBuild, GradleBuildWriter

    build = GradleBuild()
    build.settings.coordinates("com.example", "demo").version("0.0.1-SNAPSHOT")
    build.plugins.add("java")
    build.repositories.add("maven-central")
    print(GradleBuildWriter.kotlin().write(build))
"""

from buildgen.gradle.build import (
    Buildscript,
    BuildscriptBuilder,
    GradleBuild,
    GradleBuildSettings,
    GradleBuildSettingsBuilder,
    GradleBuildSnapshot,
    PluginMapping,
    Snippet,
)
from buildgen.gradle.configurations import (
    GradleConfiguration,
    GradleConfigurationBuilder,
    GradleConfigurationContainer,
)
from buildgen.gradle.customization import (
    Attribute,
    AttributeType,
    Customization,
    CustomizationBuilder,
    GradleExtension,
    GradleExtensionBuilder,
    GradleExtensionContainer,
    GradleTask,
    GradleTaskBuilder,
    GradleTaskContainer,
    Invocation,
)
from buildgen.gradle.dialect import (
    GROOVY,
    KOTLIN,
    SCOPE_CONFIGURATIONS,
    GradleDialect,
    GroovyDsl,
    KotlinDsl,
    configuration_for,
    java_version_constant,
)
from buildgen.gradle.plugin import GradlePlugin, GradlePluginBuilder, GradlePluginContainer
from buildgen.gradle.settings_writer import GradleSettingsWriter
from buildgen.gradle.writer import GradleBuildWriter

__all__ = [
    "Attribute",
    "AttributeType",
    "Buildscript",
    "BuildscriptBuilder",
    "Customization",
    "CustomizationBuilder",
    "GROOVY",
    "GradleBuild",
    "GradleBuildSettings",
    "GradleBuildSettingsBuilder",
    "GradleBuildSnapshot",
    "GradleBuildWriter",
    "GradleConfiguration",
    "GradleConfigurationBuilder",
    "GradleConfigurationContainer",
    "GradleDialect",
    "GradleExtension",
    "GradleExtensionBuilder",
    "GradleExtensionContainer",
    "GradlePlugin",
    "GradlePluginBuilder",
    "GradlePluginContainer",
    "GradleSettingsWriter",
    "GradleTask",
    "GradleTaskBuilder",
    "GradleTaskContainer",
    "GroovyDsl",
    "Invocation",
    "KOTLIN",
    "KotlinDsl",
    "PluginMapping",
    "SCOPE_CONFIGURATIONS",
    "Snippet",
    "configuration_for",
    "java_version_constant",
]
