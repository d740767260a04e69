"""Render the ``settings.gradle`` / ``settings.gradle.kts`` companion file.

The file holds an optional ``pluginManagement`` block (plugin repositories and
plugin id to module mappings) followed by the root project name.
"""

from __future__ import annotations

import io
import logging

from buildgen.gradle.build import GradleBuild, GradleBuildSnapshot
from buildgen.gradle.dialect import GROOVY, KOTLIN, GradleDialect
from buildgen.io.indenting_writer import IndentingWriter, IndentingWriterFactory
from buildgen.model.repository import MavenRepository

logger = logging.getLogger(__name__)


class GradleSettingsWriter:
    """Write Gradle settings content in the syntax of *dialect*."""

    content_id = "gradle-settings"

    def __init__(self, dialect: GradleDialect = GROOVY) -> None:
        self.dialect = dialect

    @classmethod
    def groovy(cls) -> GradleSettingsWriter:
        return cls(GROOVY)

    @classmethod
    def kotlin(cls) -> GradleSettingsWriter:
        return cls(KOTLIN)

    def write(self, build: GradleBuild | GradleBuildSnapshot, factory: IndentingWriterFactory | None = None) -> str:
        out = io.StringIO()
        factory = factory or IndentingWriterFactory.with_default_settings()
        self.write_to(factory.create_indenting_writer(self.content_id, out), build)
        return out.getvalue()

    def write_to(self, writer: IndentingWriter, build: GradleBuild | GradleBuildSnapshot) -> None:
        snapshot = build.snapshot() if isinstance(build, GradleBuild) else build
        logger.debug("Writing %s", self.dialect.settings_file_name)
        self._write_plugin_management(writer, snapshot)
        writer.println("rootProject.name = " + self.dialect.quote(snapshot.settings.artifact or ""))

    def _write_plugin_management(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        mappings = snapshot.settings.plugin_mappings
        if not snapshot.plugin_repositories and not mappings:
            return
        writer.println("pluginManagement {")
        with writer.indented():
            writer.println("repositories {")
            with writer.indented():
                for repository in snapshot.plugin_repositories:
                    self._write_repository(writer, repository)
                writer.println("gradlePluginPortal()")
            writer.println("}")
            if mappings:
                writer.println("resolutionStrategy {")
                with writer.indented():
                    writer.println("eachPlugin {")
                    with writer.indented():
                        for mapping in mappings:
                            writer.println(self.dialect.plugin_request(mapping.id))
                            with writer.indented():
                                writer.println(self.dialect.use_module(mapping.dependency))
                            writer.println("}")
                    writer.println("}")
                writer.println("}")
        writer.println("}")

    def _write_repository(self, writer: IndentingWriter, repository: MavenRepository) -> None:
        credentials = repository.credentials
        if repository.is_maven_central or credentials is None:
            writer.println(self.dialect.repository(repository))
            return
        writer.println("maven {")
        with writer.indented():
            writer.println(self.dialect.repository_url(repository.url))
            writer.println("credentials {")
            with writer.indented():
                writer.println(self.dialect.assignment("username", credentials.username))
                writer.println(self.dialect.assignment("password", credentials.password))
            writer.println("}")
        writer.println("}")
