"""Render a :class:`GradleBuild` as a Groovy or Kotlin build script.

Both dialects share the section order below; each section is skipped when it
has nothing to write and emitted sections are separated by one blank line:

1. imports
2. buildscript
3. plugins and applied plugins
4. group and version
5. java toolchain or source compatibility
6. configurations
7. repositories
8. extra properties
9. dependencies
10. BOM imports
11. extensions
12. tasks
13. snippets

The dialect validates the whole snapshot before the first line is written.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Sequence

from buildgen.exceptions import DialectError
from buildgen.gradle.build import GradleBuild, GradleBuildSnapshot
from buildgen.gradle.customization import Customization, GradleTask
from buildgen.gradle.dialect import GROOVY, KOTLIN, GradleDialect
from buildgen.io.indenting_writer import IndentingWriter, IndentingWriterFactory
from buildgen.model.bom import order_boms
from buildgen.model.dependency import (
    SCRIPT_SCOPE_GROUPS,
    Dependency,
    DependencySortKey,
    default_sort_key,
    order_dependencies,
)

logger = logging.getLogger(__name__)

Section = tuple[str, bool, Callable[[], None]]


class GradleBuildWriter:
    """Write ``build.gradle`` or ``build.gradle.kts`` content.

    Args:
        dialect: Statement syntax to use, :data:`GROOVY` by default.
        sort_key: Orders dependencies within a scope group.
    """

    content_id = "gradle"

    def __init__(self, dialect: GradleDialect = GROOVY, sort_key: DependencySortKey = default_sort_key) -> None:
        self.dialect = dialect
        self.sort_key = sort_key

    @classmethod
    def groovy(cls) -> GradleBuildWriter:
        return cls(GROOVY)

    @classmethod
    def kotlin(cls) -> GradleBuildWriter:
        return cls(KOTLIN)

    def write(self, build: GradleBuild | GradleBuildSnapshot, factory: IndentingWriterFactory | None = None) -> str:
        """Render *build* and return the script as a string."""
        out = io.StringIO()
        factory = factory or IndentingWriterFactory.with_default_settings()
        self.write_to(factory.create_indenting_writer(self.content_id, out), build)
        return out.getvalue()

    def write_to(self, writer: IndentingWriter, build: GradleBuild | GradleBuildSnapshot) -> None:
        """Render *build* to *writer*.

        Raises:
            DialectError: If the build uses features the dialect cannot
                express. Nothing has been written when this is raised.
        """
        snapshot = build.snapshot() if isinstance(build, GradleBuild) else build
        problems = self.dialect.validate(snapshot)
        if problems:
            raise DialectError(self.dialect.build_file_name, problems)
        first = True
        for name, applies, write in self._sections(writer, snapshot):
            if not applies:
                continue
            logger.debug("Writing %s section of %s", name, self.dialect.build_file_name)
            if not first:
                writer.println()
            write()
            first = False

    def _sections(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> list[Section]:
        settings = snapshot.settings
        return [
            ("imports", bool(snapshot.imports), lambda: self._write_imports(writer, snapshot)),
            (
                "buildscript",
                not snapshot.buildscript.is_empty(),
                lambda: self._write_buildscript(writer, snapshot),
            ),
            ("plugins", bool(snapshot.plugins), lambda: self._write_plugins(writer, snapshot)),
            (
                "coordinates",
                settings.group is not None or settings.version is not None,
                lambda: self._write_coordinates(writer, snapshot),
            ),
            (
                "java",
                settings.toolchain is not None or settings.source_compatibility is not None,
                lambda: self._write_java(writer, snapshot),
            ),
            (
                "configurations",
                any(c.declared or c.extends_from for c in snapshot.configurations),
                lambda: self._write_configurations(writer, snapshot),
            ),
            (
                "repositories",
                bool(snapshot.repositories),
                lambda: self._write_repositories(writer, snapshot),
            ),
            (
                "properties",
                bool(snapshot.properties or snapshot.versions),
                lambda: self._write_properties(writer, snapshot),
            ),
            (
                "dependencies",
                bool(snapshot.dependencies),
                lambda: self._write_dependencies(writer, snapshot.dependencies),
            ),
            ("boms", bool(snapshot.boms), lambda: self._write_boms(writer, snapshot)),
            ("extensions", bool(snapshot.extensions), lambda: self._write_extensions(writer, snapshot)),
            ("tasks", bool(snapshot.tasks), lambda: self._write_tasks(writer, snapshot.tasks)),
            ("snippets", bool(snapshot.snippets), lambda: self._write_snippets(writer, snapshot)),
        ]

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _write_imports(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        for imported_type in snapshot.imports:
            writer.println(f"import {imported_type}")

    def _write_buildscript(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        buildscript = snapshot.buildscript
        writer.println("buildscript {")
        with writer.indented():
            self._write_block(writer, "ext", [f"{key} = {value}" for key, value in buildscript.ext])
            self._write_block(writer, "repositories", [self.dialect.repository(r) for r in snapshot.repositories])
            self._write_block(
                writer, "dependencies", [f"classpath {self.dialect.quote(d)}" for d in buildscript.dependencies]
            )
        writer.println("}")

    def _write_plugins(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        self._write_block(writer, "plugins", [self.dialect.plugin(p) for p in snapshot.declared_plugins])
        for plugin in snapshot.applied_plugins:
            writer.println(self.dialect.applied_plugin(plugin))

    def _write_coordinates(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        settings = snapshot.settings
        if settings.group is not None:
            writer.println(self.dialect.assignment("group", settings.group))
        if settings.version is not None:
            writer.println(self.dialect.assignment("version", settings.version))

    def _write_java(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        settings = snapshot.settings
        writer.println("java {")
        with writer.indented():
            if settings.toolchain is not None:
                writer.println("toolchain {")
                with writer.indented():
                    writer.println(f"languageVersion = JavaLanguageVersion.of({settings.toolchain})")
                writer.println("}")
            else:
                writer.println(self.dialect.source_compatibility(settings.source_compatibility))
        writer.println("}")

    def _write_configurations(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        declared = [c.name for c in snapshot.configurations if c.declared]
        in_block = []
        for configuration in snapshot.configurations:
            declaration = self.dialect.configuration_declaration(configuration.name) if configuration.declared else None
            if declaration is not None:
                writer.println(declaration)
                if configuration.extends_from:
                    in_block.append(configuration)
            elif configuration.declared or configuration.extends_from:
                in_block.append(configuration)
        if not in_block:
            return
        writer.println("configurations {")
        with writer.indented():
            for configuration in in_block:
                if not configuration.extends_from:
                    writer.println(configuration.name)
                    continue
                writer.println(f"{configuration.name} {{")
                with writer.indented():
                    writer.println(self.dialect.extends_from(configuration.extends_from, declared))
                writer.println("}")
        writer.println("}")

    def _write_repositories(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        self._write_block(writer, "repositories", [self.dialect.repository(r) for r in snapshot.repositories])

    def _write_properties(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        entries = list(snapshot.properties)
        for prop, value in snapshot.versions:
            key = prop.to_camel_case_format() if prop.internal else prop.to_standard_format()
            entries.append((key, f'"{value}"'))
        lines = [self.dialect.ext_entry(key, value) for key, value in entries]
        if self.dialect.ext_block is None:
            for line in lines:
                writer.println(line)
        else:
            self._write_block(writer, self.dialect.ext_block, lines)

    def _write_dependencies(self, writer: IndentingWriter, dependencies: Sequence[Dependency]) -> None:
        writer.println("dependencies {")
        with writer.indented():
            for dependency in order_dependencies(dependencies, SCRIPT_SCOPE_GROUPS, self.sort_key):
                statement = self.dialect.dependency(dependency)
                if not dependency.exclusions:
                    writer.println(statement)
                    continue
                writer.println(f"{statement} {{")
                with writer.indented():
                    for exclusion in dependency.exclusions:
                        writer.println(self.dialect.exclusion(exclusion))
                writer.println("}")
        writer.println("}")

    def _write_boms(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        boms = order_boms(snapshot.boms, descending=True)
        writer.println("dependencyManagement {")
        with writer.indented():
            self._write_block(writer, "imports", [self.dialect.bom(bom) for bom in boms])
        writer.println("}")

    def _write_extensions(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        for index, extension in enumerate(snapshot.extensions):
            if index:
                writer.println()
            self._write_customization(writer, f"{extension.name} {{", extension)

    def _write_tasks(self, writer: IndentingWriter, tasks: Sequence[GradleTask]) -> None:
        for index, task in enumerate(tasks):
            if index:
                writer.println()
            if task.type is not None:
                header = self.dialect.typed_task(task.name)
            else:
                header = self.dialect.named_task(task.name)
            self._write_customization(writer, header, task)

    def _write_snippets(self, writer: IndentingWriter, snapshot: GradleBuildSnapshot) -> None:
        for index, snippet in enumerate(snapshot.snippets):
            if index:
                writer.println()
            snippet.write(writer)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _write_customization(self, writer: IndentingWriter, header: str, customization: Customization) -> None:
        writer.println(header)
        with writer.indented():
            self._write_customization_body(writer, customization)
        writer.println("}")

    def _write_customization_body(self, writer: IndentingWriter, customization: Customization) -> None:
        for invocation in customization.invocations:
            writer.println(self.dialect.invocation(invocation))
        for attribute in customization.attributes:
            writer.println(f"{attribute.name} {attribute.operator} {attribute.value}")
        for nested in customization.nested:
            self._write_customization(writer, f"{nested.name} {{", nested)

    def _write_block(self, writer: IndentingWriter, name: str, lines: Sequence[str]) -> None:
        if not lines:
            return
        writer.println(f"{name} {{")
        with writer.indented():
            for line in lines:
                writer.println(line)
        writer.println("}")
