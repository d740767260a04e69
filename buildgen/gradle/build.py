"""The Gradle build aggregate.

One ``GradleBuild`` feeds both script dialects and the settings file.
Features that a dialect cannot express are only rejected by that dialect's
writer, so the same model can still be rendered by the other one.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from buildgen.exceptions import BuildModelError
from buildgen.gradle.configurations import GradleConfiguration, GradleConfigurationContainer
from buildgen.gradle.customization import (
    GradleExtension,
    GradleExtensionContainer,
    GradleTask,
    GradleTaskContainer,
)
from buildgen.gradle.plugin import GradlePlugin, GradlePluginContainer
from buildgen.io.indenting_writer import IndentingWriter
from buildgen.model.bom import BillOfMaterials
from buildgen.model.build import Build, BuildSettings, BuildSettingsBuilder
from buildgen.model.dependency import Dependency
from buildgen.model.repository import MavenRepository
from buildgen.model.version import VersionProperty

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class PluginMapping(BaseModel):
    """Resolves a plugin id to the module that implements it."""

    model_config = ConfigDict(frozen=True)

    id: str
    dependency: Dependency


class GradleBuildSettings(BuildSettings):
    source_compatibility: str | None = None
    toolchain: str | None = None
    plugin_mappings: tuple[PluginMapping, ...] = ()


class GradleBuildSettingsBuilder(BuildSettingsBuilder):
    snapshot_type = GradleBuildSettings

    def __init__(self) -> None:
        super().__init__()
        self._source_compatibility: str | None = None
        self._toolchain: str | None = None
        self._plugin_mappings: dict[str, PluginMapping] = {}

    def source_compatibility(self, version: str | None) -> GradleBuildSettingsBuilder:
        self._source_compatibility = version
        return self

    def toolchain(self, language_version: int | str | None) -> GradleBuildSettingsBuilder:
        """Use a Java toolchain; takes precedence over source compatibility."""
        self._toolchain = str(language_version) if language_version is not None else None
        return self

    def map_plugin(self, plugin_id: str, dependency: Dependency) -> GradleBuildSettingsBuilder:
        """Map *plugin_id* to *dependency* in the settings resolution strategy.

        Raises:
            BuildModelError: If *dependency* has no version.
        """
        if dependency.version is None:
            raise BuildModelError(f"Mapping for plugin '{plugin_id}' must have a version")
        self._plugin_mappings[plugin_id] = PluginMapping(id=plugin_id, dependency=dependency)
        return self

    def _fields(self) -> dict:
        fields = super()._fields()
        fields.update(
            source_compatibility=self._source_compatibility,
            toolchain=self._toolchain,
            plugin_mappings=tuple(self._plugin_mappings.values()),
        )
        return fields


# ---------------------------------------------------------------------------
# Buildscript & snippets
# ---------------------------------------------------------------------------


class Buildscript(BaseModel):
    model_config = ConfigDict(frozen=True)

    dependencies: tuple[str, ...] = ()
    ext: tuple[tuple[str, str], ...] = ()

    def is_empty(self) -> bool:
        return not self.dependencies and not self.ext


class BuildscriptBuilder:
    """Classpath dependencies and ``ext`` entries of the ``buildscript`` block."""

    def __init__(self) -> None:
        self._dependencies: list[str] = []
        self._ext: dict[str, str] = {}

    def dependency(self, coordinates: str) -> BuildscriptBuilder:
        self._dependencies.append(coordinates)
        return self

    def ext(self, key: str, value: str) -> BuildscriptBuilder:
        self._ext[key] = value
        return self

    def build(self) -> Buildscript:
        return Buildscript(dependencies=tuple(self._dependencies), ext=tuple(self._ext.items()))


class Snippet(BaseModel):
    """Free-form script content written after every other section."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    write: Callable[[IndentingWriter], None]
    imports: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Build
# ---------------------------------------------------------------------------


class GradleBuildSnapshot(BaseModel):
    """Immutable view of a :class:`GradleBuild`."""

    model_config = ConfigDict(frozen=True)

    settings: GradleBuildSettings
    properties: tuple[tuple[str, str], ...] = ()
    versions: tuple[tuple[VersionProperty, str], ...] = ()
    dependencies: tuple[Dependency, ...] = ()
    boms: tuple[BillOfMaterials, ...] = ()
    repositories: tuple[MavenRepository, ...] = ()
    plugin_repositories: tuple[MavenRepository, ...] = ()
    buildscript: Buildscript = Buildscript()
    plugins: tuple[GradlePlugin, ...] = ()
    configurations: tuple[GradleConfiguration, ...] = ()
    extensions: tuple[GradleExtension, ...] = ()
    tasks: tuple[GradleTask, ...] = ()
    snippets: tuple[Snippet, ...] = ()
    imports: tuple[str, ...] = ()

    @property
    def declared_plugins(self) -> list[GradlePlugin]:
        return [plugin for plugin in self.plugins if not plugin.applied]

    @property
    def applied_plugins(self) -> list[GradlePlugin]:
        return [plugin for plugin in self.plugins if plugin.applied]


class GradleBuild(Build):
    """A Gradle project under construction.

    Plain ``properties`` hold script expressions and are written verbatim in
    the ``ext`` section; version properties are written as quoted strings.

    Attributes:
        settings: Coordinates, Java level and plugin mappings.
        buildscript: ``buildscript`` block (Groovy DSL only).
        plugins: Plugins keyed by id.
        configurations: Configurations keyed by name.
        extensions: Extension blocks keyed by name.
        tasks: Task customizations by type or name.
    """

    settings: GradleBuildSettingsBuilder

    def __init__(self) -> None:
        super().__init__(GradleBuildSettingsBuilder())
        self.buildscript = BuildscriptBuilder()
        self.plugins = GradlePluginContainer()
        self.configurations = GradleConfigurationContainer()
        self.extensions = GradleExtensionContainer()
        self.tasks = GradleTaskContainer()
        self._snippets: list[Snippet] = []
        self._imports: set[str] = set()

    def import_type(self, type_name: str) -> GradleBuild:
        self._imports.add(type_name)
        return self

    def add_snippet(self, write: Callable[[IndentingWriter], None], *imports: str) -> GradleBuild:
        """Append free-form content, written last, along with the imports it needs."""
        self._snippets.append(Snippet(write=write, imports=imports))
        return self

    def snapshot(self) -> GradleBuildSnapshot:
        extensions = tuple(self.extensions.values())
        tasks = tuple(self.tasks.values())
        snippets = tuple(self._snippets)
        imports = set(self._imports)
        for block in (*extensions, *tasks):
            imports |= block.all_imported_types()
        for snippet in snippets:
            imports.update(snippet.imports)
        return GradleBuildSnapshot(
            settings=self.settings.build(),
            properties=tuple(self.properties.values()),
            versions=tuple(self.properties.versions()),
            dependencies=tuple(self.dependencies.values()),
            boms=tuple(self.boms.values()),
            repositories=tuple(self.repositories.values()),
            plugin_repositories=tuple(self.plugin_repositories.values()),
            buildscript=self.buildscript.build(),
            plugins=tuple(self.plugins.values()),
            configurations=tuple(self.configurations.values()),
            extensions=extensions,
            tasks=tasks,
            snippets=snippets,
            imports=tuple(sorted(imports)),
        )
