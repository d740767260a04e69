"""Declarative, JSON-friendly description of a project build.

A ``BuildDescription`` is what the ``buildgen`` command reads. It covers the
common part of a build (coordinates, dependencies, BOMs, repositories,
properties) plus a Maven and a Gradle section, and populates the builder API
through :meth:`BuildDescription.to_maven_build` and
:meth:`BuildDescription.to_gradle_build`.

Quick usage::

    description = BuildDescription.load("demo.json")
    pom = MavenBuildWriter().write(description.to_maven_build())
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, model_validator

from buildgen.exceptions import BuildModelError
from buildgen.gradle.build import GradleBuild
from buildgen.gradle.customization import CustomizationBuilder
from buildgen.maven.build import MavenBuild
from buildgen.maven.metadata import MavenDeveloper, MavenLicense, MavenParent, MavenScm
from buildgen.maven.plugin import ExecutionBuilder, MavenPluginBuilder
from buildgen.model.build import Build
from buildgen.model.configuration import ConfigurationBuilder
from buildgen.model.dependency import Dependency, DependencyBuilder, DependencyScope, Exclusion
from buildgen.model.repository import RepositoryCredentials
from buildgen.model.version import VersionProperty, VersionReference
from buildgen.utils import load_json

ConfigurationValue = Union[str, int, float, bool, dict[str, Any], list[Any]]


# ---------------------------------------------------------------------------
# Shared sections
# ---------------------------------------------------------------------------


class VersionPropertyDescription(BaseModel):
    """A version property and its value."""
    name: str = Field(..., description="Property name, e.g. 'spring-cloud.version'")
    value: str = Field(..., description="Version the property resolves to")
    internal: bool = Field(default=True, description="Owned by this build rather than a parent/plugin")


class Versioned(BaseModel):
    """Mixin for entries that carry a literal version or a version property."""
    version: Optional[str] = Field(default=None, description="Literal version")
    version_property: Optional[str] = Field(default=None, description="Name of a version property")
    external_property: bool = Field(
        default=False, description="The version property is provided outside this build"
    )

    @model_validator(mode="after")
    def _single_version(self) -> Versioned:
        if self.version is not None and self.version_property is not None:
            raise ValueError("Use either 'version' or 'version_property', not both")
        return self

    def version_reference(self) -> VersionReference | None:
        if self.version_property is not None:
            return VersionReference.of_property(
                VersionProperty.of(self.version_property, internal=not self.external_property)
            )
        if self.version is not None:
            return VersionReference.of_value(self.version)
        return None


class DependencyDescription(Versioned):
    """A dependency keyed by ``id``."""
    id: str = Field(..., description="Key of the dependency in the build")
    group_id: str = Field(..., description="Group of the artifact")
    artifact_id: str = Field(..., description="Name of the artifact")
    scope: Optional[DependencyScope] = Field(default=None, description="Scope, unscoped means compile")
    classifier: Optional[str] = Field(default=None)
    type: Optional[str] = Field(default=None)
    optional: bool = Field(default=False, description="Maven only")
    configuration: Optional[str] = Field(default=None, description="Gradle configuration override")
    exclusions: list[Exclusion] = Field(default_factory=list)

    def apply(self, builder: DependencyBuilder) -> None:
        builder.coordinates(self.group_id, self.artifact_id)
        builder.version(self.version_reference())
        builder.scope(self.scope)
        builder.classifier(self.classifier)
        builder.type(self.type)
        builder.optional(self.optional)
        builder.configuration(self.configuration)
        builder.exclusions(*self.exclusions)


class BomDescription(Versioned):
    """A bill of materials keyed by ``id``."""
    id: str = Field(..., description="Key of the BOM in the build")
    group_id: str
    artifact_id: str
    order: Optional[int] = Field(default=None, description="Lower orders take precedence")


class RepositoryDescription(BaseModel):
    """A Maven-layout repository; the id 'maven-central' needs no url."""
    id: str
    name: Optional[str] = None
    url: Optional[str] = None
    releases_enabled: bool = True
    snapshots_enabled: bool = False
    credentials: Optional[RepositoryCredentials] = None


# ---------------------------------------------------------------------------
# Maven section
# ---------------------------------------------------------------------------


class ExecutionDescription(BaseModel):
    id: str
    phase: Optional[str] = None
    goals: list[str] = Field(default_factory=list)
    configuration: dict[str, ConfigurationValue] = Field(default_factory=dict)


class MavenPluginDescription(BaseModel):
    group_id: str
    artifact_id: str
    version: Optional[str] = None
    extensions: bool = False
    configuration: dict[str, ConfigurationValue] = Field(
        default_factory=dict,
        description="Free-form settings; objects nest, lists repeat the element",
    )
    executions: list[ExecutionDescription] = Field(default_factory=list)


class MavenSection(BaseModel):
    """Maven-only parts of the build."""
    parent: Optional[MavenParent] = None
    packaging: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    licenses: list[MavenLicense] = Field(default_factory=list)
    developers: list[MavenDeveloper] = Field(default_factory=list)
    scm: Optional[MavenScm] = None
    add_override_if_empty: bool = False
    properties: dict[str, str] = Field(default_factory=dict, description="Maven-only properties")
    plugins: list[MavenPluginDescription] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Gradle section
# ---------------------------------------------------------------------------


class GradlePluginDescription(BaseModel):
    id: str
    version: Optional[str] = None
    apply: bool = Field(default=False, description="Render as 'apply plugin' (Groovy DSL only)")


class GradleConfigurationDescription(BaseModel):
    name: str
    declared: bool = Field(default=True, description="The build creates this configuration")
    extends_from: list[str] = Field(default_factory=list)


class InvocationDescription(BaseModel):
    target: str
    arguments: list[str] = Field(default_factory=list)


class BlockDescription(BaseModel):
    """Body of a task or extension block; values are script expressions."""
    invocations: list[InvocationDescription] = Field(default_factory=list)
    attributes: dict[str, str] = Field(default_factory=dict)
    appends: dict[str, str] = Field(default_factory=dict)
    nested: dict[str, BlockDescription] = Field(default_factory=dict)

    def apply(self, builder: CustomizationBuilder) -> None:
        for invocation in self.invocations:
            builder.invoke(invocation.target, *invocation.arguments)
        for name, value in self.attributes.items():
            builder.attribute(name, value)
        for name, value in self.appends.items():
            builder.append(name, value)
        for name, nested in self.nested.items():
            builder.nested(name, nested.apply)


class TaskDescription(BlockDescription):
    name: Optional[str] = Field(default=None, description="Customize the task with this name")
    type: Optional[str] = Field(default=None, description="Customize every task of this type")

    @model_validator(mode="after")
    def _name_or_type(self) -> TaskDescription:
        if (self.name is None) == (self.type is None):
            raise ValueError("A task needs exactly one of 'name' or 'type'")
        return self


class ExtensionDescription(BlockDescription):
    name: str


class PluginMappingDescription(BaseModel):
    id: str = Field(..., description="Plugin id requested in the plugins block")
    group_id: str
    artifact_id: str
    version: str


class GradleSection(BaseModel):
    """Gradle-only parts of the build."""
    plugins: list[GradlePluginDescription] = Field(default_factory=list)
    source_compatibility: Optional[str] = None
    toolchain: Optional[int] = None
    configurations: list[GradleConfigurationDescription] = Field(default_factory=list)
    ext: dict[str, str] = Field(default_factory=dict, description="Extra properties, values are expressions")
    buildscript_dependencies: list[str] = Field(default_factory=list)
    buildscript_ext: dict[str, str] = Field(default_factory=dict)
    extensions: list[ExtensionDescription] = Field(default_factory=list)
    tasks: list[TaskDescription] = Field(default_factory=list)
    imports: list[str] = Field(default_factory=list)
    plugin_mappings: list[PluginMappingDescription] = Field(default_factory=list)


BlockDescription.model_rebuild()
TaskDescription.model_rebuild()
ExtensionDescription.model_rebuild()


# ---------------------------------------------------------------------------
# Build description
# ---------------------------------------------------------------------------


class BuildDescription(BaseModel):
    """A whole project, independent of the build system."""
    group: str = Field(..., description="Project group id, e.g. 'com.example'")
    artifact: str = Field(..., description="Project artifact id, e.g. 'demo'")
    version: str = Field(default="0.0.1-SNAPSHOT")
    version_properties: list[VersionPropertyDescription] = Field(default_factory=list)
    dependencies: list[DependencyDescription] = Field(default_factory=list)
    boms: list[BomDescription] = Field(default_factory=list)
    repositories: list[RepositoryDescription] = Field(default_factory=list)
    plugin_repositories: list[RepositoryDescription] = Field(default_factory=list)
    maven: MavenSection = Field(default_factory=MavenSection)
    gradle: GradleSection = Field(default_factory=GradleSection)

    @classmethod
    def load(cls, path: str | Path) -> BuildDescription:
        """Read and validate a JSON description."""
        return cls.model_validate(load_json(path))

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def to_maven_build(self) -> MavenBuild:
        build = MavenBuild()
        self._populate(build)
        maven = self.maven
        settings = build.settings
        if maven.parent is not None:
            parent = maven.parent
            settings.parent(parent.group_id, parent.artifact_id, parent.version, parent.relative_path)
        settings.packaging(maven.packaging).name(maven.name).description(maven.description).url(maven.url)
        settings.licenses(*maven.licenses).developers(*maven.developers)
        if maven.scm is not None:
            settings.scm(**maven.scm.model_dump())
        settings.add_override_if_empty(maven.add_override_if_empty)
        for name, value in maven.properties.items():
            build.properties.property(name, value)
        for plugin in maven.plugins:
            build.plugins.add(plugin.group_id, plugin.artifact_id, lambda builder, p=plugin: _apply_plugin(builder, p))
        return build

    def to_gradle_build(self) -> GradleBuild:
        build = GradleBuild()
        self._populate(build)
        gradle = self.gradle
        build.settings.source_compatibility(gradle.source_compatibility).toolchain(gradle.toolchain)
        for mapping in gradle.plugin_mappings:
            build.settings.map_plugin(
                mapping.id,
                Dependency(
                    group_id=mapping.group_id,
                    artifact_id=mapping.artifact_id,
                    version=VersionReference.of_value(mapping.version),
                ),
            )
        for plugin in gradle.plugins:
            if plugin.apply:
                build.plugins.apply(plugin.id)
            else:
                build.plugins.add(plugin.id, plugin.version)
        for configuration in gradle.configurations:
            if configuration.declared:
                build.configurations.add(configuration.name).extends_from(*configuration.extends_from)
            else:
                build.configurations.customize(configuration.name).extends_from(*configuration.extends_from)
        for name, value in gradle.ext.items():
            build.properties.property(name, value)
        for coordinates in gradle.buildscript_dependencies:
            build.buildscript.dependency(coordinates)
        for key, value in gradle.buildscript_ext.items():
            build.buildscript.ext(key, value)
        for extension in gradle.extensions:
            build.extensions.customize(extension.name, extension.apply)
        for task in gradle.tasks:
            if task.type is not None:
                build.tasks.customize_with_type(task.type, task.apply)
            else:
                build.tasks.customize(task.name, task.apply)
        for imported_type in gradle.imports:
            build.import_type(imported_type)
        return build

    def _populate(self, build: Build) -> None:
        build.settings.coordinates(self.group, self.artifact).version(self.version)
        for prop in self.version_properties:
            build.properties.version(VersionProperty.of(prop.name, internal=prop.internal), prop.value)
        for dependency in self.dependencies:
            build.dependencies.customize(dependency.id, dependency.apply)
        for bom in self.boms:
            build.boms.add(bom.id, bom.group_id, bom.artifact_id, bom.version_reference(), bom.order)
        for container, repositories in (
            (build.repositories, self.repositories),
            (build.plugin_repositories, self.plugin_repositories),
        ):
            for repository in repositories:
                builder = container.add(repository.id, repository.name, repository.url)
                builder.releases_enabled(repository.releases_enabled)
                builder.snapshots_enabled(repository.snapshots_enabled)
                if repository.credentials is not None:
                    builder.credentials(repository.credentials.username, repository.credentials.password)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _apply_plugin(builder: MavenPluginBuilder, plugin: MavenPluginDescription) -> None:
    builder.version(plugin.version).extensions(plugin.extensions)
    if plugin.configuration:
        builder.configuration(lambda configuration: apply_configuration(configuration, plugin.configuration))
    for execution in plugin.executions:
        builder.execution(execution.id, lambda target, e=execution: _apply_execution(target, e))


def _apply_execution(builder: ExecutionBuilder, execution: ExecutionDescription) -> None:
    builder.phase(execution.phase)
    for goal in execution.goals:
        builder.goal(goal)
    if execution.configuration:
        builder.configuration(lambda configuration: apply_configuration(configuration, execution.configuration))


def apply_configuration(builder: ConfigurationBuilder, values: dict[str, Any]) -> None:
    """Translate JSON values into configuration settings.

    Objects become nested settings, lists repeat the setting once per item and
    every other value becomes a scalar (booleans as ``true``/``false``).
    A ``null`` anywhere in the tree raises :class:`BuildModelError`.
    """
    for name, value in values.items():
        _add_setting(builder, name, value)


def _add_setting(builder: ConfigurationBuilder, name: str, value: Any) -> None:
    if value is None:
        raise BuildModelError(f"Configuration value '{name}' must not be null")
    if isinstance(value, dict):
        builder.add(name, lambda nested: apply_configuration(nested, value))
    elif isinstance(value, list):
        for item in value:
            _add_setting(builder, name, item)
    elif isinstance(value, bool):
        builder.add(name, "true" if value else "false")
    else:
        builder.add(name, str(value))
