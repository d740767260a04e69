"""Maven profiles.

A profile carries its own activation predicate plus a nested copy of most
top-level sections of the POM: properties, modules, dependencies, BOMs,
build, repositories, distribution management and reporting.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from buildgen.maven.distribution import MavenDistributionManagement, MavenDistributionManagementBuilder
from buildgen.maven.plugin import MavenPlugin, MavenPluginContainer
from buildgen.maven.reporting import MavenReporting, MavenReportingBuilder
from buildgen.maven.resource import MavenResource, MavenResourceContainer
from buildgen.model.bom import BillOfMaterials, BomContainer
from buildgen.model.container import BuilderContainer
from buildgen.model.dependency import Dependency, DependencyContainer
from buildgen.model.properties import PropertyContainer
from buildgen.model.repository import MavenRepository, RepositoryContainer
from buildgen.model.version import VersionProperty

# ---------------------------------------------------------------------------
# Activation
# ---------------------------------------------------------------------------


class ActivationOs(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    family: str | None = None
    arch: str | None = None
    version: str | None = None


class ActivationProperty(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str | None = None


class ActivationFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    exists: str | None = None
    missing: str | None = None


class MavenProfileActivation(BaseModel):
    model_config = ConfigDict(frozen=True)

    active_by_default: bool | None = None
    jdk: str | None = None
    os: ActivationOs | None = None
    property: ActivationProperty | None = None
    file: ActivationFile | None = None

    def is_empty(self) -> bool:
        return (
            self.active_by_default is None
            and self.jdk is None
            and self.os is None
            and self.property is None
            and self.file is None
        )


class MavenProfileActivationBuilder:
    """Each predicate is set independently; passing only ``None`` clears it."""

    def __init__(self) -> None:
        self._active_by_default: bool | None = None
        self._jdk: str | None = None
        self._os: ActivationOs | None = None
        self._property: ActivationProperty | None = None
        self._file_exists: str | None = None
        self._file_missing: str | None = None

    def active_by_default(self, active: bool | None = True) -> MavenProfileActivationBuilder:
        self._active_by_default = active
        return self

    def jdk(self, jdk: str | None) -> MavenProfileActivationBuilder:
        self._jdk = jdk
        return self

    def os(
        self,
        name: str | None = None,
        family: str | None = None,
        arch: str | None = None,
        version: str | None = None,
    ) -> MavenProfileActivationBuilder:
        if name is None and family is None and arch is None and version is None:
            self._os = None
        else:
            self._os = ActivationOs(name=name, family=family, arch=arch, version=version)
        return self

    def property(self, name: str | None, value: str | None = None) -> MavenProfileActivationBuilder:
        self._property = ActivationProperty(name=name, value=value) if name is not None else None
        return self

    def file_exists(self, path: str | None) -> MavenProfileActivationBuilder:
        self._file_exists = path
        return self

    def file_missing(self, path: str | None) -> MavenProfileActivationBuilder:
        self._file_missing = path
        return self

    def build(self) -> MavenProfileActivation:
        file = None
        if self._file_exists is not None or self._file_missing is not None:
            file = ActivationFile(exists=self._file_exists, missing=self._file_missing)
        return MavenProfileActivation(
            active_by_default=self._active_by_default,
            jdk=self._jdk,
            os=self._os,
            property=self._property,
            file=file,
        )


# ---------------------------------------------------------------------------
# Profile build section
# ---------------------------------------------------------------------------


class MavenProfileBuild(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_goal: str | None = None
    directory: str | None = None
    final_name: str | None = None
    filters: tuple[str, ...] = ()
    resources: tuple[MavenResource, ...] = ()
    test_resources: tuple[MavenResource, ...] = ()
    plugin_management: tuple[MavenPlugin, ...] = ()
    plugins: tuple[MavenPlugin, ...] = ()

    def is_empty(self) -> bool:
        return (
            self.default_goal is None
            and self.directory is None
            and self.final_name is None
            and not self.filters
            and not self.resources
            and not self.test_resources
            and not self.plugin_management
            and not self.plugins
        )


class MavenProfileBuildBuilder:
    def __init__(self) -> None:
        self._default_goal: str | None = None
        self._directory: str | None = None
        self._final_name: str | None = None
        self._filters: list[str] = []
        self.resources = MavenResourceContainer()
        self.test_resources = MavenResourceContainer()
        self.plugin_management = MavenPluginContainer()
        self.plugins = MavenPluginContainer()

    def default_goal(self, goal: str | None) -> MavenProfileBuildBuilder:
        self._default_goal = goal
        return self

    def directory(self, directory: str | None) -> MavenProfileBuildBuilder:
        self._directory = directory
        return self

    def final_name(self, final_name: str | None) -> MavenProfileBuildBuilder:
        self._final_name = final_name
        return self

    def filter(self, path: str) -> MavenProfileBuildBuilder:
        self._filters.append(path)
        return self

    def build(self) -> MavenProfileBuild:
        return MavenProfileBuild(
            default_goal=self._default_goal,
            directory=self._directory,
            final_name=self._final_name,
            filters=tuple(self._filters),
            resources=tuple(self.resources.values()),
            test_resources=tuple(self.test_resources.values()),
            plugin_management=tuple(self.plugin_management.values()),
            plugins=tuple(self.plugins.values()),
        )


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


class MavenProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    activation: MavenProfileActivation = MavenProfileActivation()
    modules: tuple[str, ...] = ()
    properties: tuple[tuple[str, str], ...] = ()
    versions: tuple[tuple[VersionProperty, str], ...] = ()
    dependencies: tuple[Dependency, ...] = ()
    boms: tuple[BillOfMaterials, ...] = ()
    build: MavenProfileBuild = MavenProfileBuild()
    repositories: tuple[MavenRepository, ...] = ()
    plugin_repositories: tuple[MavenRepository, ...] = ()
    distribution_management: MavenDistributionManagement = MavenDistributionManagement()
    reporting: MavenReporting = MavenReporting()


class MavenProfileBuilder:
    """Mutable accumulator for a :class:`MavenProfile`.

    Nested sections are exposed as attributes (``profile.dependencies``,
    ``profile.build.plugins``...) or customized through the helper methods.
    """

    def __init__(self, profile_id: str) -> None:
        self.id = profile_id
        self.activation = MavenProfileActivationBuilder()
        self.build_section = MavenProfileBuildBuilder()
        self._modules: list[str] = []
        self.properties = PropertyContainer()
        self.dependencies = DependencyContainer()
        self.boms = BomContainer()
        self.repositories = RepositoryContainer()
        self.plugin_repositories = RepositoryContainer()
        self.distribution_management = MavenDistributionManagementBuilder()
        self.reporting = MavenReportingBuilder()

    def activate(self, customizer: Callable[[MavenProfileActivationBuilder], object]) -> MavenProfileBuilder:
        customizer(self.activation)
        return self

    def configure_build(self, customizer: Callable[[MavenProfileBuildBuilder], object]) -> MavenProfileBuilder:
        customizer(self.build_section)
        return self

    def module(self, module: str) -> MavenProfileBuilder:
        self._modules.append(module)
        return self

    def build(self) -> MavenProfile:
        return MavenProfile(
            id=self.id,
            activation=self.activation.build(),
            modules=tuple(self._modules),
            properties=tuple(self.properties.values()),
            versions=tuple(self.properties.versions()),
            dependencies=tuple(self.dependencies.values()),
            boms=tuple(self.boms.values()),
            build=self.build_section.build(),
            repositories=tuple(self.repositories.values()),
            plugin_repositories=tuple(self.plugin_repositories.values()),
            distribution_management=self.distribution_management.build(),
            reporting=self.reporting.build(),
        )


class MavenProfileContainer(BuilderContainer[MavenProfileBuilder, MavenProfile]):
    """Profiles keyed by id."""

    def __init__(self) -> None:
        super().__init__(MavenProfileBuilder)
