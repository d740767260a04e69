"""The Maven build aggregate.

``MavenBuild`` is what callers populate; ``MavenBuild.snapshot()`` freezes it
into a ``MavenBuildSnapshot`` that the XML writer walks exactly once.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from buildgen.maven.distribution import MavenDistributionManagement, MavenDistributionManagementBuilder
from buildgen.maven.metadata import MavenBuildSettings, MavenBuildSettingsBuilder
from buildgen.maven.plugin import MavenExtension, MavenExtensionContainer, MavenPlugin, MavenPluginContainer
from buildgen.maven.profile import MavenProfile, MavenProfileContainer
from buildgen.maven.resource import MavenResource, MavenResourceContainer
from buildgen.model.bom import BillOfMaterials
from buildgen.model.build import Build
from buildgen.model.dependency import Dependency
from buildgen.model.repository import MavenRepository
from buildgen.model.version import VersionProperty


class MavenBuildSnapshot(BaseModel):
    """Immutable view of a :class:`MavenBuild`."""

    model_config = ConfigDict(frozen=True)

    settings: MavenBuildSettings
    properties: tuple[tuple[str, str], ...] = ()
    versions: tuple[tuple[VersionProperty, str], ...] = ()
    dependencies: tuple[Dependency, ...] = ()
    boms: tuple[BillOfMaterials, ...] = ()
    resources: tuple[MavenResource, ...] = ()
    test_resources: tuple[MavenResource, ...] = ()
    plugin_management: tuple[MavenPlugin, ...] = ()
    plugins: tuple[MavenPlugin, ...] = ()
    extensions: tuple[MavenExtension, ...] = ()
    repositories: tuple[MavenRepository, ...] = ()
    plugin_repositories: tuple[MavenRepository, ...] = ()
    distribution_management: MavenDistributionManagement = MavenDistributionManagement()
    profiles: tuple[MavenProfile, ...] = ()


class MavenBuild(Build):
    """A Maven project under construction.

    Attributes:
        settings: Coordinates and project metadata.
        resources / test_resources: Resource directories keyed by path.
        plugin_management / plugins: Build plugins keyed by ``group:artifact``.
        extensions: Build extensions keyed by ``group:artifact``.
        distribution_management: Deployment targets.
        profiles: Profiles keyed by id.
    """

    settings: MavenBuildSettingsBuilder

    def __init__(self) -> None:
        super().__init__(MavenBuildSettingsBuilder())
        self.resources = MavenResourceContainer()
        self.test_resources = MavenResourceContainer()
        self.plugin_management = MavenPluginContainer()
        self.plugins = MavenPluginContainer()
        self.extensions = MavenExtensionContainer()
        self.distribution_management = MavenDistributionManagementBuilder()
        self.profiles = MavenProfileContainer()

    def snapshot(self) -> MavenBuildSnapshot:
        return MavenBuildSnapshot(
            settings=self.settings.build(),
            properties=tuple(self.properties.values()),
            versions=tuple(self.properties.versions()),
            dependencies=tuple(self.dependencies.values()),
            boms=tuple(self.boms.values()),
            resources=tuple(self.resources.values()),
            test_resources=tuple(self.test_resources.values()),
            plugin_management=tuple(self.plugin_management.values()),
            plugins=tuple(self.plugins.values()),
            extensions=tuple(self.extensions.values()),
            repositories=tuple(self.repositories.values()),
            plugin_repositories=tuple(self.plugin_repositories.values()),
            distribution_management=self.distribution_management.build(),
            profiles=tuple(self.profiles.values()),
        )
