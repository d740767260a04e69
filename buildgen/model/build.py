"""Build aggregate shared by the Maven and Gradle models.

A ``Build`` owns the containers both build systems understand. Each build
system adds its own settings builder and containers on top.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from buildgen.model.bom import BomContainer
from buildgen.model.dependency import DependencyContainer
from buildgen.model.properties import PropertyContainer
from buildgen.model.repository import RepositoryContainer


class BuildSettings(BaseModel):
    """Project coordinates."""

    model_config = ConfigDict(frozen=True)

    group: str | None = None
    artifact: str | None = None
    version: str | None = None


class BuildSettingsBuilder:
    """Mutable accumulator for the settings of a build.

    Subclasses override :meth:`build` and extend :meth:`_fields` with their
    own entries.
    """

    snapshot_type: type[BuildSettings] = BuildSettings

    def __init__(self) -> None:
        self._group: str | None = None
        self._artifact: str | None = None
        self._version: str | None = None

    def group(self, group: str | None) -> BuildSettingsBuilder:
        self._group = group
        return self

    def artifact(self, artifact: str | None) -> BuildSettingsBuilder:
        self._artifact = artifact
        return self

    def version(self, version: str | None) -> BuildSettingsBuilder:
        self._version = version
        return self

    def coordinates(self, group: str, artifact: str) -> BuildSettingsBuilder:
        return self.group(group).artifact(artifact)

    def _fields(self) -> dict:
        return {"group": self._group, "artifact": self._artifact, "version": self._version}

    def build(self) -> BuildSettings:
        return self.snapshot_type(**self._fields())


class Build:
    """Containers common to every build system."""

    def __init__(self, settings: BuildSettingsBuilder | None = None) -> None:
        self.settings = settings or BuildSettingsBuilder()
        self.properties = PropertyContainer()
        self.dependencies = DependencyContainer()
        self.boms = BomContainer()
        self.repositories = RepositoryContainer()
        self.plugin_repositories = RepositoryContainer()
