"""Project metadata of a Maven build: parent, licenses, developers, scm.

These are plain value objects. They are attached to the build through
:class:`MavenBuildSettingsBuilder`, which also holds the coordinates and the
source directories.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from buildgen.model.build import BuildSettings, BuildSettingsBuilder


class MavenParent(BaseModel):
    """Parent POM. An empty ``relative_path`` means "look it up in a repository"."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str
    relative_path: str = ""


class LicenseDistribution(str, Enum):
    REPO = "repo"
    MANUAL = "manual"


class MavenLicense(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    url: str | None = None
    distribution: LicenseDistribution | None = None
    comments: str | None = None


class MavenDeveloper(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None
    email: str | None = None
    url: str | None = None
    organization: str | None = None
    organization_url: str | None = None
    roles: tuple[str, ...] = ()
    timezone: str | None = None
    properties: dict[str, str] = Field(default_factory=dict)


class MavenScm(BaseModel):
    model_config = ConfigDict(frozen=True)

    connection: str | None = None
    developer_connection: str | None = None
    tag: str | None = None
    url: str | None = None

    def is_empty(self) -> bool:
        return not any((self.connection, self.developer_connection, self.tag, self.url))


class MavenBuildSettings(BuildSettings):
    """Snapshot of everything written before the ``<properties>`` section."""

    parent: MavenParent | None = None
    packaging: str | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    licenses: tuple[MavenLicense, ...] = ()
    developers: tuple[MavenDeveloper, ...] = ()
    scm: MavenScm = Field(default_factory=MavenScm)
    source_directory: str | None = None
    test_source_directory: str | None = None
    add_override_if_empty: bool = False


class MavenBuildSettingsBuilder(BuildSettingsBuilder):
    snapshot_type = MavenBuildSettings

    def __init__(self) -> None:
        super().__init__()
        self._parent: MavenParent | None = None
        self._packaging: str | None = None
        self._name: str | None = None
        self._description: str | None = None
        self._url: str | None = None
        self._licenses: list[MavenLicense] = []
        self._developers: list[MavenDeveloper] = []
        self._scm = MavenScm()
        self._source_directory: str | None = None
        self._test_source_directory: str | None = None
        self._add_override_if_empty = False

    def parent(self, group_id: str, artifact_id: str, version: str, relative_path: str = "") -> MavenBuildSettingsBuilder:
        self._parent = MavenParent(
            group_id=group_id, artifact_id=artifact_id, version=version, relative_path=relative_path
        )
        return self

    def packaging(self, packaging: str | None) -> MavenBuildSettingsBuilder:
        self._packaging = packaging
        return self

    def name(self, name: str | None) -> MavenBuildSettingsBuilder:
        self._name = name
        return self

    def description(self, description: str | None) -> MavenBuildSettingsBuilder:
        self._description = description
        return self

    def url(self, url: str | None) -> MavenBuildSettingsBuilder:
        self._url = url
        return self

    def licenses(self, *licenses: MavenLicense) -> MavenBuildSettingsBuilder:
        """Replace the licenses of the project."""
        self._licenses = list(licenses)
        return self

    def developers(self, *developers: MavenDeveloper) -> MavenBuildSettingsBuilder:
        """Replace the developers of the project."""
        self._developers = list(developers)
        return self

    def scm(self, **fields: str | None) -> MavenBuildSettingsBuilder:
        """Update scm fields (``connection``, ``developer_connection``, ``tag``, ``url``)."""
        self._scm = self._scm.model_copy(update=fields)
        return self

    def source_directory(self, directory: str | None) -> MavenBuildSettingsBuilder:
        self._source_directory = directory
        return self

    def test_source_directory(self, directory: str | None) -> MavenBuildSettingsBuilder:
        self._test_source_directory = directory
        return self

    def add_override_if_empty(self, enabled: bool = True) -> MavenBuildSettingsBuilder:
        """Render empty url/license/developer/scm placeholders that children can override."""
        self._add_override_if_empty = enabled
        return self

    def _fields(self) -> dict:
        fields = super()._fields()
        fields.update(
            parent=self._parent,
            packaging=self._packaging,
            name=self._name,
            description=self._description,
            url=self._url,
            licenses=tuple(self._licenses),
            developers=tuple(self._developers),
            scm=self._scm,
            source_directory=self._source_directory,
            test_source_directory=self._test_source_directory,
            add_override_if_empty=self._add_override_if_empty,
        )
        return fields
