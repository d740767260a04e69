"""Distribution management: where the artifacts of a build are deployed.

Every element is optional. The builder merges successive calls, so two
contributors can each set part of the same deployment repository.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RepositoryPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool | None = None
    update_policy: str | None = None
    checksum_policy: str | None = None

    def is_empty(self) -> bool:
        return self.enabled is None and self.update_policy is None and self.checksum_policy is None


class DeploymentRepository(BaseModel):
    model_config = ConfigDict(frozen=True)

    unique_version: bool | None = None
    releases: RepositoryPolicy | None = None
    snapshots: RepositoryPolicy | None = None
    id: str | None = None
    name: str | None = None
    url: str | None = None
    layout: str | None = None

    def is_empty(self) -> bool:
        return (
            self.unique_version is None
            and (self.releases is None or self.releases.is_empty())
            and (self.snapshots is None or self.snapshots.is_empty())
            and not any((self.id, self.name, self.url, self.layout))
        )


class Site(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None
    url: str | None = None
    child_site_url_inherit_append_path: bool | None = None

    def is_empty(self) -> bool:
        return not any((self.id, self.name, self.url)) and self.child_site_url_inherit_append_path is None


class Relocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
    message: str | None = None

    def is_empty(self) -> bool:
        return not any((self.group_id, self.artifact_id, self.version, self.message))


class MavenDistributionManagement(BaseModel):
    model_config = ConfigDict(frozen=True)

    download_url: str | None = None
    repository: DeploymentRepository = DeploymentRepository()
    snapshot_repository: DeploymentRepository = DeploymentRepository()
    site: Site = Site()
    relocation: Relocation = Relocation()

    def is_empty(self) -> bool:
        return (
            self.download_url is None
            and self.repository.is_empty()
            and self.snapshot_repository.is_empty()
            and self.site.is_empty()
            and self.relocation.is_empty()
        )


class MavenDistributionManagementBuilder:
    """Accumulates a :class:`MavenDistributionManagement`.

    Each method takes keyword fields of the corresponding model and merges them
    into what was set before.
    """

    def __init__(self) -> None:
        self._snapshot = MavenDistributionManagement()

    def download_url(self, download_url: str | None) -> MavenDistributionManagementBuilder:
        self._snapshot = self._snapshot.model_copy(update={"download_url": download_url})
        return self

    def repository(self, **fields) -> MavenDistributionManagementBuilder:
        return self._merge("repository", DeploymentRepository, fields)

    def snapshot_repository(self, **fields) -> MavenDistributionManagementBuilder:
        return self._merge("snapshot_repository", DeploymentRepository, fields)

    def site(self, **fields) -> MavenDistributionManagementBuilder:
        return self._merge("site", Site, fields)

    def relocation(self, **fields) -> MavenDistributionManagementBuilder:
        return self._merge("relocation", Relocation, fields)

    def build(self) -> MavenDistributionManagement:
        return self._snapshot

    def _merge(self, attribute: str, model: type[BaseModel], fields: dict) -> MavenDistributionManagementBuilder:
        current = getattr(self._snapshot, attribute)
        merged = model.model_validate({**current.model_dump(exclude_none=True), **fields})
        self._snapshot = self._snapshot.model_copy(update={attribute: merged})
        return self
