"""Artifact repositories."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from buildgen.model.container import BuilderContainer

MAVEN_CENTRAL_ID = "maven-central"


class RepositoryCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    password: str


class MavenRepository(BaseModel):
    """Immutable snapshot of a Maven-layout repository."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    url: str
    releases_enabled: bool = True
    snapshots_enabled: bool = False
    credentials: RepositoryCredentials | None = None

    @property
    def is_maven_central(self) -> bool:
        return self.id == MAVEN_CENTRAL_ID


MAVEN_CENTRAL = MavenRepository(
    id=MAVEN_CENTRAL_ID,
    name="Maven Central",
    url="https://repo.maven.apache.org/maven2",
)


class RepositoryBuilder:
    def __init__(self, repository_id: str) -> None:
        self.id = repository_id
        self._name: str | None = None
        self._url: str | None = None
        self._releases_enabled = True
        self._snapshots_enabled = False
        self._credentials: RepositoryCredentials | None = None
        if repository_id == MAVEN_CENTRAL_ID:
            self._name = MAVEN_CENTRAL.name
            self._url = MAVEN_CENTRAL.url

    def name(self, name: str | None) -> RepositoryBuilder:
        self._name = name
        return self

    def url(self, url: str) -> RepositoryBuilder:
        self._url = url
        return self

    def releases_enabled(self, enabled: bool) -> RepositoryBuilder:
        self._releases_enabled = enabled
        return self

    def snapshots_enabled(self, enabled: bool) -> RepositoryBuilder:
        self._snapshots_enabled = enabled
        return self

    def only_snapshots(self) -> RepositoryBuilder:
        return self.releases_enabled(False).snapshots_enabled(True)

    def credentials(self, username: str, password: str) -> RepositoryBuilder:
        self._credentials = RepositoryCredentials(username=username, password=password)
        return self

    def build(self) -> MavenRepository:
        return MavenRepository(
            id=self.id,
            name=self._name,
            url=self._url or "",
            releases_enabled=self._releases_enabled,
            snapshots_enabled=self._snapshots_enabled,
            credentials=self._credentials,
        )


class RepositoryContainer(BuilderContainer[RepositoryBuilder, MavenRepository]):
    """Repositories keyed by id; ``maven-central`` is known out of the box."""

    def __init__(self) -> None:
        super().__init__(RepositoryBuilder)

    def add(
        self,
        repository_id: str,
        name: str | None = None,
        url: str | None = None,
        snapshots_enabled: bool | None = None,
    ) -> RepositoryBuilder:
        builder = self.customize(repository_id)
        if name is not None:
            builder.name(name)
        if url is not None:
            builder.url(url)
        if snapshots_enabled is not None:
            builder.snapshots_enabled(snapshots_enabled)
        return builder
