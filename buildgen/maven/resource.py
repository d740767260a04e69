"""Resource directories of a Maven build."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from buildgen.model.container import BuilderContainer


class MavenResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    directory: str
    target_path: str | None = None
    filtering: bool = False
    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()


class MavenResourceBuilder:
    def __init__(self, directory: str) -> None:
        self.directory = directory
        self._target_path: str | None = None
        self._filtering = False
        self._includes: list[str] = []
        self._excludes: list[str] = []

    def target_path(self, target_path: str | None) -> MavenResourceBuilder:
        self._target_path = target_path
        return self

    def filtering(self, filtering: bool = True) -> MavenResourceBuilder:
        self._filtering = filtering
        return self

    def includes(self, *includes: str) -> MavenResourceBuilder:
        """Replace the include patterns."""
        self._includes = list(includes)
        return self

    def excludes(self, *excludes: str) -> MavenResourceBuilder:
        """Replace the exclude patterns."""
        self._excludes = list(excludes)
        return self

    def build(self) -> MavenResource:
        return MavenResource(
            directory=self.directory,
            target_path=self._target_path,
            filtering=self._filtering,
            includes=tuple(self._includes),
            excludes=tuple(self._excludes),
        )


class MavenResourceContainer(BuilderContainer[MavenResourceBuilder, MavenResource]):
    """Resources keyed by directory."""

    def __init__(self) -> None:
        super().__init__(MavenResourceBuilder)
