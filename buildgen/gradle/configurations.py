"""Gradle dependency configurations.

A configuration is either *declared* by the build (``developmentOnly``) or an
existing one that is only customized (``compileOnly`` extending
``annotationProcessor``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from buildgen.model.container import BuilderContainer


class GradleConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    declared: bool = False
    extends_from: tuple[str, ...] = ()


class GradleConfigurationBuilder:
    def __init__(self, name: str) -> None:
        self.name = name
        self._declared = False
        self._extends_from: list[str] = []

    def declared(self, declared: bool = True) -> GradleConfigurationBuilder:
        self._declared = declared
        return self

    def extends_from(self, *names: str) -> GradleConfigurationBuilder:
        """Add parent configurations; duplicates are ignored."""
        for name in names:
            if name not in self._extends_from:
                self._extends_from.append(name)
        return self

    def build(self) -> GradleConfiguration:
        return GradleConfiguration(
            name=self.name, declared=self._declared, extends_from=tuple(self._extends_from)
        )


class GradleConfigurationContainer(BuilderContainer[GradleConfigurationBuilder, GradleConfiguration]):
    """Configurations keyed by name.

    ``add`` declares a new configuration; ``customize`` only refines one.
    """

    def __init__(self) -> None:
        super().__init__(GradleConfigurationBuilder)

    def add(self, name: str) -> GradleConfigurationBuilder:
        return self.customize(name, lambda configuration: configuration.declared())
