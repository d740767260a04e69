"""Maven build plugins and build extensions.

Plugins are keyed by ``groupId:artifactId``. Customizing a plugin that is
already registered refines it: configuration entries are appended to the same
tree and executions are customized by id.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from buildgen.model.configuration import Configuration, ConfigurationBuilder
from buildgen.model.container import BuilderContainer


def _split_key(key: str) -> tuple[str, str]:
    group_id, _, artifact_id = key.partition(":")
    return group_id, artifact_id


class ProcessingInstruction(BaseModel):
    """An XML processing instruction, rendered ``<?target data?>``."""

    model_config = ConfigDict(frozen=True)

    target: str
    data: str = ""


class Execution(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    phase: str | None = None
    goals: tuple[str, ...] = ()
    inherited: str | None = None
    configuration: Configuration | None = None
    processing_instructions: tuple[ProcessingInstruction, ...] = ()


class PluginDependency(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str | None = None


class MavenPlugin(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str | None = None
    extensions: bool = False
    inherited: str | None = None
    configuration: Configuration | None = None
    executions: tuple[Execution, ...] = ()
    dependencies: tuple[PluginDependency, ...] = ()


class ExecutionBuilder:
    def __init__(self, execution_id: str) -> None:
        self.id = execution_id
        self._phase: str | None = None
        self._goals: list[str] = []
        self._inherited: str | None = None
        self._configuration: ConfigurationBuilder | None = None
        self._processing_instructions: list[ProcessingInstruction] = []

    def phase(self, phase: str | None) -> ExecutionBuilder:
        self._phase = phase
        return self

    def goal(self, goal: str) -> ExecutionBuilder:
        self._goals.append(goal)
        return self

    def inherited(self, inherited: bool | str | None) -> ExecutionBuilder:
        self._inherited = _as_flag(inherited)
        return self

    def configuration(self, customizer: Callable[[ConfigurationBuilder], object]) -> ExecutionBuilder:
        if self._configuration is None:
            self._configuration = ConfigurationBuilder()
        customizer(self._configuration)
        return self

    def processing_instruction(self, target: str, data: str = "") -> ExecutionBuilder:
        self._processing_instructions.append(ProcessingInstruction(target=target, data=data))
        return self

    def build(self) -> Execution:
        return Execution(
            id=self.id,
            phase=self._phase,
            goals=tuple(self._goals),
            inherited=self._inherited,
            configuration=self._configuration.build() if self._configuration else None,
            processing_instructions=tuple(self._processing_instructions),
        )


class MavenPluginBuilder:
    def __init__(self, key: str) -> None:
        self.group_id, self.artifact_id = _split_key(key)
        self._version: str | None = None
        self._extensions = False
        self._inherited: str | None = None
        self._configuration: ConfigurationBuilder | None = None
        self._executions = BuilderContainer(ExecutionBuilder)
        self._dependencies: list[PluginDependency] = []

    def version(self, version: str | None) -> MavenPluginBuilder:
        self._version = version
        return self

    def extensions(self, extensions: bool = True) -> MavenPluginBuilder:
        self._extensions = extensions
        return self

    def inherited(self, inherited: bool | str | None) -> MavenPluginBuilder:
        self._inherited = _as_flag(inherited)
        return self

    def configuration(self, customizer: Callable[[ConfigurationBuilder], object]) -> MavenPluginBuilder:
        """Customize the plugin configuration; repeated calls extend the same tree."""
        if self._configuration is None:
            self._configuration = ConfigurationBuilder()
        customizer(self._configuration)
        return self

    def execution(
        self, execution_id: str, customizer: Callable[[ExecutionBuilder], object] | None = None
    ) -> MavenPluginBuilder:
        self._executions.customize(execution_id, customizer)
        return self

    def dependency(self, group_id: str, artifact_id: str, version: str | None = None) -> MavenPluginBuilder:
        self._dependencies.append(PluginDependency(group_id=group_id, artifact_id=artifact_id, version=version))
        return self

    def build(self) -> MavenPlugin:
        return MavenPlugin(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            version=self._version,
            extensions=self._extensions,
            inherited=self._inherited,
            configuration=self._configuration.build() if self._configuration else None,
            executions=tuple(self._executions.values()),
            dependencies=tuple(self._dependencies),
        )


class MavenPluginContainer(BuilderContainer[MavenPluginBuilder, MavenPlugin]):
    def __init__(self) -> None:
        super().__init__(MavenPluginBuilder)

    def add(
        self,
        group_id: str,
        artifact_id: str | None = None,
        customizer: Callable[[MavenPluginBuilder], object] | None = None,
    ) -> MavenPluginBuilder:
        """Register or customize ``group_id:artifact_id``.

        A single ``group:artifact`` key is accepted as well.
        """
        key = group_id if artifact_id is None else f"{group_id}:{artifact_id}"
        return self.customize(key, customizer)

    def has_plugin(self, group_id: str, artifact_id: str) -> bool:
        return self.has(f"{group_id}:{artifact_id}")

    def remove_plugin(self, group_id: str, artifact_id: str) -> bool:
        return self.remove(f"{group_id}:{artifact_id}")


# ---------------------------------------------------------------------------
# Build extensions
# ---------------------------------------------------------------------------


class MavenExtension(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str | None = None


class MavenExtensionBuilder:
    def __init__(self, key: str) -> None:
        self.group_id, self.artifact_id = _split_key(key)
        self._version: str | None = None

    def version(self, version: str | None) -> MavenExtensionBuilder:
        self._version = version
        return self

    def build(self) -> MavenExtension:
        return MavenExtension(group_id=self.group_id, artifact_id=self.artifact_id, version=self._version)


class MavenExtensionContainer(BuilderContainer[MavenExtensionBuilder, MavenExtension]):
    def __init__(self) -> None:
        super().__init__(MavenExtensionBuilder)

    def add(self, group_id: str, artifact_id: str | None = None, version: str | None = None) -> MavenExtensionBuilder:
        key = group_id if artifact_id is None else f"{group_id}:{artifact_id}"
        builder = self.customize(key)
        if version is not None:
            builder.version(version)
        return builder


def _as_flag(value: bool | str | None) -> str | None:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value
