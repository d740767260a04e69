"""Gradle plugins, declared in the ``plugins`` block or applied imperatively."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from buildgen.model.container import BuilderContainer


class GradlePlugin(BaseModel):
    """A plugin id with an optional version.

    ``applied`` plugins are rendered as ``apply plugin: 'id'`` statements,
    which only the Groovy DSL accepts.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    version: str | None = None
    applied: bool = False


class GradlePluginBuilder:
    def __init__(self, plugin_id: str) -> None:
        self.id = plugin_id
        self._version: str | None = None
        self._applied = False

    def version(self, version: str | None) -> GradlePluginBuilder:
        self._version = version
        return self

    def applied(self, applied: bool = True) -> GradlePluginBuilder:
        self._applied = applied
        return self

    def build(self) -> GradlePlugin:
        return GradlePlugin(id=self.id, version=self._version, applied=self._applied)


class GradlePluginContainer(BuilderContainer[GradlePluginBuilder, GradlePlugin]):
    """Plugins keyed by id."""

    def __init__(self) -> None:
        super().__init__(GradlePluginBuilder)

    def add(self, plugin_id: str, version: str | None = None) -> GradlePluginBuilder:
        builder = self.customize(plugin_id)
        if version is not None:
            builder.version(version)
        return builder

    def apply(self, plugin_id: str) -> GradlePluginBuilder:
        """Register *plugin_id* as an ``apply plugin`` statement."""
        return self.customize(plugin_id, lambda plugin: plugin.applied())
