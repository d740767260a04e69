"""Site reporting configuration (used by profiles)."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from buildgen.maven.plugin import _as_flag, _split_key
from buildgen.model.configuration import Configuration, ConfigurationBuilder
from buildgen.model.container import BuilderContainer


class ReportSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    inherited: str | None = None
    configuration: Configuration | None = None
    reports: tuple[str, ...] = ()


class MavenReportPlugin(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str | None = None
    inherited: str | None = None
    configuration: Configuration | None = None
    report_sets: tuple[ReportSet, ...] = ()


class MavenReporting(BaseModel):
    model_config = ConfigDict(frozen=True)

    exclude_defaults: bool | None = None
    output_directory: str | None = None
    report_plugins: tuple[MavenReportPlugin, ...] = ()

    def is_empty(self) -> bool:
        return self.exclude_defaults is None and self.output_directory is None and not self.report_plugins


class ReportSetBuilder:
    def __init__(self, report_set_id: str) -> None:
        self.id = report_set_id
        self._inherited: str | None = None
        self._configuration: ConfigurationBuilder | None = None
        self._reports: list[str] = []

    def inherited(self, inherited: bool | str | None) -> ReportSetBuilder:
        self._inherited = _as_flag(inherited)
        return self

    def configuration(self, customizer: Callable[[ConfigurationBuilder], object]) -> ReportSetBuilder:
        if self._configuration is None:
            self._configuration = ConfigurationBuilder()
        customizer(self._configuration)
        return self

    def report(self, report: str) -> ReportSetBuilder:
        self._reports.append(report)
        return self

    def build(self) -> ReportSet:
        return ReportSet(
            id=self.id,
            inherited=self._inherited,
            configuration=self._configuration.build() if self._configuration else None,
            reports=tuple(self._reports),
        )


class MavenReportPluginBuilder:
    def __init__(self, key: str) -> None:
        self.group_id, self.artifact_id = _split_key(key)
        self._version: str | None = None
        self._inherited: str | None = None
        self._configuration: ConfigurationBuilder | None = None
        self._report_sets = BuilderContainer(ReportSetBuilder)

    def version(self, version: str | None) -> MavenReportPluginBuilder:
        self._version = version
        return self

    def inherited(self, inherited: bool | str | None) -> MavenReportPluginBuilder:
        self._inherited = _as_flag(inherited)
        return self

    def configuration(self, customizer: Callable[[ConfigurationBuilder], object]) -> MavenReportPluginBuilder:
        if self._configuration is None:
            self._configuration = ConfigurationBuilder()
        customizer(self._configuration)
        return self

    def report_set(
        self, report_set_id: str, customizer: Callable[[ReportSetBuilder], object] | None = None
    ) -> MavenReportPluginBuilder:
        self._report_sets.customize(report_set_id, customizer)
        return self

    def build(self) -> MavenReportPlugin:
        return MavenReportPlugin(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            version=self._version,
            inherited=self._inherited,
            configuration=self._configuration.build() if self._configuration else None,
            report_sets=tuple(self._report_sets.values()),
        )


class MavenReportPluginContainer(BuilderContainer[MavenReportPluginBuilder, MavenReportPlugin]):
    def __init__(self) -> None:
        super().__init__(MavenReportPluginBuilder)

    def add(
        self,
        group_id: str,
        artifact_id: str | None = None,
        customizer: Callable[[MavenReportPluginBuilder], object] | None = None,
    ) -> MavenReportPluginBuilder:
        key = group_id if artifact_id is None else f"{group_id}:{artifact_id}"
        return self.customize(key, customizer)


class MavenReportingBuilder:
    def __init__(self) -> None:
        self._exclude_defaults: bool | None = None
        self._output_directory: str | None = None
        self.report_plugins = MavenReportPluginContainer()

    def exclude_defaults(self, exclude_defaults: bool | None = True) -> MavenReportingBuilder:
        self._exclude_defaults = exclude_defaults
        return self

    def output_directory(self, output_directory: str | None) -> MavenReportingBuilder:
        self._output_directory = output_directory
        return self

    def build(self) -> MavenReporting:
        return MavenReporting(
            exclude_defaults=self._exclude_defaults,
            output_directory=self._output_directory,
            report_plugins=tuple(self.report_plugins.values()),
        )
