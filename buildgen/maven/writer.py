"""Render a :class:`MavenBuild` as a ``pom.xml`` document.

The writer walks the build snapshot once, top to bottom, in a fixed section
order. Sections without content are omitted; top-level sections are separated
by a blank line. Profiles reuse the same section writers without separators.

Only element text is escaped, and only the five XML special characters.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager

from buildgen.io.indenting_writer import IndentingWriter, IndentingWriterFactory
from buildgen.maven.build import MavenBuild, MavenBuildSnapshot
from buildgen.maven.distribution import DeploymentRepository, MavenDistributionManagement, RepositoryPolicy
from buildgen.maven.metadata import MavenBuildSettings, MavenDeveloper, MavenLicense
from buildgen.maven.plugin import Execution, MavenExtension, MavenPlugin
from buildgen.maven.profile import MavenProfile, MavenProfileActivation, MavenProfileBuild
from buildgen.maven.reporting import MavenReporting, MavenReportPlugin, ReportSet
from buildgen.maven.resource import MavenResource
from buildgen.model.bom import BillOfMaterials, order_boms
from buildgen.model.configuration import Configuration, Setting
from buildgen.model.dependency import (
    XML_SCOPE_GROUPS,
    Dependency,
    DependencyScope,
    DependencySortKey,
    default_sort_key,
    order_dependencies,
)
from buildgen.model.repository import MavenRepository
from buildgen.model.version import VersionProperty, VersionReference

logger = logging.getLogger(__name__)

_XML_ESCAPES = str.maketrans({
    "'": "&apos;",
    '"': "&quot;",
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
})

MAVEN_SCOPES: dict[DependencyScope | None, str | None] = {
    None: None,
    DependencyScope.COMPILE: None,
    DependencyScope.COMPILE_ONLY: None,
    DependencyScope.ANNOTATION_PROCESSOR: None,
    DependencyScope.PROVIDED_RUNTIME: "provided",
    DependencyScope.RUNTIME: "runtime",
    DependencyScope.TEST_COMPILE: "test",
    DependencyScope.TEST_RUNTIME: "test",
}

OPTIONAL_SCOPES = frozenset({DependencyScope.COMPILE_ONLY, DependencyScope.ANNOTATION_PROCESSOR})

Section = tuple[bool, Callable[[], None]]


def escape_xml(text: str) -> str:
    """Escape ``' " < > &`` in a single pass; every other character is kept."""
    return text.translate(_XML_ESCAPES)


def scope_for(dependency: Dependency) -> str | None:
    return MAVEN_SCOPES[dependency.scope]


def is_optional(dependency: Dependency) -> bool:
    return dependency.optional or dependency.scope in OPTIONAL_SCOPES


def version_text(version: VersionReference | None) -> str | None:
    if version is None:
        return None
    if version.version_property is not None:
        return "${" + version.version_property.to_standard_format() + "}"
    return version.value


class MavenBuildWriter:
    """Write ``pom.xml`` content.

    Args:
        sort_key: Orders dependencies within a scope group. Defaults to
            group id then artifact id.
    """

    content_id = "maven"

    def __init__(self, sort_key: DependencySortKey = default_sort_key) -> None:
        self.sort_key = sort_key

    def write(self, build: MavenBuild | MavenBuildSnapshot, factory: IndentingWriterFactory | None = None) -> str:
        """Render *build* and return the document as a string."""
        out = io.StringIO()
        factory = factory or IndentingWriterFactory.with_default_settings()
        self.write_to(factory.create_indenting_writer(self.content_id, out), build)
        return out.getvalue()

    def write_to(self, writer: IndentingWriter, build: MavenBuild | MavenBuildSnapshot) -> None:
        """Render *build* to *writer*.

        The snapshot is taken before anything is written, so a model error
        never leaves a truncated document behind.
        """
        snapshot = build.snapshot() if isinstance(build, MavenBuild) else build
        settings = snapshot.settings
        logger.debug("Writing pom for %s:%s", settings.group, settings.artifact)
        writer.println('<?xml version="1.0" encoding="UTF-8"?>')
        writer.println(
            '<project xmlns="http://maven.apache.org/POM/4.0.0" '
            'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"'
        )
        with writer.indented():
            writer.println(
                'xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 '
                'https://maven.apache.org/xsd/maven-4.0.0.xsd">'
            )
            self._single(writer, "modelVersion", "4.0.0")
            self._write_header(writer, settings)
            self._write_sections(writer, self._project_sections(writer, snapshot), separated=True)
        writer.println()
        writer.println("</project>")

    # ------------------------------------------------------------------
    # Section orchestration
    # ------------------------------------------------------------------

    def _project_sections(self, writer: IndentingWriter, snapshot: MavenBuildSnapshot) -> list[Section]:
        settings = snapshot.settings
        has_build = bool(
            settings.source_directory
            or settings.test_source_directory
            or snapshot.resources
            or snapshot.test_resources
            or snapshot.plugin_management
            or snapshot.plugins
            or snapshot.extensions
        )
        return [
            (
                bool(snapshot.properties or snapshot.versions),
                lambda: self._write_properties(writer, snapshot.properties, snapshot.versions),
            ),
            (bool(snapshot.dependencies), lambda: self._write_dependencies(writer, snapshot.dependencies)),
            (bool(snapshot.boms), lambda: self._write_dependency_management(writer, snapshot.boms)),
            (has_build, lambda: self._write_build(writer, snapshot)),
            (
                bool(_published(snapshot.repositories) or _published(snapshot.plugin_repositories)),
                lambda: self._write_repositories(writer, snapshot.repositories, snapshot.plugin_repositories),
            ),
            (
                not snapshot.distribution_management.is_empty(),
                lambda: self._write_distribution_management(writer, snapshot.distribution_management),
            ),
            (bool(snapshot.profiles), lambda: self._write_profiles(writer, snapshot.profiles)),
        ]

    def _write_sections(self, writer: IndentingWriter, sections: Sequence[Section], separated: bool) -> None:
        for applies, write in sections:
            if not applies:
                continue
            if separated:
                writer.println()
            write()

    # ------------------------------------------------------------------
    # Project header
    # ------------------------------------------------------------------

    def _write_header(self, writer: IndentingWriter, settings: MavenBuildSettings) -> None:
        override = settings.add_override_if_empty
        parent = settings.parent
        if parent is not None:
            with self._element(writer, "parent"):
                self._single(writer, "groupId", parent.group_id)
                self._single(writer, "artifactId", parent.artifact_id)
                self._single(writer, "version", parent.version)
                if parent.relative_path:
                    self._single(writer, "relativePath", parent.relative_path)
                else:
                    writer.println("<relativePath/> <!-- lookup parent from repository -->")
        self._single(writer, "groupId", settings.group)
        self._single(writer, "artifactId", settings.artifact)
        self._single(writer, "version", settings.version)
        if settings.packaging is not None and settings.packaging != "jar":
            self._single(writer, "packaging", settings.packaging)
        self._single(writer, "name", settings.name)
        self._single(writer, "description", settings.description)
        self._single(writer, "url", settings.url, override)
        self._write_licenses(writer, settings.licenses, override)
        self._write_developers(writer, settings.developers, override)
        self._write_scm(writer, settings, override)

    def _write_licenses(self, writer: IndentingWriter, licenses: Sequence[MavenLicense], override: bool) -> None:
        if not licenses:
            if override:
                with self._element(writer, "licenses"):
                    writer.println("<license/>")
            return
        with self._element(writer, "licenses"):
            for license_ in licenses:
                with self._element(writer, "license"):
                    self._single(writer, "name", license_.name)
                    self._single(writer, "url", license_.url)
                    if license_.distribution is not None:
                        self._single(writer, "distribution", license_.distribution.value)
                    self._single(writer, "comments", license_.comments)

    def _write_developers(
        self, writer: IndentingWriter, developers: Sequence[MavenDeveloper], override: bool
    ) -> None:
        if not developers:
            if override:
                with self._element(writer, "developers"):
                    writer.println("<developer/>")
            return
        with self._element(writer, "developers"):
            for developer in developers:
                with self._element(writer, "developer"):
                    self._single(writer, "id", developer.id)
                    self._single(writer, "name", developer.name)
                    self._single(writer, "email", developer.email)
                    self._single(writer, "url", developer.url)
                    self._single(writer, "organization", developer.organization)
                    self._single(writer, "organizationUrl", developer.organization_url)
                    if developer.roles:
                        with self._element(writer, "roles"):
                            for role in developer.roles:
                                self._single(writer, "role", role)
                    self._single(writer, "timezone", developer.timezone)
                    if developer.properties:
                        with self._element(writer, "properties"):
                            for key, value in developer.properties.items():
                                self._single(writer, key, value)

    def _write_scm(self, writer: IndentingWriter, settings: MavenBuildSettings, override: bool) -> None:
        scm = settings.scm
        if scm.is_empty() and not override:
            return
        with self._element(writer, "scm"):
            self._single(writer, "connection", scm.connection, override)
            self._single(writer, "developerConnection", scm.developer_connection, override)
            self._single(writer, "tag", scm.tag, override)
            self._single(writer, "url", scm.url, override)

    # ------------------------------------------------------------------
    # Properties & dependencies
    # ------------------------------------------------------------------

    def _write_properties(
        self,
        writer: IndentingWriter,
        properties: Sequence[tuple[str, str]],
        versions: Sequence[tuple[VersionProperty, str]],
    ) -> None:
        with self._element(writer, "properties"):
            for name, value in properties:
                self._single(writer, name, value)
            for prop, value in versions:
                self._single(writer, prop.to_standard_format(), value)

    def _write_dependencies(self, writer: IndentingWriter, dependencies: Sequence[Dependency]) -> None:
        with self._element(writer, "dependencies"):
            for dependency in order_dependencies(dependencies, XML_SCOPE_GROUPS, self.sort_key):
                self._write_dependency(writer, dependency)

    def _write_dependency(self, writer: IndentingWriter, dependency: Dependency) -> None:
        with self._element(writer, "dependency"):
            self._single(writer, "groupId", dependency.group_id)
            self._single(writer, "artifactId", dependency.artifact_id)
            self._single(writer, "version", version_text(dependency.version))
            self._single(writer, "scope", scope_for(dependency))
            if is_optional(dependency):
                self._single(writer, "optional", "true")
            self._single(writer, "classifier", dependency.classifier)
            self._single(writer, "type", dependency.type)
            if dependency.exclusions:
                with self._element(writer, "exclusions"):
                    for exclusion in dependency.exclusions:
                        with self._element(writer, "exclusion"):
                            self._single(writer, "groupId", exclusion.group_id)
                            self._single(writer, "artifactId", exclusion.artifact_id)

    def _write_dependency_management(self, writer: IndentingWriter, boms: Sequence[BillOfMaterials]) -> None:
        with self._element(writer, "dependencyManagement"), self._element(writer, "dependencies"):
            for bom in order_boms(boms):
                with self._element(writer, "dependency"):
                    self._single(writer, "groupId", bom.group_id)
                    self._single(writer, "artifactId", bom.artifact_id)
                    self._single(writer, "version", version_text(bom.version))
                    self._single(writer, "type", "pom")
                    self._single(writer, "scope", "import")

    # ------------------------------------------------------------------
    # Build section
    # ------------------------------------------------------------------

    def _write_build(self, writer: IndentingWriter, snapshot: MavenBuildSnapshot) -> None:
        settings = snapshot.settings
        with self._element(writer, "build"):
            self._single(writer, "sourceDirectory", settings.source_directory)
            self._single(writer, "testSourceDirectory", settings.test_source_directory)
            self._write_resources(writer, "resources", "resource", snapshot.resources)
            self._write_resources(writer, "testResources", "testResource", snapshot.test_resources)
            self._write_plugin_management(writer, snapshot.plugin_management)
            self._write_plugins(writer, snapshot.plugins)
            self._write_extensions(writer, snapshot.extensions)

    def _write_resources(
        self, writer: IndentingWriter, container: str, child: str, resources: Sequence[MavenResource]
    ) -> None:
        if not resources:
            return
        with self._element(writer, container):
            for resource in resources:
                with self._element(writer, child):
                    self._single(writer, "directory", resource.directory)
                    self._single(writer, "targetPath", resource.target_path)
                    if resource.filtering:
                        self._single(writer, "filtering", "true")
                    self._write_list(writer, "includes", "include", resource.includes)
                    self._write_list(writer, "excludes", "exclude", resource.excludes)

    def _write_plugin_management(self, writer: IndentingWriter, plugins: Sequence[MavenPlugin]) -> None:
        if not plugins:
            return
        with self._element(writer, "pluginManagement"):
            self._write_plugins(writer, plugins)

    def _write_plugins(self, writer: IndentingWriter, plugins: Sequence[MavenPlugin]) -> None:
        if not plugins:
            return
        with self._element(writer, "plugins"):
            for plugin in plugins:
                self._write_plugin(writer, plugin)

    def _write_plugin(self, writer: IndentingWriter, plugin: MavenPlugin) -> None:
        with self._element(writer, "plugin"):
            self._single(writer, "groupId", plugin.group_id)
            self._single(writer, "artifactId", plugin.artifact_id)
            self._single(writer, "version", plugin.version)
            if plugin.extensions:
                self._single(writer, "extensions", "true")
            self._single(writer, "inherited", plugin.inherited)
            self._write_configuration(writer, plugin.configuration)
            if plugin.executions:
                with self._element(writer, "executions"):
                    for execution in plugin.executions:
                        self._write_execution(writer, execution)
            if plugin.dependencies:
                with self._element(writer, "dependencies"):
                    for dependency in plugin.dependencies:
                        with self._element(writer, "dependency"):
                            self._single(writer, "groupId", dependency.group_id)
                            self._single(writer, "artifactId", dependency.artifact_id)
                            self._single(writer, "version", dependency.version)

    def _write_execution(self, writer: IndentingWriter, execution: Execution) -> None:
        with self._element(writer, "execution"):
            for instruction in execution.processing_instructions:
                data = f" {instruction.data}" if instruction.data else ""
                writer.println(f"<?{instruction.target}{data}?>")
            self._single(writer, "id", execution.id)
            self._single(writer, "phase", execution.phase)
            self._write_list(writer, "goals", "goal", execution.goals)
            self._single(writer, "inherited", execution.inherited)
            self._write_configuration(writer, execution.configuration)

    def _write_configuration(self, writer: IndentingWriter, configuration: Configuration | None) -> None:
        if configuration is None or configuration.is_empty():
            return
        with self._element(writer, "configuration"):
            for setting in configuration.settings:
                self._write_setting(writer, setting)

    def _write_setting(self, writer: IndentingWriter, setting: Setting) -> None:
        if setting.kind == "scalar":
            self._single(writer, setting.name, setting.value)
        elif not setting.children:
            writer.println(f"<{setting.name}/>")
        else:
            with self._element(writer, setting.name):
                for child in setting.children:
                    self._write_setting(writer, child)

    def _write_extensions(self, writer: IndentingWriter, extensions: Sequence[MavenExtension]) -> None:
        if not extensions:
            return
        with self._element(writer, "extensions"):
            for extension in extensions:
                with self._element(writer, "extension"):
                    self._single(writer, "groupId", extension.group_id)
                    self._single(writer, "artifactId", extension.artifact_id)
                    self._single(writer, "version", extension.version)

    # ------------------------------------------------------------------
    # Repositories & distribution management
    # ------------------------------------------------------------------

    def _write_repositories(
        self,
        writer: IndentingWriter,
        repositories: Sequence[MavenRepository],
        plugin_repositories: Sequence[MavenRepository],
    ) -> None:
        self._write_repository_list(writer, "repositories", "repository", _published(repositories))
        self._write_repository_list(
            writer, "pluginRepositories", "pluginRepository", _published(plugin_repositories)
        )

    def _write_repository_list(
        self, writer: IndentingWriter, container: str, child: str, repositories: Sequence[MavenRepository]
    ) -> None:
        if not repositories:
            return
        with self._element(writer, container):
            for repository in repositories:
                with self._element(writer, child):
                    self._single(writer, "id", repository.id)
                    self._single(writer, "name", repository.name)
                    self._single(writer, "url", repository.url)
                    if not repository.releases_enabled:
                        with self._element(writer, "releases"):
                            self._single(writer, "enabled", "false")
                    if repository.snapshots_enabled:
                        with self._element(writer, "snapshots"):
                            self._single(writer, "enabled", "true")

    def _write_distribution_management(
        self, writer: IndentingWriter, distribution: MavenDistributionManagement
    ) -> None:
        with self._element(writer, "distributionManagement"):
            self._single(writer, "downloadUrl", distribution.download_url)
            self._write_deployment_repository(writer, "repository", distribution.repository)
            self._write_deployment_repository(writer, "snapshotRepository", distribution.snapshot_repository)
            site = distribution.site
            if not site.is_empty():
                attributes = ""
                if site.child_site_url_inherit_append_path is not None:
                    flag = _flag(site.child_site_url_inherit_append_path)
                    attributes = f' child.site.url.inherit.append.path="{flag}"'
                with self._element(writer, "site", attributes):
                    self._single(writer, "id", site.id)
                    self._single(writer, "name", site.name)
                    self._single(writer, "url", site.url)
            relocation = distribution.relocation
            if not relocation.is_empty():
                with self._element(writer, "relocation"):
                    self._single(writer, "groupId", relocation.group_id)
                    self._single(writer, "artifactId", relocation.artifact_id)
                    self._single(writer, "version", relocation.version)
                    self._single(writer, "message", relocation.message)

    def _write_deployment_repository(
        self, writer: IndentingWriter, name: str, repository: DeploymentRepository
    ) -> None:
        if repository.is_empty():
            return
        with self._element(writer, name):
            if repository.unique_version is not None:
                self._single(writer, "uniqueVersion", _flag(repository.unique_version))
            self._write_repository_policy(writer, "releases", repository.releases)
            self._write_repository_policy(writer, "snapshots", repository.snapshots)
            self._single(writer, "id", repository.id)
            self._single(writer, "name", repository.name)
            self._single(writer, "url", repository.url)
            self._single(writer, "layout", repository.layout)

    def _write_repository_policy(self, writer: IndentingWriter, name: str, policy: RepositoryPolicy | None) -> None:
        if policy is None or policy.is_empty():
            return
        with self._element(writer, name):
            if policy.enabled is not None:
                self._single(writer, "enabled", _flag(policy.enabled))
            self._single(writer, "updatePolicy", policy.update_policy)
            self._single(writer, "checksumPolicy", policy.checksum_policy)

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    def _write_profiles(self, writer: IndentingWriter, profiles: Sequence[MavenProfile]) -> None:
        with self._element(writer, "profiles"):
            for profile in profiles:
                with self._element(writer, "profile"):
                    self._single(writer, "id", profile.id)
                    self._write_activation(writer, profile.activation)
                    self._write_sections(writer, self._profile_sections(writer, profile), separated=False)

    def _profile_sections(self, writer: IndentingWriter, profile: MavenProfile) -> list[Section]:
        return [
            (bool(profile.modules), lambda: self._write_list(writer, "modules", "module", profile.modules)),
            (
                bool(profile.properties or profile.versions),
                lambda: self._write_properties(writer, profile.properties, profile.versions),
            ),
            (bool(profile.dependencies), lambda: self._write_dependencies(writer, profile.dependencies)),
            (bool(profile.boms), lambda: self._write_dependency_management(writer, profile.boms)),
            (not profile.build.is_empty(), lambda: self._write_profile_build(writer, profile.build)),
            (
                bool(_published(profile.repositories) or _published(profile.plugin_repositories)),
                lambda: self._write_repositories(writer, profile.repositories, profile.plugin_repositories),
            ),
            (
                not profile.distribution_management.is_empty(),
                lambda: self._write_distribution_management(writer, profile.distribution_management),
            ),
            (not profile.reporting.is_empty(), lambda: self._write_reporting(writer, profile.reporting)),
        ]

    def _write_activation(self, writer: IndentingWriter, activation: MavenProfileActivation) -> None:
        if activation.is_empty():
            return
        with self._element(writer, "activation"):
            if activation.active_by_default is not None:
                self._single(writer, "activeByDefault", _flag(activation.active_by_default))
            self._single(writer, "jdk", activation.jdk)
            if activation.os is not None:
                with self._element(writer, "os"):
                    self._single(writer, "name", activation.os.name)
                    self._single(writer, "family", activation.os.family)
                    self._single(writer, "arch", activation.os.arch)
                    self._single(writer, "version", activation.os.version)
            if activation.property is not None:
                with self._element(writer, "property"):
                    self._single(writer, "name", activation.property.name)
                    self._single(writer, "value", activation.property.value)
            if activation.file is not None:
                with self._element(writer, "file"):
                    self._single(writer, "exists", activation.file.exists)
                    self._single(writer, "missing", activation.file.missing)

    def _write_profile_build(self, writer: IndentingWriter, build: MavenProfileBuild) -> None:
        with self._element(writer, "build"):
            self._single(writer, "defaultGoal", build.default_goal)
            self._single(writer, "directory", build.directory)
            self._single(writer, "finalName", build.final_name)
            self._write_list(writer, "filters", "filter", build.filters)
            self._write_resources(writer, "resources", "resource", build.resources)
            self._write_resources(writer, "testResources", "testResource", build.test_resources)
            self._write_plugin_management(writer, build.plugin_management)
            self._write_plugins(writer, build.plugins)

    def _write_reporting(self, writer: IndentingWriter, reporting: MavenReporting) -> None:
        with self._element(writer, "reporting"):
            if reporting.exclude_defaults is not None:
                self._single(writer, "excludeDefaults", _flag(reporting.exclude_defaults))
            self._single(writer, "outputDirectory", reporting.output_directory)
            if reporting.report_plugins:
                with self._element(writer, "plugins"):
                    for plugin in reporting.report_plugins:
                        self._write_report_plugin(writer, plugin)

    def _write_report_plugin(self, writer: IndentingWriter, plugin: MavenReportPlugin) -> None:
        with self._element(writer, "plugin"):
            self._single(writer, "groupId", plugin.group_id)
            self._single(writer, "artifactId", plugin.artifact_id)
            self._single(writer, "version", plugin.version)
            self._single(writer, "inherited", plugin.inherited)
            self._write_configuration(writer, plugin.configuration)
            if plugin.report_sets:
                with self._element(writer, "reportSets"):
                    for report_set in plugin.report_sets:
                        self._write_report_set(writer, report_set)

    def _write_report_set(self, writer: IndentingWriter, report_set: ReportSet) -> None:
        with self._element(writer, "reportSet"):
            self._single(writer, "id", report_set.id)
            self._single(writer, "inherited", report_set.inherited)
            self._write_list(writer, "reports", "report", report_set.reports)
            self._write_configuration(writer, report_set.configuration)

    # ------------------------------------------------------------------
    # Low-level element helpers
    # ------------------------------------------------------------------

    def _single(self, writer: IndentingWriter, name: str, text: str | None, override: bool = False) -> None:
        if text is None:
            if override:
                writer.println(f"<{name}/>")
            return
        writer.print(f"<{name}>")
        writer.print(escape_xml(text))
        writer.println(f"</{name}>")

    @contextmanager
    def _element(self, writer: IndentingWriter, name: str, attributes: str = "") -> Iterator[None]:
        writer.println(f"<{name}{attributes}>")
        with writer.indented():
            yield
        writer.println(f"</{name}>")

    def _write_list(self, writer: IndentingWriter, container: str, child: str, values: Sequence[str]) -> None:
        if not values:
            return
        with self._element(writer, container):
            for value in values:
                self._single(writer, child, value)


def _published(repositories: Sequence[MavenRepository]) -> list[MavenRepository]:
    """Drop Maven Central, which every build already knows about."""
    return [repository for repository in repositories if not repository.is_maven_central]


def _flag(value: bool) -> str:
    return "true" if value else "false"
