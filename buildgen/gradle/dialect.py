"""Statement syntax of the two Gradle script dialects.

The build and settings writers own the section order; a dialect only knows
how to spell one statement at a time and which model features it can express.
``GroovyDsl`` renders ``build.gradle`` files, ``KotlinDsl`` renders
``build.gradle.kts`` files.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Protocol

from buildgen.exceptions import DialectError
from buildgen.gradle.build import GradleBuildSnapshot
from buildgen.gradle.customization import Invocation
from buildgen.gradle.plugin import GradlePlugin
from buildgen.model.bom import BillOfMaterials
from buildgen.model.dependency import Dependency, DependencyScope, Exclusion
from buildgen.model.repository import MavenRepository
from buildgen.model.version import VersionReference

SCOPE_CONFIGURATIONS: dict[DependencyScope | None, str] = {
    None: "implementation",
    DependencyScope.COMPILE: "implementation",
    DependencyScope.COMPILE_ONLY: "compileOnly",
    DependencyScope.RUNTIME: "runtimeOnly",
    DependencyScope.ANNOTATION_PROCESSOR: "annotationProcessor",
    DependencyScope.PROVIDED_RUNTIME: "providedRuntime",
    DependencyScope.TEST_COMPILE: "testImplementation",
    DependencyScope.TEST_RUNTIME: "testRuntimeOnly",
}

KOTLIN_SHORT_PLUGIN_IDS = frozenset({"java", "war", "groovy"})
KOTLIN_PLUGIN_PREFIX = "org.jetbrains.kotlin."
APPLIED_PLUGIN_PROBLEM = (
    "build.gradle.kts scripts shouldn't apply plugins. They should use the plugins block instead."
)


def configuration_for(dependency: Dependency) -> str:
    """Configuration of *dependency*: its explicit override, else its scope's."""
    if dependency.configuration:
        return dependency.configuration
    return SCOPE_CONFIGURATIONS[dependency.scope]


def coordinates(
    group_id: str,
    artifact_id: str,
    version: str | None,
    classifier: str | None = None,
    type_: str | None = None,
) -> str:
    """Return ``group:artifact[:version][:classifier][@type]``.

    A classifier without a version keeps an empty version slot
    (``group:artifact::classifier``).
    """
    notation = f"{group_id}:{artifact_id}"
    if version is not None:
        notation += f":{version}"
    if classifier is not None:
        notation += f":{classifier}" if version is not None else f"::{classifier}"
    if type_ is not None:
        notation += f"@{type_}"
    return notation


def java_version_constant(version: str) -> str | None:
    """Map a source compatibility to a ``JavaVersion`` constant name.

    ``"1.8"`` and ``"8"`` give ``VERSION_1_8``; ``"17"`` gives ``VERSION_17``.
    Returns None for anything that is not a Java version from 6 onwards.
    """
    candidate = version[2:] if version.startswith("1.") else version
    if not candidate.isdigit():
        return None
    number = int(candidate)
    if number < 6:
        return None
    return f"VERSION_1_{number}" if number <= 10 else f"VERSION_{number}"


class GradleDialect(Protocol):
    """Capabilities a script writer needs from a dialect."""

    build_file_name: str
    settings_file_name: str
    ext_block: str | None

    def validate(self, snapshot: GradleBuildSnapshot) -> list[str]: ...

    def quote(self, value: str) -> str: ...

    def plugin(self, plugin: GradlePlugin) -> str: ...

    def applied_plugin(self, plugin: GradlePlugin) -> str: ...

    def assignment(self, name: str, value: str) -> str: ...

    def source_compatibility(self, version: str) -> str: ...

    def configuration_declaration(self, name: str) -> str | None: ...

    def extends_from(self, names: Collection[str], declared: Collection[str]) -> str: ...

    def repository(self, repository: MavenRepository) -> str: ...

    def repository_url(self, url: str) -> str: ...

    def ext_entry(self, key: str, value: str) -> str: ...

    def version(self, version: VersionReference | None) -> str | None: ...

    def dependency(self, dependency: Dependency) -> str: ...

    def exclusion(self, exclusion: Exclusion) -> str: ...

    def bom(self, bom: BillOfMaterials) -> str: ...

    def typed_task(self, type_name: str) -> str: ...

    def named_task(self, name: str) -> str: ...

    def invocation(self, invocation: Invocation) -> str: ...

    def plugin_request(self, plugin_id: str) -> str: ...

    def use_module(self, dependency: Dependency) -> str: ...


class GroovyDsl:
    """The dynamically typed dialect (``build.gradle``)."""

    build_file_name = "build.gradle"
    settings_file_name = "settings.gradle"
    ext_block = "ext"

    def validate(self, snapshot: GradleBuildSnapshot) -> list[str]:
        return []

    def quote(self, value: str) -> str:
        return f"'{value}'"

    def plugin(self, plugin: GradlePlugin) -> str:
        statement = f"id '{plugin.id}'"
        if plugin.version is not None:
            statement += f" version '{plugin.version}'"
        return statement

    def applied_plugin(self, plugin: GradlePlugin) -> str:
        return f"apply plugin: '{plugin.id}'"

    def assignment(self, name: str, value: str) -> str:
        return f"{name} = '{value}'"

    def source_compatibility(self, version: str) -> str:
        return f"sourceCompatibility = '{version}'"

    def configuration_declaration(self, name: str) -> str | None:
        return None

    def extends_from(self, names: Collection[str], declared: Collection[str]) -> str:
        return "extendsFrom " + ", ".join(names)

    def repository(self, repository: MavenRepository) -> str:
        if repository.is_maven_central:
            return "mavenCentral()"
        return f"maven {{ url '{repository.url}' }}"

    def repository_url(self, url: str) -> str:
        return f"url '{url}'"

    def ext_entry(self, key: str, value: str) -> str:
        return f"set('{key}', {value})"

    def version(self, version: VersionReference | None) -> str | None:
        if version is None:
            return None
        prop = version.version_property
        if prop is None:
            return version.value
        if prop.internal:
            return "${" + prop.to_camel_case_format() + "}"
        return "${property('" + prop.to_standard_format() + "')}"

    def _notation(self, version: VersionReference | None, notation: str) -> str:
        quote = '"' if version is not None and version.is_property else "'"
        return f"{quote}{notation}{quote}"

    def dependency(self, dependency: Dependency) -> str:
        notation = self._notation(
            dependency.version,
            coordinates(
                dependency.group_id,
                dependency.artifact_id,
                self.version(dependency.version),
                dependency.classifier,
                dependency.type,
            ),
        )
        if dependency.exclusions:
            return f"{configuration_for(dependency)}({notation})"
        return f"{configuration_for(dependency)} {notation}"

    def exclusion(self, exclusion: Exclusion) -> str:
        return f"exclude group: '{exclusion.group_id}', module: '{exclusion.artifact_id}'"

    def bom(self, bom: BillOfMaterials) -> str:
        notation = coordinates(bom.group_id, bom.artifact_id, self.version(bom.version))
        return "mavenBom " + self._notation(bom.version, notation)

    def typed_task(self, type_name: str) -> str:
        return f"tasks.withType({type_name}) {{"

    def named_task(self, name: str) -> str:
        return f"tasks.named('{name}') {{"

    def invocation(self, invocation: Invocation) -> str:
        if not invocation.arguments:
            return f"{invocation.target}()"
        return f"{invocation.target} " + ", ".join(invocation.arguments)

    def plugin_request(self, plugin_id: str) -> str:
        return f"if (requested.id.id == '{plugin_id}') {{"

    def use_module(self, dependency: Dependency) -> str:
        notation = coordinates(dependency.group_id, dependency.artifact_id, self.version(dependency.version))
        return f"useModule({self._notation(dependency.version, notation)})"


class KotlinDsl:
    """The statically typed dialect (``build.gradle.kts``)."""

    build_file_name = "build.gradle.kts"
    settings_file_name = "settings.gradle.kts"
    ext_block = None

    def validate(self, snapshot: GradleBuildSnapshot) -> list[str]:
        """Collect every feature of *snapshot* this dialect cannot express."""
        problems = []
        if not snapshot.buildscript.is_empty():
            problems.append("build.gradle.kts scripts shouldn't need a buildscript")
        if snapshot.applied_plugins:
            problems.append(APPLIED_PLUGIN_PROBLEM)
        settings = snapshot.settings
        if (
            settings.toolchain is None
            and settings.source_compatibility is not None
            and java_version_constant(settings.source_compatibility) is None
        ):
            problems.append(f"Unsupported source compatibility '{settings.source_compatibility}'")
        return problems

    def quote(self, value: str) -> str:
        return f'"{value}"'

    def plugin(self, plugin: GradlePlugin) -> str:
        if plugin.id in KOTLIN_SHORT_PLUGIN_IDS:
            statement = plugin.id
        elif plugin.id.startswith(KOTLIN_PLUGIN_PREFIX):
            statement = f'kotlin("{plugin.id[len(KOTLIN_PLUGIN_PREFIX):]}")'
        else:
            statement = f'id("{plugin.id}")'
        if plugin.version is not None:
            statement += f' version "{plugin.version}"'
        return statement

    def applied_plugin(self, plugin: GradlePlugin) -> str:
        raise DialectError(self.build_file_name, [f"{APPLIED_PLUGIN_PROBLEM} (plugin '{plugin.id}')"])

    def assignment(self, name: str, value: str) -> str:
        return f'{name} = "{value}"'

    def source_compatibility(self, version: str) -> str:
        return f"sourceCompatibility = JavaVersion.{java_version_constant(version)}"

    def configuration_declaration(self, name: str) -> str | None:
        return f"val {name} by configurations.creating"

    def extends_from(self, names: Collection[str], declared: Collection[str]) -> str:
        parents = [name if name in declared else f"configurations.{name}.get()" for name in names]
        return "extendsFrom(" + ", ".join(parents) + ")"

    def repository(self, repository: MavenRepository) -> str:
        if repository.is_maven_central:
            return "mavenCentral()"
        return f'maven {{ url = uri("{repository.url}") }}'

    def repository_url(self, url: str) -> str:
        return f'url = uri("{url}")'

    def ext_entry(self, key: str, value: str) -> str:
        return f'extra["{key}"] = {value}'

    def version(self, version: VersionReference | None) -> str | None:
        if version is None:
            return None
        prop = version.version_property
        if prop is None:
            return version.value
        name = prop.to_camel_case_format() if prop.internal else prop.to_standard_format()
        return '${property("' + name + '")}'

    def dependency(self, dependency: Dependency) -> str:
        notation = coordinates(
            dependency.group_id,
            dependency.artifact_id,
            self.version(dependency.version),
            dependency.classifier,
            dependency.type,
        )
        return f'{configuration_for(dependency)}("{notation}")'

    def exclusion(self, exclusion: Exclusion) -> str:
        return f'exclude(group = "{exclusion.group_id}", module = "{exclusion.artifact_id}")'

    def bom(self, bom: BillOfMaterials) -> str:
        notation = coordinates(bom.group_id, bom.artifact_id, self.version(bom.version))
        return f'mavenBom("{notation}")'

    def typed_task(self, type_name: str) -> str:
        return f"tasks.withType<{type_name}> {{"

    def named_task(self, name: str) -> str:
        return f'tasks.named("{name}") {{'

    def invocation(self, invocation: Invocation) -> str:
        return f"{invocation.target}(" + ", ".join(invocation.arguments) + ")"

    def plugin_request(self, plugin_id: str) -> str:
        return f'if (requested.id.id == "{plugin_id}") {{'

    def use_module(self, dependency: Dependency) -> str:
        notation = coordinates(dependency.group_id, dependency.artifact_id, self.version(dependency.version))
        return f'useModule("{notation}")'


GROOVY = GroovyDsl()
KOTLIN = KotlinDsl()
