"""Dependencies, scopes and the ordering rules shared by every writer.

Dependencies are stored under a caller-supplied key (``web``, ``lombok``...)
rather than by coordinates, so a contributor can tweak "the web starter"
without caring which artifact it resolves to.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict

from buildgen.exceptions import BuildModelError
from buildgen.model.container import BuilderContainer
from buildgen.model.version import VersionReference


class DependencyScope(str, Enum):
    """Role of a dependency in the build."""
    COMPILE = "compile"
    COMPILE_ONLY = "compile-only"
    RUNTIME = "runtime"
    ANNOTATION_PROCESSOR = "annotation-processor"
    PROVIDED_RUNTIME = "provided-runtime"
    TEST_COMPILE = "test-compile"
    TEST_RUNTIME = "test-runtime"


class Exclusion(BaseModel):
    """A transitive dependency to leave out."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str


class Dependency(BaseModel):
    """Immutable snapshot of a dependency.

    ``optional`` only affects the Maven output; ``configuration`` overrides the
    Gradle configuration derived from the scope.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: VersionReference | None = None
    scope: DependencyScope | None = None
    classifier: str | None = None
    type: str | None = None
    exclusions: tuple[Exclusion, ...] = ()
    optional: bool = False
    configuration: str | None = None


class DependencyBuilder:
    """Mutable accumulator for a :class:`Dependency`."""

    def __init__(self, key: str, group_id: str | None = None, artifact_id: str | None = None) -> None:
        self.key = key
        self._group_id = group_id
        self._artifact_id = artifact_id
        self._version: VersionReference | None = None
        self._scope: DependencyScope | None = None
        self._classifier: str | None = None
        self._type: str | None = None
        self._exclusions: list[Exclusion] = []
        self._optional = False
        self._configuration: str | None = None

    def coordinates(self, group_id: str, artifact_id: str) -> DependencyBuilder:
        self._group_id = group_id
        self._artifact_id = artifact_id
        return self

    def version(self, version: VersionReference | str | None) -> DependencyBuilder:
        if isinstance(version, str):
            version = VersionReference.of_value(version)
        self._version = version
        return self

    def scope(self, scope: DependencyScope | str | None) -> DependencyBuilder:
        self._scope = DependencyScope(scope) if scope is not None else None
        return self

    def classifier(self, classifier: str | None) -> DependencyBuilder:
        self._classifier = classifier
        return self

    def type(self, type_: str | None) -> DependencyBuilder:
        self._type = type_
        return self

    def exclusions(self, *exclusions: Exclusion) -> DependencyBuilder:
        """Append exclusions, keeping their declaration order."""
        self._exclusions.extend(exclusions)
        return self

    def exclude(self, group_id: str, artifact_id: str) -> DependencyBuilder:
        return self.exclusions(Exclusion(group_id=group_id, artifact_id=artifact_id))

    def optional(self, optional: bool = True) -> DependencyBuilder:
        self._optional = optional
        return self

    def configuration(self, configuration: str | None) -> DependencyBuilder:
        """Force the Gradle configuration regardless of the scope."""
        self._configuration = configuration
        return self

    def build(self) -> Dependency:
        if not self._group_id or not self._artifact_id:
            raise BuildModelError(f"Dependency '{self.key}' has no coordinates")
        return Dependency(
            group_id=self._group_id,
            artifact_id=self._artifact_id,
            version=self._version,
            scope=self._scope,
            classifier=self._classifier,
            type=self._type,
            exclusions=tuple(self._exclusions),
            optional=self._optional,
            configuration=self._configuration,
        )


class DependencyContainer(BuilderContainer[DependencyBuilder, Dependency]):
    """Dependencies of a build, keyed by a caller-supplied id."""

    def __init__(self) -> None:
        super().__init__(DependencyBuilder)

    def add(
        self,
        key: str,
        group_id: str | None = None,
        artifact_id: str | None = None,
        *,
        version: VersionReference | str | None = None,
        scope: DependencyScope | str | None = None,
        **options,
    ) -> DependencyBuilder:
        """Register or refine the dependency *key*.

        Only the arguments that are given are applied, so adding a known key
        again without coordinates leaves the existing entry untouched.

        Args:
            key: Identifier of the dependency in this container.
            group_id: Group of the artifact.
            artifact_id: Name of the artifact.
            version: Literal version or reference; ``None`` means managed.
            scope: One of :class:`DependencyScope`.
            **options: ``classifier``, ``type``, ``optional`` or
                ``configuration``, forwarded to the builder.
        """
        builder = self.customize(key)
        if group_id is not None or artifact_id is not None:
            builder.coordinates(group_id, artifact_id)
        if version is not None:
            builder.version(version)
        if scope is not None:
            builder.scope(scope)
        for name, value in options.items():
            getattr(builder, name)(value)
        return builder


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

DependencySortKey = Callable[[Dependency], object]


def default_sort_key(dependency: Dependency) -> tuple[str, str]:
    """Sort by group id, then artifact id."""
    return dependency.group_id, dependency.artifact_id


ScopeGroups = Sequence[frozenset]

# Gradle keeps every scope apart, Maven shares one group for both test scopes.
SCRIPT_SCOPE_GROUPS: tuple[frozenset, ...] = (
    frozenset({None, DependencyScope.COMPILE}),
    frozenset({DependencyScope.COMPILE_ONLY}),
    frozenset({DependencyScope.RUNTIME}),
    frozenset({DependencyScope.ANNOTATION_PROCESSOR}),
    frozenset({DependencyScope.PROVIDED_RUNTIME}),
    frozenset({DependencyScope.TEST_COMPILE}),
    frozenset({DependencyScope.TEST_RUNTIME}),
)

XML_SCOPE_GROUPS: tuple[frozenset, ...] = (
    frozenset({None, DependencyScope.COMPILE}),
    frozenset({DependencyScope.COMPILE_ONLY}),
    frozenset({DependencyScope.RUNTIME}),
    frozenset({DependencyScope.ANNOTATION_PROCESSOR}),
    frozenset({DependencyScope.PROVIDED_RUNTIME}),
    frozenset({DependencyScope.TEST_COMPILE, DependencyScope.TEST_RUNTIME}),
)


def order_dependencies(
    dependencies: Iterable[Dependency],
    groups: ScopeGroups,
    sort_key: DependencySortKey = default_sort_key,
) -> list[Dependency]:
    """Order *dependencies* by scope group, then by *sort_key* within a group."""
    candidates = list(dependencies)
    ordered: list[Dependency] = []
    for group in groups:
        members = [dependency for dependency in candidates if dependency.scope in group]
        ordered.extend(sorted(members, key=sort_key))
    return ordered
