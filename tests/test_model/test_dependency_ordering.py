"""Unit tests for dependency ordering (buildgen.model.dependency).

Tests cover:
- Script groups keep every scope apart
- XML groups merge both test scopes
- Sorting within a group by group id then artifact id
- Custom sort keys
- Missing coordinates
"""

from __future__ import annotations

import pytest

from buildgen.exceptions import BuildModelError
from buildgen.model import (
    SCRIPT_SCOPE_GROUPS,
    XML_SCOPE_GROUPS,
    Dependency,
    DependencyContainer,
    DependencyScope,
    order_dependencies,
)


def dep(group_id: str, artifact_id: str, scope: DependencyScope | None = None) -> Dependency:
    return Dependency(group_id=group_id, artifact_id=artifact_id, scope=scope)


@pytest.fixture
def mixed() -> list[Dependency]:
    """Dependencies in every scope, declared out of order."""
    return [
        dep("org.t", "test-runtime", DependencyScope.TEST_RUNTIME),
        dep("org.a", "test-compile", DependencyScope.TEST_COMPILE),
        dep("org.p", "provided", DependencyScope.PROVIDED_RUNTIME),
        dep("org.ap", "processor", DependencyScope.ANNOTATION_PROCESSOR),
        dep("org.r", "runtime", DependencyScope.RUNTIME),
        dep("org.co", "compile-only", DependencyScope.COMPILE_ONLY),
        dep("org.c", "web"),
        dep("org.c", "core", DependencyScope.COMPILE),
    ]


class TestOrderDependencies:
    @pytest.mark.unit
    def test_script_groups(self, mixed):
        ordered = order_dependencies(mixed, SCRIPT_SCOPE_GROUPS)
        assert [d.artifact_id for d in ordered] == [
            "core",
            "web",
            "compile-only",
            "runtime",
            "processor",
            "provided",
            "test-compile",
            "test-runtime",
        ]

    @pytest.mark.unit
    def test_xml_groups_share_test_scopes(self):
        dependencies = [
            dep("org.z", "compile-test", DependencyScope.TEST_COMPILE),
            dep("org.a", "runtime-test", DependencyScope.TEST_RUNTIME),
        ]
        xml = order_dependencies(dependencies, XML_SCOPE_GROUPS)
        script = order_dependencies(dependencies, SCRIPT_SCOPE_GROUPS)
        assert [d.artifact_id for d in xml] == ["runtime-test", "compile-test"]
        assert [d.artifact_id for d in script] == ["compile-test", "runtime-test"]

    @pytest.mark.unit
    def test_sorted_by_group_then_artifact(self):
        dependencies = [dep("org.b", "a"), dep("org.a", "z"), dep("org.a", "b")]
        ordered = order_dependencies(dependencies, SCRIPT_SCOPE_GROUPS)
        assert [(d.group_id, d.artifact_id) for d in ordered] == [("org.a", "b"), ("org.a", "z"), ("org.b", "a")]

    @pytest.mark.unit
    def test_custom_sort_key(self):
        dependencies = [dep("org.a", "short"), dep("org.b", "much-longer")]
        ordered = order_dependencies(dependencies, SCRIPT_SCOPE_GROUPS, lambda d: -len(d.artifact_id))
        assert [d.artifact_id for d in ordered] == ["much-longer", "short"]

    @pytest.mark.unit
    def test_nothing_lost(self, mixed):
        assert len(order_dependencies(mixed, XML_SCOPE_GROUPS)) == len(mixed)

    @pytest.mark.unit
    def test_empty(self):
        assert order_dependencies([], SCRIPT_SCOPE_GROUPS) == []


class TestDependencySnapshot:
    @pytest.mark.unit
    def test_missing_coordinates(self):
        dependencies = DependencyContainer()
        dependencies.add("ghost", scope=DependencyScope.RUNTIME)
        with pytest.raises(BuildModelError, match="'ghost'"):
            dependencies.values()

    @pytest.mark.unit
    def test_string_scope_accepted(self):
        dependencies = DependencyContainer()
        dependencies.add("core", "org.example", "core", scope="test-runtime")
        assert dependencies.values()[0].scope is DependencyScope.TEST_RUNTIME

    @pytest.mark.unit
    def test_exclusions_keep_order(self):
        dependencies = DependencyContainer()
        dependencies.add("core", "org.example", "core").exclude("b", "b").exclude("a", "a")
        exclusions = dependencies.values()[0].exclusions
        assert [e.group_id for e in exclusions] == ["b", "a"]
