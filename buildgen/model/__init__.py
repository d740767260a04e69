"""Build-system independent model: containers, dependencies, BOMs, versions.

Quick usage::

    from buildgen.model import DependencyContainer, DependencyScope

    dependencies = DependencyContainer()
    dependencies.add("web", "org.springframework.boot", "spring-boot-starter-web")
    dependencies.customize("web", lambda d: d.scope(DependencyScope.COMPILE))
"""

from buildgen.model.bom import DEFAULT_BOM_ORDER, BillOfMaterials, BomBuilder, BomContainer, order_boms
from buildgen.model.build import Build, BuildSettings, BuildSettingsBuilder
from buildgen.model.configuration import (
    Configuration,
    ConfigurationBuilder,
    NestedSetting,
    ScalarSetting,
    Setting,
)
from buildgen.model.container import BuilderContainer
from buildgen.model.dependency import (
    SCRIPT_SCOPE_GROUPS,
    XML_SCOPE_GROUPS,
    Dependency,
    DependencyBuilder,
    DependencyContainer,
    DependencyScope,
    Exclusion,
    default_sort_key,
    order_dependencies,
)
from buildgen.model.properties import PropertyContainer
from buildgen.model.repository import (
    MAVEN_CENTRAL,
    MavenRepository,
    RepositoryBuilder,
    RepositoryContainer,
    RepositoryCredentials,
)
from buildgen.model.version import VersionProperty, VersionReference

__all__ = [
    "BillOfMaterials",
    "BomBuilder",
    "BomContainer",
    "Build",
    "BuildSettings",
    "BuildSettingsBuilder",
    "BuilderContainer",
    "Configuration",
    "ConfigurationBuilder",
    "DEFAULT_BOM_ORDER",
    "Dependency",
    "DependencyBuilder",
    "DependencyContainer",
    "DependencyScope",
    "Exclusion",
    "MAVEN_CENTRAL",
    "MavenRepository",
    "NestedSetting",
    "PropertyContainer",
    "RepositoryBuilder",
    "RepositoryContainer",
    "RepositoryCredentials",
    "SCRIPT_SCOPE_GROUPS",
    "ScalarSetting",
    "Setting",
    "VersionProperty",
    "VersionReference",
    "XML_SCOPE_GROUPS",
    "default_sort_key",
    "order_boms",
    "order_dependencies",
]
