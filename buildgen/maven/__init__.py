"""Maven build model and ``pom.xml`` writer.

Quick usage::

    from buildgen.maven import MavenBuild, MavenBuildWriter

    build = MavenBuild()
    build.settings.coordinates("com.example", "demo").version("0.0.1-SNAPSHOT")
    build.dependencies.add("web", "org.springframework.boot", "spring-boot-starter-web")
    print(MavenBuildWriter().write(build))
"""

from buildgen.maven.build import MavenBuild, MavenBuildSnapshot
from buildgen.maven.distribution import (
    DeploymentRepository,
    MavenDistributionManagement,
    MavenDistributionManagementBuilder,
    Relocation,
    RepositoryPolicy,
    Site,
)
from buildgen.maven.metadata import (
    LicenseDistribution,
    MavenBuildSettings,
    MavenBuildSettingsBuilder,
    MavenDeveloper,
    MavenLicense,
    MavenParent,
    MavenScm,
)
from buildgen.maven.plugin import (
    Execution,
    ExecutionBuilder,
    MavenExtension,
    MavenExtensionContainer,
    MavenPlugin,
    MavenPluginBuilder,
    MavenPluginContainer,
    PluginDependency,
    ProcessingInstruction,
)
from buildgen.maven.profile import (
    MavenProfile,
    MavenProfileActivation,
    MavenProfileActivationBuilder,
    MavenProfileBuild,
    MavenProfileBuildBuilder,
    MavenProfileBuilder,
    MavenProfileContainer,
)
from buildgen.maven.reporting import (
    MavenReporting,
    MavenReportingBuilder,
    MavenReportPlugin,
    MavenReportPluginBuilder,
    ReportSet,
    ReportSetBuilder,
)
from buildgen.maven.resource import MavenResource, MavenResourceBuilder, MavenResourceContainer
from buildgen.maven.writer import MAVEN_SCOPES, MavenBuildWriter, escape_xml

__all__ = [
    "DeploymentRepository",
    "Execution",
    "ExecutionBuilder",
    "LicenseDistribution",
    "MAVEN_SCOPES",
    "MavenBuild",
    "MavenBuildSettings",
    "MavenBuildSettingsBuilder",
    "MavenBuildSnapshot",
    "MavenBuildWriter",
    "MavenDeveloper",
    "MavenDistributionManagement",
    "MavenDistributionManagementBuilder",
    "MavenExtension",
    "MavenExtensionContainer",
    "MavenLicense",
    "MavenParent",
    "MavenPlugin",
    "MavenPluginBuilder",
    "MavenPluginContainer",
    "MavenProfile",
    "MavenProfileActivation",
    "MavenProfileActivationBuilder",
    "MavenProfileBuild",
    "MavenProfileBuildBuilder",
    "MavenProfileBuilder",
    "MavenProfileContainer",
    "MavenReportPlugin",
    "MavenReportPluginBuilder",
    "MavenReporting",
    "MavenReportingBuilder",
    "MavenResource",
    "MavenResourceBuilder",
    "MavenResourceContainer",
    "MavenScm",
    "PluginDependency",
    "ProcessingInstruction",
    "Relocation",
    "RepositoryPolicy",
    "ReportSet",
    "ReportSetBuilder",
    "Site",
    "escape_xml",
]
