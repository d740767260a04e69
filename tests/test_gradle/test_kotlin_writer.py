"""Unit tests for GradleBuildWriter with the Kotlin DSL (buildgen.gradle.writer).

Tests cover:
- Plugin short forms and kotlin("...") accessors
- Source compatibility as a JavaVersion constant
- Declared configurations via delegated properties
- extra[...] properties written at top level
- Dependency, exclusion, BOM and task syntax
- Scope groups in the same order as the Groovy DSL
"""

from __future__ import annotations

import pytest

from buildgen.gradle import GradleBuildWriter
from buildgen.gradle.dialect import java_version_constant
from buildgen.model import DependencyScope, VersionProperty, VersionReference


class TestLayout:
    @pytest.mark.unit
    def test_typical_build(self, gradle_build, render_kotlin):
        gradle_build.plugins.add("java")
        gradle_build.plugins.add("org.springframework.boot", "3.2.0")
        gradle_build.settings.toolchain(17)
        gradle_build.repositories.add("maven-central")
        gradle_build.dependencies.add("web", "org.springframework.boot", "spring-boot-starter-web")
        gradle_build.dependencies.add(
            "test", "org.springframework.boot", "spring-boot-starter-test", scope=DependencyScope.TEST_COMPILE
        )
        gradle_build.tasks.customize("test", lambda task: task.invoke("useJUnitPlatform"))
        assert render_kotlin(gradle_build) == [
            "plugins {",
            "    java",
            '    id("org.springframework.boot") version "3.2.0"',
            "}",
            "",
            'group = "com.example"',
            'version = "0.0.1-SNAPSHOT"',
            "",
            "java {",
            "    toolchain {",
            "        languageVersion = JavaLanguageVersion.of(17)",
            "    }",
            "}",
            "",
            "repositories {",
            "    mavenCentral()",
            "}",
            "",
            "dependencies {",
            '    implementation("org.springframework.boot:spring-boot-starter-web")',
            '    testImplementation("org.springframework.boot:spring-boot-starter-test")',
            "}",
            "",
            'tasks.named("test") {',
            "    useJUnitPlatform()",
            "}",
        ]

    @pytest.mark.unit
    def test_deterministic(self, gradle_build):
        gradle_build.properties.version("b.version", "1")
        gradle_build.properties.version("a.version", "2")
        writer = GradleBuildWriter.kotlin()
        assert writer.write(gradle_build) == writer.write(gradle_build)


class TestPlugins:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("plugin_id", "version", "expected"),
        [
            ("java", None, "java"),
            ("war", None, "war"),
            ("groovy", None, "groovy"),
            ("org.jetbrains.kotlin.jvm", "1.9.22", 'kotlin("jvm") version "1.9.22"'),
            ("org.jetbrains.kotlin.plugin.spring", "1.9.22", 'kotlin("plugin.spring") version "1.9.22"'),
            ("io.spring.dependency-management", "1.1.4", 'id("io.spring.dependency-management") version "1.1.4"'),
            ("application", None, 'id("application")'),
        ],
    )
    def test_plugin_forms(self, gradle_build, render_kotlin, plugin_id, version, expected):
        gradle_build.plugins.add(plugin_id, version)
        assert render_kotlin(gradle_build)[:3] == ["plugins {", f"    {expected}", "}"]


class TestJava:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("version", "constant"),
        [
            ("1.6", "VERSION_1_6"),
            ("1.8", "VERSION_1_8"),
            ("8", "VERSION_1_8"),
            ("10", "VERSION_1_10"),
            ("11", "VERSION_11"),
            ("21", "VERSION_21"),
        ],
    )
    def test_java_version_constant(self, version, constant):
        assert java_version_constant(version) == constant

    @pytest.mark.unit
    @pytest.mark.parametrize("version", ["5", "1.5", "abc", "17.0.1", ""])
    def test_unsupported_java_version(self, version):
        assert java_version_constant(version) is None

    @pytest.mark.unit
    def test_source_compatibility(self, gradle_build, render_kotlin, sequence):
        gradle_build.settings.source_compatibility("17")
        assert sequence(
            render_kotlin(gradle_build),
            "java {",
            "    sourceCompatibility = JavaVersion.VERSION_17",
            "}",
        )


class TestConfigurations:
    @pytest.mark.unit
    def test_declared_configuration(self, gradle_build, render_kotlin, sequence):
        gradle_build.configurations.add("developmentOnly")
        gradle_build.configurations.customize(
            "runtimeClasspath", lambda c: c.extends_from("developmentOnly")
        )
        gradle_build.configurations.customize("compileOnly", lambda c: c.extends_from("annotationProcessor"))
        assert sequence(
            render_kotlin(gradle_build),
            "val developmentOnly by configurations.creating",
            "configurations {",
            "    runtimeClasspath {",
            "        extendsFrom(developmentOnly)",
            "    }",
            "    compileOnly {",
            "        extendsFrom(configurations.annotationProcessor.get())",
            "    }",
            "}",
        )

    @pytest.mark.unit
    def test_declaration_only(self, gradle_build, render_kotlin):
        gradle_build.configurations.add("developmentOnly")
        lines = render_kotlin(gradle_build)
        assert "val developmentOnly by configurations.creating" in lines
        assert "configurations {" not in lines


class TestPropertiesAndDependencies:
    @pytest.mark.unit
    def test_extra_properties(self, gradle_build, render_kotlin, sequence):
        gradle_build.properties.version("spring-cloud.version", "2023.0.1")
        gradle_build.properties.version(VersionProperty.of("kotlin.version", internal=False), "1.9.22")
        assert sequence(
            render_kotlin(gradle_build),
            'version = "0.0.1-SNAPSHOT"',
            "",
            'extra["kotlin.version"] = "1.9.22"',
            'extra["springCloudVersion"] = "2023.0.1"',
        )

    @pytest.mark.unit
    def test_versions(self, gradle_build, render_kotlin, sequence):
        gradle_build.dependencies.add("a", "org.a", "a", version="1.0")
        gradle_build.dependencies.add("b", "org.b", "b", version=VersionReference.of_property("b.version"))
        gradle_build.dependencies.add(
            "c", "org.c", "c", version=VersionReference.of_property(VersionProperty.of("c.version", internal=False))
        )
        assert sequence(
            render_kotlin(gradle_build),
            '    implementation("org.a:a:1.0")',
            '    implementation("org.b:b:${property("bVersion")}")',
            '    implementation("org.c:c:${property("c.version")}")',
        )

    @pytest.mark.unit
    def test_exclusions(self, gradle_build, render_kotlin, sequence):
        gradle_build.dependencies.add(
            "test", "org.springframework.boot", "spring-boot-starter-test", scope=DependencyScope.TEST_COMPILE
        ).exclude("org.junit.vintage", "junit-vintage-engine")
        assert sequence(
            render_kotlin(gradle_build),
            '    testImplementation("org.springframework.boot:spring-boot-starter-test") {',
            '        exclude(group = "org.junit.vintage", module = "junit-vintage-engine")',
            "    }",
        )

    @pytest.mark.unit
    def test_grouped_by_scope(self, gradle_build, render_kotlin, render_groovy):
        gradle_build.dependencies.add("r", "org.r", "r", scope=DependencyScope.RUNTIME)
        gradle_build.dependencies.add("c", "org.c", "c", scope=DependencyScope.COMPILE)
        gradle_build.dependencies.add("t", "org.t", "t", scope=DependencyScope.TEST_COMPILE)
        gradle_build.dependencies.add("co", "org.co", "co", scope=DependencyScope.COMPILE_ONLY)
        lines = [line for line in render_kotlin(gradle_build) if line.startswith("    ")]
        assert lines == [
            '    implementation("org.c:c")',
            '    compileOnly("org.co:co")',
            '    runtimeOnly("org.r:r")',
            '    testImplementation("org.t:t")',
        ]
        assert [line for line in render_groovy(gradle_build) if line.startswith("    ")] == [
            "    implementation 'org.c:c'",
            "    compileOnly 'org.co:co'",
            "    runtimeOnly 'org.r:r'",
            "    testImplementation 'org.t:t'",
        ]

    @pytest.mark.unit
    def test_repository(self, gradle_build, render_kotlin):
        gradle_build.repositories.add("spring-milestones", url="https://repo.spring.io/milestone")
        assert '    maven { url = uri("https://repo.spring.io/milestone") }' in render_kotlin(gradle_build)

    @pytest.mark.unit
    def test_boms(self, gradle_build, render_kotlin, sequence):
        gradle_build.boms.add("one", "org.example", "one", "1.0", order=1)
        gradle_build.boms.add("cloud", "org.example", "cloud", VersionReference.of_property("cloud.version"), order=3)
        assert sequence(
            render_kotlin(gradle_build),
            "dependencyManagement {",
            "    imports {",
            '        mavenBom("org.example:cloud:${property("cloudVersion")}")',
            '        mavenBom("org.example:one:1.0")',
            "    }",
            "}",
        )


class TestTasks:
    @pytest.mark.unit
    def test_typed_task(self, gradle_build, render_kotlin, sequence):
        gradle_build.tasks.customize_with_type(
            "org.jetbrains.kotlin.gradle.tasks.KotlinCompile",
            lambda t: t.nested(
                "compilerOptions", lambda opts: opts.append("freeCompilerArgs", 'listOf("-Xjsr305=strict")')
            ),
        )
        lines = render_kotlin(gradle_build)
        assert lines[0] == "import org.jetbrains.kotlin.gradle.tasks.KotlinCompile"
        assert sequence(
            lines,
            "tasks.withType<KotlinCompile> {",
            "    compilerOptions {",
            '        freeCompilerArgs += listOf("-Xjsr305=strict")',
            "    }",
            "}",
        )

    @pytest.mark.unit
    def test_invocation_arguments(self, gradle_build, render_kotlin):
        gradle_build.tasks.customize("bootRun", lambda t: t.invoke("systemProperty", '"a"', '"b"'))
        assert '    systemProperty("a", "b")' in render_kotlin(gradle_build)
