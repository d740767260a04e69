"""Unit tests for Maven profile rendering (buildgen.maven.profile + writer).

Tests cover:
- Profile id and activation predicates
- Profile sections are written without blank separators
- Profile build section, reporting and distribution management
- Profiles merge repeated customizations by id
"""

from __future__ import annotations

import pytest

from buildgen.maven import MavenBuildWriter
from buildgen.model import DependencyScope


class TestProfiles:
    @pytest.mark.unit
    def test_empty_profile(self, maven_build, render_pom, sequence):
        maven_build.profiles.add("empty")
        assert sequence(
            render_pom(maven_build),
            "",
            "    <profiles>",
            "        <profile>",
            "            <id>empty</id>",
            "        </profile>",
            "    </profiles>",
            "",
            "</project>",
        )

    @pytest.mark.unit
    def test_activation(self, maven_build, render_pom, sequence):
        maven_build.profiles.customize(
            "native",
            lambda profile: profile.activate(
                lambda activation: activation.active_by_default()
                .jdk("17")
                .os(name="linux", family="unix")
                .property("env", "ci")
                .file_missing("target/skip")
            ),
        )
        assert sequence(
            render_pom(maven_build),
            "            <id>native</id>",
            "            <activation>",
            "                <activeByDefault>true</activeByDefault>",
            "                <jdk>17</jdk>",
            "                <os>",
            "                    <name>linux</name>",
            "                    <family>unix</family>",
            "                </os>",
            "                <property>",
            "                    <name>env</name>",
            "                    <value>ci</value>",
            "                </property>",
            "                <file>",
            "                    <missing>target/skip</missing>",
            "                </file>",
            "            </activation>",
        )

    @pytest.mark.unit
    def test_sections_are_not_separated(self, maven_build, render_pom, sequence):
        profile = maven_build.profiles.add("ci")
        profile.module("extra")
        profile.properties.property("skipTests", "true")
        profile.dependencies.add("h2", "com.h2database", "h2", scope=DependencyScope.RUNTIME)
        assert sequence(
            render_pom(maven_build),
            "            <id>ci</id>",
            "            <modules>",
            "                <module>extra</module>",
            "            </modules>",
            "            <properties>",
            "                <skipTests>true</skipTests>",
            "            </properties>",
            "            <dependencies>",
            "                <dependency>",
            "                    <groupId>com.h2database</groupId>",
            "                    <artifactId>h2</artifactId>",
            "                    <scope>runtime</scope>",
            "                </dependency>",
            "            </dependencies>",
            "        </profile>",
        )

    @pytest.mark.unit
    def test_profile_build(self, maven_build, render_pom, sequence):
        profile = maven_build.profiles.add("release")
        profile.configure_build(
            lambda build: build.default_goal("deploy").final_name("demo").filter("filters/release.properties")
        )
        profile.build_section.plugins.add("org.apache.maven.plugins", "maven-gpg-plugin")
        assert sequence(
            render_pom(maven_build),
            "            <build>",
            "                <defaultGoal>deploy</defaultGoal>",
            "                <finalName>demo</finalName>",
            "                <filters>",
            "                    <filter>filters/release.properties</filter>",
            "                </filters>",
            "                <plugins>",
            "                    <plugin>",
            "                        <groupId>org.apache.maven.plugins</groupId>",
            "                        <artifactId>maven-gpg-plugin</artifactId>",
            "                    </plugin>",
            "                </plugins>",
            "            </build>",
        )

    @pytest.mark.unit
    def test_reporting(self, maven_build, render_pom, sequence):
        profile = maven_build.profiles.add("site")
        profile.reporting.exclude_defaults().report_plugins.add(
            "org.apache.maven.plugins",
            "maven-project-info-reports-plugin",
            lambda plugin: plugin.report_set("default", lambda report_set: report_set.report("index")),
        )
        assert sequence(
            render_pom(maven_build),
            "            <reporting>",
            "                <excludeDefaults>true</excludeDefaults>",
            "                <plugins>",
            "                    <plugin>",
            "                        <groupId>org.apache.maven.plugins</groupId>",
            "                        <artifactId>maven-project-info-reports-plugin</artifactId>",
            "                        <reportSets>",
            "                            <reportSet>",
            "                                <id>default</id>",
            "                                <reports>",
            "                                    <report>index</report>",
            "                                </reports>",
            "                            </reportSet>",
            "                        </reportSets>",
            "                    </plugin>",
            "                </plugins>",
            "            </reporting>",
        )

    @pytest.mark.unit
    def test_distribution_before_reporting(self, maven_build):
        profile = maven_build.profiles.add("deploy")
        profile.reporting.output_directory("target/site")
        profile.distribution_management.snapshot_repository(id="snapshots", url="https://example.com/snapshots")
        content = MavenBuildWriter().write(maven_build)
        assert content.index("<distributionManagement>") < content.index("<reporting>")
        assert "<snapshotRepository>" in content

    @pytest.mark.unit
    def test_customizations_merge(self, maven_build):
        maven_build.profiles.customize("a", lambda p: p.module("one"))
        maven_build.profiles.customize("b")
        maven_build.profiles.customize("a", lambda p: p.module("two"))
        profiles = maven_build.snapshot().profiles
        assert [profile.id for profile in profiles] == ["a", "b"]
        assert profiles[0].modules == ("one", "two")
