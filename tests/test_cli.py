"""Unit tests for the buildgen command line (buildgen.cli).

Tests cover:
- render() output per requested format
- main() writing files to the output directory
- --formats / --no-settings / --config handling
- Exit status on missing files, invalid input and dialect errors
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from buildgen.cli import main, render
from buildgen.config import GeneratorConfig, IndentConfig, OutputConfig
from buildgen.description import BuildDescription


@pytest.fixture(autouse=True)
def clean_env():
    """Run every test without BUILDGEN_* variables."""
    env = {key: value for key, value in os.environ.items() if not key.startswith("BUILDGEN_")}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestRender:
    @pytest.mark.unit
    def test_all_formats(self, sample_description_data):
        files = render(BuildDescription.model_validate(sample_description_data), GeneratorConfig())
        assert list(files) == [
            "pom.xml",
            "build.gradle",
            "settings.gradle",
            "build.gradle.kts",
            "settings.gradle.kts",
        ]
        assert "\t<modelVersion>4.0.0</modelVersion>" in files["pom.xml"]
        assert "    implementation 'org.springframework.boot:spring-boot-starter-web'" in files["build.gradle"]
        assert files["settings.gradle.kts"] == 'rootProject.name = "demo"\n'

    @pytest.mark.unit
    def test_without_settings(self, sample_description_data):
        config = GeneratorConfig(output=OutputConfig(formats=["gradle"], write_settings=False))
        files = render(BuildDescription.model_validate(sample_description_data), config)
        assert list(files) == ["build.gradle"]

    @pytest.mark.unit
    def test_indent_from_config(self, sample_description_data):
        config = GeneratorConfig(indent=IndentConfig(gradle="  "), output=OutputConfig(formats=["gradle-kts"]))
        files = render(BuildDescription.model_validate(sample_description_data), config)
        assert '  implementation("org.springframework.boot:spring-boot-starter-web")' in files["build.gradle.kts"]


class TestMain:
    @pytest.mark.unit
    def test_writes_files(self, description_file: Path, tmp_path: Path):
        out_dir = tmp_path / "out"
        main([str(description_file), "-o", str(out_dir)])
        assert sorted(p.name for p in out_dir.iterdir()) == [
            "build.gradle",
            "build.gradle.kts",
            "pom.xml",
            "settings.gradle",
            "settings.gradle.kts",
        ]
        assert (out_dir / "pom.xml").read_text(encoding="utf-8").startswith('<?xml version="1.0"')

    @pytest.mark.unit
    def test_formats_and_no_settings(self, description_file: Path, tmp_path: Path):
        out_dir = tmp_path / "out"
        main([str(description_file), "-o", str(out_dir), "--formats", "maven,gradle-kts", "--no-settings"])
        assert sorted(p.name for p in out_dir.iterdir()) == ["build.gradle.kts", "pom.xml"]

    @pytest.mark.unit
    def test_config_file(self, description_file: Path, tmp_path: Path):
        out_dir = tmp_path / "configured"
        config_path = GeneratorConfig(output=OutputConfig(output_dir=out_dir, formats=["maven"])).save(
            tmp_path / "buildgen.json"
        )
        main([str(description_file), "--config", str(config_path)])
        assert [p.name for p in out_dir.iterdir()] == ["pom.xml"]

    @pytest.mark.unit
    def test_missing_description(self, tmp_path: Path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing.json"), "-o", str(tmp_path)])
        assert excinfo.value.code == 1
        assert "Description file not found" in capsys.readouterr().out

    @pytest.mark.unit
    def test_invalid_description(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"group": "com.example"}), encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            main([str(path), "-o", str(tmp_path / "out")])
        assert excinfo.value.code == 1
        assert not (tmp_path / "out").exists()

    @pytest.mark.unit
    def test_malformed_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit):
            main([str(path)])

    @pytest.mark.unit
    def test_dialect_error(self, sample_description_data, tmp_path: Path, capsys):
        sample_description_data["gradle"]["plugins"].append({"id": "war", "apply": True})
        path = tmp_path / "applied.json"
        path.write_text(json.dumps(sample_description_data), encoding="utf-8")
        out_dir = tmp_path / "out"
        with pytest.raises(SystemExit) as excinfo:
            main([str(path), "-o", str(out_dir), "--formats", "gradle,gradle-kts"])
        assert excinfo.value.code == 1
        assert "Rendering failed" in capsys.readouterr().out
        assert not out_dir.exists()

    @pytest.mark.unit
    def test_invalid_formats_argument(self, description_file: Path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(description_file), "--formats", "ant"])
        assert excinfo.value.code == 2

    @pytest.mark.unit
    def test_empty_formats_writes_nothing(self, description_file: Path, tmp_path: Path, capsys):
        out_dir = tmp_path / "out"
        main([str(description_file), "-o", str(out_dir), "--formats", ","])
        assert "nothing to write" in capsys.readouterr().out
        assert not out_dir.exists()
