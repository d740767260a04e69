"""buildgen configuration.

Typed settings for the command line front end and the writer factory. All
settings use Pydantic v2 models so they are validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

INDENT_PATTERN = r"^[ \t]+$"


class OutputFormat(str, Enum):
    """Descriptor flavours the CLI can render."""
    MAVEN = "maven"
    GRADLE = "gradle"
    GRADLE_KTS = "gradle-kts"


class IndentConfig(BaseModel):
    """Indentation used per content type.

    Values must be made of spaces and tabs only. The Maven default follows the
    Maven archetypes (one tab), scripts use four spaces.
    """

    default: str = Field(default="    ", pattern=INDENT_PATTERN)
    maven: str = Field(default="\t", pattern=INDENT_PATTERN)
    gradle: str = Field(default="    ", pattern=INDENT_PATTERN)
    gradle_settings: str = Field(default="    ", pattern=INDENT_PATTERN)

    def as_dict(self) -> dict[str, str]:
        """Return a ``{content_id: indent}`` mapping as used by the writer factory."""
        return {
            "maven": self.maven,
            "gradle": self.gradle,
            "gradle-settings": self.gradle_settings,
        }


class OutputConfig(BaseModel):
    """Where and what the CLI writes."""

    output_dir: Path = Field(default=Path("."))
    formats: list[OutputFormat] = Field(
        default_factory=lambda: [OutputFormat.MAVEN, OutputFormat.GRADLE, OutputFormat.GRADLE_KTS]
    )
    write_settings: bool = Field(default=True, description="Also emit settings.gradle(.kts)")


class GeneratorConfig(BaseModel):
    """Global buildgen configuration."""

    indent: IndentConfig = Field(default_factory=IndentConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            BUILDGEN_OUTPUT_DIR, BUILDGEN_FORMATS (comma separated),
            BUILDGEN_MAVEN_INDENT, BUILDGEN_GRADLE_INDENT.
        """
        indent_kwargs: dict[str, Any] = {}
        if os.environ.get("BUILDGEN_MAVEN_INDENT"):
            indent_kwargs["maven"] = os.environ["BUILDGEN_MAVEN_INDENT"]
        if os.environ.get("BUILDGEN_GRADLE_INDENT"):
            indent_kwargs["gradle"] = os.environ["BUILDGEN_GRADLE_INDENT"]
            indent_kwargs["gradle_settings"] = os.environ["BUILDGEN_GRADLE_INDENT"]

        output_kwargs: dict[str, Any] = {}
        if os.environ.get("BUILDGEN_OUTPUT_DIR"):
            output_kwargs["output_dir"] = Path(os.environ["BUILDGEN_OUTPUT_DIR"])
        if os.environ.get("BUILDGEN_FORMATS"):
            output_kwargs["formats"] = [
                f.strip() for f in os.environ["BUILDGEN_FORMATS"].split(",") if f.strip()
            ]

        return cls(indent=IndentConfig(**indent_kwargs), output=OutputConfig(**output_kwargs))
