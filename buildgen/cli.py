"""Command line front end: render build descriptors from a JSON description.

Examples::

    buildgen demo.json
    buildgen demo.json -o ./demo --formats maven,gradle-kts
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from buildgen.config import GeneratorConfig, OutputFormat
from buildgen.description import BuildDescription
from buildgen.exceptions import BuildModelError, DialectError
from buildgen.gradle.dialect import GROOVY, KOTLIN
from buildgen.gradle.settings_writer import GradleSettingsWriter
from buildgen.gradle.writer import GradleBuildWriter
from buildgen.io.indenting_writer import IndentingWriterFactory
from buildgen.maven.writer import MavenBuildWriter
from buildgen.utils import console, print_error, print_success, print_summary_table, print_warning, write_text_file

logger = logging.getLogger(__name__)


def render(description: BuildDescription, config: GeneratorConfig) -> dict[str, str]:
    """Render every requested format.

    Returns:
        A ``{file name: content}`` mapping, in the order the formats were
        requested. Nothing is written to disk.

    Raises:
        BuildModelError: If the description breaks a model rule.
        DialectError: If a script dialect cannot express the build.
    """
    factory = IndentingWriterFactory.from_config(config)
    files: dict[str, str] = {}
    for output_format in config.output.formats:
        if output_format is OutputFormat.MAVEN:
            files["pom.xml"] = MavenBuildWriter().write(description.to_maven_build(), factory)
            continue
        dialect = GROOVY if output_format is OutputFormat.GRADLE else KOTLIN
        build = description.to_gradle_build()
        files[dialect.build_file_name] = GradleBuildWriter(dialect).write(build, factory)
        if config.output.write_settings:
            files[dialect.settings_file_name] = GradleSettingsWriter(dialect).write(build, factory)
    return files


def _parse_formats(value: str) -> list[OutputFormat]:
    try:
        return [OutputFormat(item.strip()) for item in value.split(",") if item.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid formats: {value}") from exc


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``buildgen``."""
    parser = argparse.ArgumentParser(
        description="buildgen -- render Maven and Gradle build files from a JSON description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  buildgen demo.json\n"
            "  buildgen demo.json -o ./demo --formats maven,gradle-kts\n"
        ),
    )
    parser.add_argument("description", help="Path to the JSON build description")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: $BUILDGEN_OUTPUT_DIR or the current directory)",
    )
    parser.add_argument(
        "--formats",
        type=_parse_formats,
        default=None,
        help="Comma-separated formats among maven, gradle, gradle-kts (default: all)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file holding a saved GeneratorConfig",
    )
    parser.add_argument("--no-settings", action="store_true", help="Do not write settings.gradle(.kts)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    description_path = Path(args.description)
    if not description_path.exists():
        console.print(f"[bold red]Error:[/bold red] Description file not found: {description_path}")
        sys.exit(1)

    try:
        config = GeneratorConfig.load(Path(args.config)) if args.config else GeneratorConfig.from_env()
        if args.output is not None:
            config.output.output_dir = Path(args.output)
        if args.formats is not None:
            config.output.formats = args.formats
        if args.no_settings:
            config.output.write_settings = False
        description = BuildDescription.load(description_path)
    except (ValidationError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid input: {exc}")
        sys.exit(1)

    try:
        files = render(description, config)
    except (BuildModelError, DialectError, ValidationError) as exc:
        print_error(f"Rendering failed: {exc}")
        sys.exit(1)

    if not files:
        print_warning("No output formats selected; nothing to write")
        return

    written = {}
    for name, content in files.items():
        path = write_text_file(config.output.output_dir / name, content)
        written[name] = str(path)
    print_summary_table(written, title=f"{description.group}:{description.artifact}")
    print_success(f"Generated {len(written)} file(s) in {config.output.output_dir}")


if __name__ == "__main__":
    main()
