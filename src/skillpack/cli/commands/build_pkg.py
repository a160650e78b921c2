"""`skillpack build` command.

Validates first; on failure exits 1 without touching the output directory.
On success rebuilds the output directory and writes manifest.json.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from skillpack.bundle.io import build_package
from skillpack.bundle.manifest import summarize_description
from skillpack.cli.commands.validate_skills import RULE, echo_report
from skillpack.config import DEFAULT_OUT_DIR, DEFAULT_PACKAGE_NAME, DEFAULT_SKILLS_DIR, BuildConfig, discover_version
from skillpack.core.validate import validate_skills


def register(app: typer.Typer) -> None:
    @app.command("build")
    def build(
        skills_dir: str = typer.Option(DEFAULT_SKILLS_DIR, "--skills-dir", help="Directory holding one folder per skill."),
        out_dir: str = typer.Option(DEFAULT_OUT_DIR, "--out-dir", help="Output directory (removed and recreated)."),
        name: str = typer.Option(DEFAULT_PACKAGE_NAME, "--name", help="Package name recorded in manifest.json."),
        version: Optional[str] = typer.Option(
            None,
            "--version",
            help="Package version (default: read from package.json/pyproject.toml next to the skills directory).",
        ),
    ) -> None:
        """Validate skills, then copy them into the output directory with a manifest."""
        if version is not None and not version.strip():
            raise typer.BadParameter("--version must be a non-empty string")

        skills_p = Path(skills_dir)
        typer.echo("Building Agent Skills Package...")
        typer.echo(RULE)

        typer.echo("\n1. Running validation...")
        report = validate_skills(skills_p)
        echo_report(report)
        if not report.ok:
            typer.echo("Build failed: validation errors", err=True)
            raise typer.Exit(code=1)

        config = BuildConfig(
            skills_dir=skills_p,
            out_dir=Path(out_dir),
            name=name,
            version=version if version is not None else discover_version(skills_p.resolve().parent),
        )

        typer.echo(f"\n2. Building {config.out_dir}/ ...")
        try:
            result = build_package(config)
        except (ValueError, OSError) as e:
            typer.echo(f"Build failed: {e}", err=True)
            raise typer.Exit(code=1) from e

        skills = result.manifest["skills"]
        typer.echo("\n" + RULE)
        typer.echo("Build complete!")
        typer.echo("\nPackage contents:")
        typer.echo(f"  - {len(skills)} skill(s)")
        for s in skills:
            typer.echo(f"    • {s['name']}: {summarize_description(s['description'])}")
        typer.echo(f"\nOutput: {result.out_dir}")
