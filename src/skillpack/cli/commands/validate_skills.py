"""`skillpack validate` command.

Checks every bundle under the skills directory and prints per-bundle
diagnostics. Exit code 0 when all bundles are valid, 1 otherwise.
"""

from __future__ import annotations

from pathlib import Path

import typer

from skillpack.config import DEFAULT_SKILLS_DIR
from skillpack.core.frontmatter import DESCRIPTOR_FILENAME
from skillpack.core.validate import BundleReport, ValidationReport, validate_skills

RULE = "=" * 40


def _echo_bundle(report: BundleReport) -> None:
    typer.echo(f"\nValidating skill: {report.name}")
    if report.ok:
        typer.echo(f"  ✓ {DESCRIPTOR_FILENAME} exists")
        typer.echo("  ✓ Valid frontmatter (name + description)")
        for sub, names in report.extras.items():
            typer.echo(f"  ✓ {sub.capitalize()}: {', '.join(names)}")
        return
    for issue in report.issues:
        typer.echo(f"  ✗ {issue.kind.value}: {issue.message}")


def echo_report(report: ValidationReport) -> None:
    """Print a validation report in the form shared by `validate` and `build`."""
    for issue in report.root_issues:
        typer.echo(f"Error: {issue}")
    for b in report.bundles:
        _echo_bundle(b)
    typer.echo("\n" + RULE)
    if report.ok:
        typer.echo("✓ All skills are valid!")
    else:
        typer.echo("✗ Some skills have errors")


def register(app: typer.Typer) -> None:
    @app.command("validate")
    def validate(
        skills_dir: str = typer.Option(DEFAULT_SKILLS_DIR, "--skills-dir", help="Directory holding one folder per skill."),
    ) -> None:
        """Validate every skill bundle."""
        typer.echo("Validating Agent Skills...")
        typer.echo(RULE)

        report = validate_skills(Path(skills_dir))
        echo_report(report)
        if not report.ok:
            raise typer.Exit(code=1)
