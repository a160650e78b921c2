"""skillpack CLI entrypoint."""

from __future__ import annotations

import logging

import typer

app = typer.Typer(
    name="skillpack",
    add_completion=False,
    no_args_is_help=True,
    help="Validate and package agent skill bundles.",
)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """skillpack CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("version")
def version() -> None:
    """Print the installed skillpack version."""
    from skillpack import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `skillpack --help` is fast.
    """
    from skillpack.cli.commands import build_pkg as build_pkg_cmd
    from skillpack.cli.commands import validate_skills as validate_skills_cmd

    validate_skills_cmd.register(app)
    build_pkg_cmd.register(app)


_register_commands()
