"""License manager shell CLI.

This module provides the command-line interface: the start-up flow that
installs exit handlers and reads settings.txt, plus helpers for
validating, showing and creating settings files.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Final

import typer
import yaml
from dotenv import find_dotenv, load_dotenv

from licensemangler.constants import DIRECTORY_ENV_VAR, FATAL_EXIT_CODE, SETTINGS_FILENAME
from licensemangler.errors import LicenseManagerUnavailableError, SettingsPathError
from licensemangler.manager import LicenseManager
from licensemangler.reporting import ConsoleReporter, Reporter
from licensemangler.settings import (
    DIRECTIVES,
    Configuration,
    load_settings,
    parse_value,
    read_settings_file,
)
from licensemangler.signals import install_exit_handlers, restore_handlers

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="License manager shell", add_completion=False)
config_app = typer.Typer(help="Settings helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "licensemangler.cli"

DIRECTORY_OPTION = typer.Option(
    None,
    "--directory",
    "-d",
    envvar=DIRECTORY_ENV_VAR,
    exists=True,
    file_okay=False,
    help=f"Directory holding {SETTINGS_FILENAME} (default: current directory)",
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
FILE_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Settings file to check")
DST_ARGUMENT = typer.Argument(Path(SETTINGS_FILENAME), help="Output settings file")


@dataclass
class CliState:
    """Options shared by every sub-command."""

    directory: Path | None = None
    debug: bool = False


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_environment(directory: Path | None) -> None:
    """Load a .env file so settings can reference ``${VAR}`` values."""
    try:
        dotenv_path = str(directory / ".env") if directory else find_dotenv(usecwd=True)
    except OSError as exc:
        logger.debug("Skipping .env lookup: %s", exc)
        return
    if dotenv_path and load_dotenv(dotenv_path):
        logger.debug("Loaded environment from %s", dotenv_path)


def _report_summary(config: Configuration, reporter: Reporter) -> None:
    """Show the effective settings when anything differs from the defaults."""
    if config == Configuration():
        return
    reporter.info("Effective settings:")
    for key, value in config.model_dump(by_alias=True).items():
        if isinstance(value, bool):
            shown = str(value).lower()
        else:
            shown = value or "(not set)"
        reporter.info(f"  {key} = {shown}")


def _load_or_exit(directory: Path | None, reporter: Reporter) -> Configuration:
    """Load settings, ending the process if a configured path is missing."""
    try:
        return load_settings(directory, reporter)
    except SettingsPathError as exc:
        reporter.error(str(exc))
        raise typer.Exit(code=FATAL_EXIT_CODE) from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    directory: Path | None = DIRECTORY_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Start the license manager shell.

    Without a sub-command this installs the Ctrl+C handler and reads the
    user settings, reporting what was found.
    """
    _setup_logging(debug)
    ctx.obj = CliState(directory=directory, debug=debug)

    reporter = ConsoleReporter()
    previous = install_exit_handlers(reporter)
    ctx.call_on_close(lambda: restore_handlers(previous))

    _load_environment(directory)

    if ctx.invoked_subcommand is None:
        config = _load_or_exit(directory, reporter)
        logger.debug("Effective configuration: %s", config.model_dump())
        _report_summary(config, reporter)


@app.command()
def status(ctx: typer.Context) -> None:
    """Report whether the license manager is running."""
    state: CliState = ctx.obj
    reporter = ConsoleReporter()
    manager = LicenseManager(_load_or_exit(state.directory, reporter))
    try:
        typer.echo(manager.status())
    except LicenseManagerUnavailableError as exc:
        reporter.error(str(exc))
        raise typer.Exit(code=1) from exc


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path = FILE_ARGUMENT):
    """Check that every path in a settings file exists."""
    reporter = ConsoleReporter()
    try:
        read_settings_file(file, reporter)
    except SettingsPathError as exc:
        reporter.error(str(exc))
        raise typer.Exit(code=1) from exc
    reporter.success("✅ Settings valid")


@config_app.command("show")
def show_config(ctx: typer.Context):
    """Print the effective configuration as YAML."""
    state: CliState = ctx.obj
    # Status messages go to stderr so stdout holds only the YAML document
    config = _load_or_exit(state.directory, ConsoleReporter(err=True))
    typer.echo(yaml.safe_dump(config.model_dump(by_alias=True), sort_keys=False), nl=False)


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a settings file."""
    typer.echo("Interactive settings builder - press Enter to leave a path unset.")

    config = Configuration()
    if not typer.confirm("Check for updates on launch?", default=True):
        config.disable_update_check()

    for directive in DIRECTIVES:
        while True:
            value = parse_value(
                typer.prompt(f"{directive.label.capitalize()} path", default="", show_default=False)
            )
            if not value:
                break
            try:
                directive.setter(config, value)
                break  # valid → next directive
            except SettingsPathError as err:
                typer.secho(str(err), fg=typer.colors.RED, err=True)

    dst.write_text("\n".join(config.to_directives()) + "\n", encoding="utf-8")
    typer.secho(f"Settings written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
