"""CLI commands for inspecting Drive links and status badges."""

import logging
import sys
from dataclasses import dataclass

import click
import structlog
from pydantic import ValidationError

from src.drive import (
    analyze_identifier,
    build_files_query,
    extract_file_id,
    extract_folder_id,
    resolve_folder_input,
)
from src.drive.constants import COMPONENT_CLI, COMPONENT_DRIVE, COMPONENT_STATUS
from src.observability.logging import (
    bind_command_context,
    clear_command_context,
    configure_logging,
)
from src.settings import AppSettings, get_settings
from src.status import STATUS_PRESENTATIONS, classify_status


logger = structlog.get_logger()

NO_MATCH = "NO MATCH"


@dataclass
class CliContext:
    """Shared state for subcommands."""

    settings: AppSettings


def _load_settings() -> AppSettings:
    """Load settings, exit on invalid environment."""
    try:
        return get_settings()
    except ValidationError as e:
        click.echo("Invalid settings:", err=True)
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            click.echo(f"  - {location}: {error['msg']}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--json-logs/--no-json-logs",
    default=None,
    help="Use JSON format for logs (default: JSON_LOGS setting).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.pass_context
def cli(ctx: click.Context, json_logs: bool | None, verbose: bool) -> None:
    """Google Drive link and status badge toolkit."""
    settings = _load_settings()
    level = logging.DEBUG if verbose else settings.log_level_value
    configure_logging(
        level=level,
        json_format=settings.json_logs if json_logs is None else json_logs,
    )
    if ctx.invoked_subcommand:
        bind_command_context(ctx.invoked_subcommand)
        ctx.call_on_close(clear_command_context)
    ctx.obj = CliContext(settings=settings)


@cli.command("folder-id")
@click.argument("link")
@click.option(
    "--lenient",
    is_flag=True,
    help="Strip whitespace and pass non-matching input through as an ID.",
)
def folder_id(link: str, lenient: bool) -> None:
    """Print the folder ID contained in a Drive sharing LINK."""
    if lenient:
        click.echo(resolve_folder_input(link))
        return

    result = extract_folder_id(link)
    if not result.is_found:
        logger.info(
            "folder_id_not_found", component=COMPONENT_DRIVE, link_length=len(link)
        )
        click.echo(NO_MATCH, err=True)
        sys.exit(1)
    click.echo(result.identifier)


@cli.command("file-id")
@click.argument("link")
def file_id(link: str) -> None:
    """Print the file ID contained in a Drive file LINK."""
    result = extract_file_id(link)
    if not result.is_found:
        logger.info(
            "file_id_not_found", component=COMPONENT_DRIVE, link_length=len(link)
        )
        click.echo(NO_MATCH, err=True)
        sys.exit(1)
    click.echo(result.identifier)


@cli.command()
@click.argument("link")
@click.option(
    "--expected",
    default=None,
    help="Known-good folder ID to compare the extracted one against.",
)
@click.pass_obj
def inspect(obj: CliContext, link: str, expected: str | None) -> None:
    """Show a character-level analysis of the folder ID in LINK."""
    log = logger.bind(component=COMPONENT_CLI)

    result = extract_folder_id(link)
    click.echo(f"Input URL: {link}")
    if not result.is_found:
        click.echo(f"Extracted folder ID: {NO_MATCH}")
        log.info("inspect_no_match")
        sys.exit(1)

    report = analyze_identifier(result.unwrap(link), expected=expected)
    click.echo(f"Extracted folder ID: {report.identifier}")
    click.echo(f"Folder ID length: {report.length}")

    click.echo("")
    click.echo("Character analysis of extracted ID:")
    for info in report.characters:
        click.echo(f"  [{info.index}] '{info.char}' code_point={info.code_point}")

    if report.expected is not None:
        click.echo("")
        click.echo(f"Expected ID: {report.expected}")
        click.echo(f"Identical: {'yes' if report.matches_expected else 'no'}")
        if report.first_mismatch is not None:
            click.echo(f"First difference at index: {report.first_mismatch}")

    click.echo("")
    click.echo(
        "Listing path: "
        f"{build_files_query(report.identifier, obj.settings.drive_files_path)}"
    )
    log.info(
        "inspect_completed",
        length=report.length,
        matches_expected=report.matches_expected,
    )


@cli.command()
@click.argument("code")
def status(code: str) -> None:
    """Print the badge label and color class for a status CODE."""
    presentation = classify_status(code)
    if code not in STATUS_PRESENTATIONS:
        logger.info("status_fallback", component=COMPONENT_STATUS, status=code)
    click.echo(f"{presentation.label}\t{presentation.color_class}")


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
