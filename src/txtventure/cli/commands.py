"""CLI command implementations"""

import json
import logging
from typing import Annotated, Optional

import typer

from txtventure.config import Settings, load_config
from txtventure.core.generator import GenerationError, Generator


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.secho(f"Error: {msg}", err=True, fg=typer.colors.RED)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _configure_logging(enabled: bool) -> None:
    if enabled:
        logging.basicConfig(level=logging.INFO, format="%(message)s")


FilenameArg = Annotated[Optional[str], typer.Argument(help="Source document (default from config)")]
HostOpt = Annotated[Optional[str], typer.Option("--hostname", help="Base URL links resolve against")]
DestOpt = Annotated[Optional[str], typer.Option("--destination", help="Path under host and base path")]
BaseOpt = Annotated[Optional[str], typer.Option("--base-path", help="Local output directory")]
ArtOpt = Annotated[Optional[str], typer.Option("--art-path", help="Directory of <id>.txt art files")]
EncodingOpt = Annotated[Optional[str], typer.Option("--encoding", help="Source document encoding")]


def generate_cmd(
    filename: FilenameArg = None,
    hostname: HostOpt = None,
    destination: DestOpt = None,
    base_path: BaseOpt = None,
    art_path: ArtOpt = None,
    encoding: EncodingOpt = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Parse only; write nothing")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Suppress progress logging")] = False,
    ):
    """Split a document into linked text files and write them out."""
    settings = _settings(overrides={
        "filename": filename, "hostname": hostname, "destination": destination,
        "base_path": base_path, "art_path": art_path, "encoding": encoding,
        "logging": False if quiet else None,
    })
    _configure_logging(settings.logging)
    generator = Generator(settings)

    try:
        sections = generator.generate(write=not dry_run)
    except GenerationError as e:
        _fail(str(e))

    typer.echo(f"Parsed {len(sections)} section(s)")
    report = generator.last_report
    if report is None:
        return
    if not report.ok:
        typer.secho(f"Wrote {report.written} file(s); {report.failed} failed :(", fg=typer.colors.RED)
        raise typer.Exit(1)
    typer.echo(f"Wrote {report.written} file(s) to {settings.base_path}/")
    typer.secho("Please enjoy your Textventure responsibly!", fg=typer.colors.GREEN)


def sections_cmd(
    filename: FilenameArg = None,
    hostname: HostOpt = None,
    destination: DestOpt = None,
    base_path: BaseOpt = None,
    art_path: ArtOpt = None,
    encoding: EncodingOpt = None,
    ):
    """Parse a document and print its sections as JSON without writing files."""
    settings = _settings(overrides={
        "filename": filename, "hostname": hostname, "destination": destination,
        "base_path": base_path, "art_path": art_path, "encoding": encoding,
        "logging": False,
    })
    try:
        sections = Generator(settings).generate(write=False)
    except GenerationError as e:
        _fail(str(e))
    typer.echo(json.dumps([s.model_dump() for s in sections], indent=2, ensure_ascii=False))
