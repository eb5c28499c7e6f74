"""
reinit — CLI entrypoint.

Usage:
    reinit --help
    reinit init --fileType md:README --destDir .
    reinit init --multiple --parallel --concurrency 2
    reinit types
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from reinit import __version__
from reinit.core.models.request import DEST_FILE_EXISTS_BEHAVIOURS, INIT_BEHAVIOURS
from reinit.core.observability.logging_config import level_from_flags, setup_logging

ISSUES_URL = "https://github.com/reliverse/reinit"

_STATUS_STYLE = {
    "created": ("✓", "green"),
    "copied": ("✓", "green"),
    "skipped": ("⊘", "yellow"),
    "error": ("✗", "red"),
}


@click.group()
@click.version_option(version=__version__, prog_name="reinit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to reinit.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """reinit — drop boilerplate files into a project."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=level_from_flags(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get("REINIT_LOG_FILE"),
        log_file_level=os.environ.get("REINIT_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
    )


@cli.command("init")
@click.option(
    "--fileType", "--file-type", "file_type", default=None,
    help="File type to initialize (e.g. 'md:README').",
)
@click.option(
    "--destDir", "--dest-dir", "dest_dir", default=".", show_default=True,
    help="Destination directory.",
)
@click.option("--multiple", is_flag=True, help="Pick several file types interactively.")
@click.option("--parallel", is_flag=True, help="Run tasks in parallel.")
@click.option(
    "--concurrency", type=click.IntRange(min=1), default="4", show_default=True,
    help="Concurrency limit if --parallel is set.",
)
@click.option(
    "--init-behaviour", type=click.Choice(INIT_BEHAVIOURS), default=None,
    help="Create, copy, or copy with create as fallback (default: from config).",
)
@click.option(
    "--exists-behaviour", type=click.Choice(DEST_FILE_EXISTS_BEHAVIOURS), default=None,
    help="What to do when the destination exists (default: from config).",
)
@click.option("--src-dir", default=None, help="Directory to copy source files from.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def init(
    ctx: click.Context,
    file_type: str | None,
    dest_dir: str,
    multiple: bool,
    parallel: bool,
    concurrency: int,
    init_behaviour: str | None,
    exists_behaviour: str | None,
    src_dir: str | None,
    as_json: bool,
) -> None:
    """Initialize one or more boilerplate files.

    Examples:

        reinit init --fileType md:README

        reinit init --fileType git:gitignore --init-behaviour copy --src-dir ~/templates

        reinit init --multiple --parallel
    """
    from reinit.core.config.loader import load_config
    from reinit.core.errors import ConfigError, InvalidFileType
    from reinit.core.models.request import InitOptions, InitRequest
    from reinit.core.services.prompts import ClickSelector
    from reinit.core.services.registry import is_known, known_types
    from reinit.core.use_cases.init_files import init_files_sync

    if file_type and not is_known(file_type):
        err = InvalidFileType(file_type, known_types())
        raise click.BadParameter(str(err), param_hint="'--fileType'")

    try:
        config = load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    selector = ctx.obj.get("selector") or ClickSelector()

    if multiple:
        chosen = selector.multiselect("Select file types to initialize", known_types())
        if not chosen:
            click.echo("No file types selected. Exiting...")
            return
    elif file_type:
        chosen = [file_type]
    else:
        chosen = [selector.select("Pick a file type to initialize", known_types())]

    options = InitOptions(src_copy_mode=src_dir)
    requests = [
        InitRequest(
            file_type=ft,
            dest_dir=dest_dir,
            init_behaviour=init_behaviour,
            dest_file_exists_behaviour=exists_behaviour,
            options=options,
        )
        for ft in chosen
    ]

    results = init_files_sync(
        requests,
        parallel=parallel,
        concurrency=concurrency,
        config=config,
        selector=selector,
    )

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        quiet = ctx.obj.get("quiet", False)
        for result in results:
            if quiet and result.ok:
                continue
            icon, color = _STATUS_STYLE[result.status]
            click.secho(f"   {icon} {result.status:<8}", fg=color, nl=False)
            click.echo(f" {result.requested.file_type}", nl=False)
            if result.final_path:
                click.echo(f"  → {result.final_path}")
            elif result.error:
                click.echo(f"  ({result.error_kind}: {result.error})")
            else:
                click.echo()

    if any(not r.ok for r in results):
        sys.exit(1)


@cli.command("types")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def types(as_json: bool) -> None:
    """List registered file types and their file names."""
    from reinit.core.data.file_types import FILE_TYPES

    if as_json:
        click.echo(json.dumps(
            {ft.type: list(ft.variations) for ft in FILE_TYPES}, indent=2
        ))
        return

    click.secho("📄 File types:", fg="cyan", bold=True)
    for ft in FILE_TYPES:
        click.echo(f"   • {ft.type:<20} {', '.join(ft.variations)}")


def main() -> None:
    """Console entry point with a last-resort error handler."""
    try:
        cli()
    except Exception as e:  # noqa: BLE001
        click.secho(f"❌ An unhandled error occurred: {e}", fg="red", err=True)
        click.echo(f"   Please report it at {ISSUES_URL}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
