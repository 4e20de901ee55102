"""bff CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from bff import __version__
from bff.config.loader import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class EditorGroup(click.Group):
    """Click group whose usage errors exit with status 1 instead of 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def _validate_buffer_name(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not value or not value.strip():
        raise click.BadParameter("buffer name must not be empty")
    return value


def _fail(ctx: click.Context, message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


@click.group(cls=EditorGroup, invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--buffer", "-b", "buffer_name", required=True,
    callback=_validate_buffer_name, help="Buffer name",
)
@click.option(
    "--config", "-c", type=click.Path(), default=None, envvar="BFF_CONFIG",
    help="Config file path",
)
@click.option(
    "--snapshot-dir", type=click.Path(file_okay=False), default=None,
    envvar="BFF_SNAPSHOT_DIR", help="Directory holding buffer snapshots",
)
@click.option("--log-level", default=None, help="Log level")
@click.option("--json-logs", is_flag=True, help="JSON log output")
@click.pass_context
def main(
    ctx: click.Context,
    buffer_name: str,
    config: str | None,
    snapshot_dir: str | None,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """bff - edit named line buffers that persist between runs.

    With no command, prints the buffer.
    """
    from bff.config.loader import load_config
    from bff.editor import LineEditor
    from bff.logging_config import setup_logging
    from bff.store import BufferStore, FileSnapshotStore

    try:
        cfg = load_config(Path(config) if config else DEFAULT_CONFIG)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    setup_logging(
        level=log_level or cfg.logging.level,
        json_output=json_logs or cfg.logging.json_output,
    )

    directory = snapshot_dir or cfg.snapshots.directory
    store = BufferStore(FileSnapshotStore(directory, atomic=cfg.snapshots.atomic))
    ctx.call_on_close(store.close)

    ctx.ensure_object(dict)
    ctx.obj["buffer"] = buffer_name
    ctx.obj["store"] = store
    ctx.obj["editor"] = LineEditor(
        store,
        number_width=cfg.display.number_width,
        pad_char=cfg.display.pad_char,
    )
    logger.debug("Snapshot directory: %s", directory)

    if ctx.invoked_subcommand is None:
        ctx.obj["editor"].print_all(buffer_name)


@main.command("open")
@click.argument("path")
@click.pass_context
def open_cmd(ctx: click.Context, path: str) -> None:
    """Load a file into the buffer."""
    name = ctx.obj["buffer"]
    if not ctx.obj["store"].open_file(name, path):
        _fail(ctx, f"Could not open file {path}")
    click.echo(f"File opened in buffer '{name}'")


@main.command("print")
@click.pass_context
def print_cmd(ctx: click.Context) -> None:
    """Print every line of the buffer."""
    ctx.obj["editor"].print_all(ctx.obj["buffer"])


@main.command()
@click.argument("text")
@click.pass_context
def append(ctx: click.Context, text: str) -> None:
    """Append a line to the end of the buffer."""
    name = ctx.obj["buffer"]
    if not ctx.obj["editor"].append(name, text):
        _fail(ctx, f"Could not append to buffer {name}")
    click.echo(f"Content appended to buffer '{name}'")


@main.command()
@click.argument("path", required=False)
@click.pass_context
def save(ctx: click.Context, path: str | None) -> None:
    """Write the buffer to PATH, or back to the file it came from."""
    name = ctx.obj["buffer"]
    if not ctx.obj["store"].save_file(name, path):
        _fail(ctx, f"Could not save buffer {name}")
    click.echo(f"Buffer '{name}' saved")


@main.command()
@click.argument("path", required=False)
@click.pass_context
def new(ctx: click.Context, path: str | None) -> None:
    """Reset the buffer to empty, optionally bound to PATH."""
    name = ctx.obj["buffer"]
    if not ctx.obj["store"].create_new(name, path):
        _fail(ctx, "Could not create new buffer")
    click.echo(f"New buffer '{name}' created")


@main.group(cls=EditorGroup)
@click.argument("number", type=int)
@click.pass_context
def line(ctx: click.Context, number: int) -> None:
    """Operate on line NUMBER (1-based)."""
    ctx.obj["line"] = number


@line.command()
@click.argument("text")
@click.pass_context
def replace(ctx: click.Context, text: str) -> None:
    """Replace the line with TEXT."""
    name, number = ctx.obj["buffer"], ctx.obj["line"]
    if not ctx.obj["editor"].replace(name, number, text):
        _fail(ctx, f"Could not replace line {number}")
    click.echo(f"Line {number} replaced in buffer '{name}'")


@line.command()
@click.argument("text")
@click.pass_context
def insert(ctx: click.Context, text: str) -> None:
    """Insert TEXT before the line (past the end appends)."""
    name, number = ctx.obj["buffer"], ctx.obj["line"]
    if not ctx.obj["editor"].insert(name, number, text):
        _fail(ctx, f"Could not insert line at {number}")
    click.echo(f"Line inserted at position {number} in buffer '{name}'")


@line.command()
@click.pass_context
def delete(ctx: click.Context) -> None:
    """Delete the line."""
    name, number = ctx.obj["buffer"], ctx.obj["line"]
    if not ctx.obj["editor"].delete(name, number):
        _fail(ctx, f"Could not delete line {number}")
    click.echo(f"Line {number} deleted from buffer '{name}'")


@line.command()
@click.argument("target", type=int)
@click.pass_context
def move(ctx: click.Context, target: int) -> None:
    """Move the line to position TARGET."""
    name, number = ctx.obj["buffer"], ctx.obj["line"]
    if not ctx.obj["editor"].move(name, number, target):
        _fail(ctx, "Could not move line")
    click.echo(f"Line {number} moved to position {target}")


@line.command()
@click.argument("target", type=int)
@click.pass_context
def copy(ctx: click.Context, target: int) -> None:
    """Copy the line to position TARGET."""
    name, number = ctx.obj["buffer"], ctx.obj["line"]
    if not ctx.obj["editor"].copy(name, number, target):
        _fail(ctx, "Could not copy line")
    click.echo(f"Line {number} copied to position {target}")


@line.command()
@click.pass_context
def get(ctx: click.Context) -> None:
    """Print the raw line content (empty if there is no such line)."""
    click.echo(ctx.obj["editor"].get(ctx.obj["buffer"], ctx.obj["line"]))


@line.command("print")
@click.pass_context
def print_line(ctx: click.Context) -> None:
    """Print the line with its number."""
    if not ctx.obj["editor"].print_one(ctx.obj["buffer"], ctx.obj["line"]):
        ctx.exit(1)


@line.command("range")
@click.argument("end", type=int)
@click.pass_context
def range_cmd(ctx: click.Context, end: int) -> None:
    """Print lines from this line through END."""
    ctx.obj["editor"].print_range(ctx.obj["buffer"], ctx.obj["line"], end)
