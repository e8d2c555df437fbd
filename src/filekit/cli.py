"""CLI commands using Typer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, NoReturn

if TYPE_CHECKING:
    from filekit.context import AppContext

import typer
from rich.console import Console

from filekit import __version__, paths
from filekit.config import Settings, configure_logging
from filekit.context import create_context
from filekit.display import Display
from filekit.errors import FileKitError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="filekit",
    help="Thin command line over local filesystem operations",
    no_args_is_help=True,
)

console = Console()
display = Display(console)


@dataclass
class _GlobalOptions:
    """Options given before the command name."""

    cwd: Path | None = None
    settings: Settings | None = None


_options = _GlobalOptions()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"filekit v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    cwd: Annotated[
        Path | None, typer.Option("--cwd", "-C", help="Working directory for relative paths")
    ] = None,
    config: Annotated[
        Path | None, typer.Option("--config", help="JSON settings file")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every operation")] = False,
) -> None:
    """Thin command line over local filesystem operations."""
    try:
        settings = Settings.from_file(config) if config else Settings.from_env()
    except (FileNotFoundError, ValueError) as e:
        display.show_error(f"Invalid settings: {e}")
        raise typer.Exit(1) from e
    _options.cwd = cwd
    _options.settings = settings
    configure_logging(logging.DEBUG if verbose else settings.log_level)


def _fail(error: Exception) -> NoReturn:
    """Report an operation failure and exit with status 1."""
    logger.debug("Command failed", exc_info=error)
    display.show_error(str(error))
    raise typer.Exit(1) from error


def _get_context(_context: AppContext | None) -> AppContext:
    """Return the injected context or build one from the global options."""
    if _context is not None:
        return _context
    try:
        return create_context(settings=_options.settings, cwd=_options.cwd)
    except (FileKitError, OSError) as e:
        _fail(e)


# ============================================================================
# Inspection Commands
# ============================================================================


@app.command("ls")
def list_directory(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    _context=None,
) -> None:
    """List the entries of a directory."""
    ctx = _get_context(_context)
    fs = ctx.filesystem

    try:
        directory = fs.absolute(path)
        entries = [fs.stat(paths.join(directory, name)) for name in fs.list(directory)]
    except (FileKitError, OSError, ValueError) as e:
        _fail(e)

    display.show_listing(directory, entries)


@app.command("cat")
def cat(
    path: Annotated[str, typer.Argument(help="File to print")],
    binary: Annotated[bool, typer.Option("--binary", "-b", help="Print raw bytes")] = False,
    _context=None,
) -> None:
    """Print the contents of a file."""
    ctx = _get_context(_context)

    try:
        content = ctx.filesystem.read(path, "b" if binary else "r")
    except (FileKitError, OSError, ValueError) as e:
        _fail(e)

    typer.echo(content, nl=False)


@app.command("stat")
def stat(
    path: Annotated[str, typer.Argument(help="File or directory")],
    _context=None,
) -> None:
    """Show type, size and modification time of an entry."""
    ctx = _get_context(_context)

    try:
        info = ctx.filesystem.stat(path)
    except (FileKitError, OSError) as e:
        _fail(e)

    display.show_info(info)


@app.command("pwd")
def pwd(_context=None) -> None:
    """Print the working directory."""
    ctx = _get_context(_context)
    typer.echo(ctx.filesystem.working_directory())


@app.command("abspath")
def abspath(
    path: Annotated[str, typer.Argument(help="Path to resolve")],
    _context=None,
) -> None:
    """Resolve a path against the working directory."""
    ctx = _get_context(_context)
    typer.echo(ctx.filesystem.absolute(path))


# ============================================================================
# Mutating Commands
# ============================================================================


@app.command("write")
def write(
    path: Annotated[str, typer.Argument(help="File to write")],
    content: Annotated[str, typer.Argument(help="Text to write")],
    append: Annotated[bool, typer.Option("--append", "-a", help="Append instead of truncating")] = False,
    _context=None,
) -> None:
    """Write text to a file, creating it if needed."""
    ctx = _get_context(_context)

    try:
        ctx.filesystem.write(path, content, "a" if append else "w")
    except (FileKitError, OSError, ValueError) as e:
        _fail(e)

    display.show_success(f"Wrote {path}")


@app.command("touch")
def touch(
    path: Annotated[str, typer.Argument(help="File to touch")],
    _context=None,
) -> None:
    """Create an empty file or update its modification time."""
    ctx = _get_context(_context)

    try:
        ctx.filesystem.touch(path)
    except (FileKitError, OSError) as e:
        _fail(e)


@app.command("mkdir")
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parents, ignore existing")
    ] = False,
    _context=None,
) -> None:
    """Create a directory."""
    ctx = _get_context(_context)

    try:
        if parents:
            ctx.filesystem.make_tree(path)
        else:
            ctx.filesystem.make_directory(path)
    except (FileKitError, OSError) as e:
        _fail(e)

    display.show_success(f"Created {path}")


@app.command("rmdir")
def rmdir(
    path: Annotated[str, typer.Argument(help="Empty directory to remove")],
    _context=None,
) -> None:
    """Remove an empty directory."""
    ctx = _get_context(_context)

    try:
        ctx.filesystem.rmdir(path)
    except (FileKitError, OSError) as e:
        _fail(e)

    display.show_success(f"Removed {path}")


@app.command("rm")
def remove(
    path: Annotated[str, typer.Argument(help="File to remove")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Remove directories and their contents")
    ] = False,
    _context=None,
) -> None:
    """Remove a file, or a whole tree with --recursive."""
    ctx = _get_context(_context)
    fs = ctx.filesystem

    try:
        if recursive and fs.is_dir(path):
            fs.remove_tree(path)
        else:
            fs.remove(path)
    except (FileKitError, OSError) as e:
        _fail(e)

    display.show_success(f"Removed {path}")


@app.command("cp")
def copy(
    src: Annotated[str, typer.Argument(help="Source path")],
    dst: Annotated[str, typer.Argument(help="Destination path")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Copy a directory tree")
    ] = False,
    _context=None,
) -> None:
    """Copy a file, or a directory tree with --recursive."""
    ctx = _get_context(_context)

    try:
        if recursive:
            ctx.filesystem.copy_tree(src, dst)
        else:
            ctx.filesystem.copy(src, dst)
    except (FileKitError, OSError, ValueError) as e:
        _fail(e)

    display.show_success(f"Copied {src} to {dst}")


@app.command("mv")
def move(
    src: Annotated[str, typer.Argument(help="Source path")],
    dst: Annotated[str, typer.Argument(help="Destination path")],
    _context=None,
) -> None:
    """Move a file or directory."""
    ctx = _get_context(_context)

    try:
        ctx.filesystem.move(src, dst)
    except (FileKitError, OSError) as e:
        _fail(e)

    display.show_success(f"Moved {src} to {dst}")


@app.command("rename")
def rename(
    path: Annotated[str, typer.Argument(help="Entry to rename")],
    new_name: Annotated[str, typer.Argument(help="New name within the same directory")],
    _context=None,
) -> None:
    """Rename an entry without moving it to another directory."""
    ctx = _get_context(_context)

    try:
        ctx.filesystem.rename(path, new_name)
    except (FileKitError, OSError, ValueError) as e:
        _fail(e)

    display.show_success(f"Renamed {path} to {new_name}")


if __name__ == "__main__":
    app()
