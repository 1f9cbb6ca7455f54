"""Built-in commands and their dispatch."""

import os
from typing import List

import click

from . import __version__
from .container import Container
from .errors import CommandParseError, CommandRunError
from .notebook import Notebook

INDEX_COMMAND = "index"


def refresh_index(container: Container):
    """Reindex the current notebook, if there is one."""
    if container.has_notebook:
        container.current_notebook().index(verbose=False)


class NotebookCommand(click.Command):
    """Command refreshing the notebook index once its arguments are parsed."""

    def invoke(self, ctx: click.Context):
        # The index command reports its own statistics.
        if self.name != INDEX_COMMAND:
            refresh_index(ctx.obj)
        return super().invoke(ctx)


class NotebookGroup(click.Group):
    command_class = NotebookCommand


@click.group(cls=NotebookGroup, invoke_without_command=True,
             context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="zk")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """A plain text note-taking assistant.

    \b
    Directory flags, accepted anywhere on the command line:
      --notebook-dir PATH    Turn off notebook auto-discovery and use PATH.
      -W, --working-dir PATH Run as if zk was started in PATH.
    """
    if ctx.invoked_subcommand is None:
        refresh_index(ctx.obj)
        click.echo(ctx.get_help())


@cli.command()
@click.argument("directory", required=False, type=click.Path())
@click.pass_obj
def init(container: Container, directory: str) -> None:
    """Create a new notebook in the given directory."""
    base = container.working_dir or os.getcwd()
    path = Notebook.init(os.path.join(base, directory) if directory else base)
    click.echo(f"Initialized a notebook in {path}")


@cli.command()
@click.option("--force", "-f", is_flag=True, help="Re-index every note, even unchanged ones.")
@click.option("--quiet", "-q", is_flag=True, help="Do not print statistics.")
@click.pass_obj
def index(container: Container, force: bool, quiet: bool) -> None:
    """Index the notes to keep the notebook up to date."""
    stats = container.current_notebook().index(force=force, verbose=not quiet)
    if not quiet:
        click.echo(str(stats))


@cli.command("list")
@click.option("--limit", "-n", type=click.IntRange(min=0), default=0,
              help="Limit the number of notes listed.")
@click.pass_obj
def list_notes(container: Container, limit: int) -> None:
    """List the notes of the notebook."""
    notebook = container.current_notebook()
    paths = notebook.note_paths()
    if limit:
        paths = paths[:limit]
    base = container.working_dir or notebook.path
    for path in paths:
        click.echo(os.path.relpath(path, base))


def run_command(container: Container, args: List[str]) -> int:
    """
    Parse args and run the matching built-in command.

    Args:
        container: Container handed to the commands
        args: Command line arguments after the directory flags were removed

    Returns:
        Exit code of the command

    Raises:
        CommandParseError: If the arguments do not parse
        CommandRunError: If the command fails
    """
    try:
        result = cli.main(args=list(args), prog_name="zk", obj=container, standalone_mode=False)
    except click.UsageError as e:
        if e.ctx is not None:
            click.echo(e.ctx.get_usage(), err=True)
        raise CommandParseError(e.format_message()) from e
    except click.ClickException as e:
        raise CommandRunError(e.format_message()) from e
    except click.Abort as e:
        raise CommandRunError("aborted") from e
    except OSError as e:
        raise CommandRunError(str(e)) from e

    return result if isinstance(result, int) else 0
