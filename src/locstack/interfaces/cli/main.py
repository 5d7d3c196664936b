"""Main CLI orchestrator for locstack."""

import functools

import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ... import __version__
from ...application.container import ServiceContainer
from ...application.dtos import OperationResult
from ...application.exceptions import ApplicationError
from ...core.config import LocstackConfig
from ...core.logging_config import setup_logging
from ...domain.entities.location_store import LAST

# Initialize console for rich output
console = Console()


# Create the main command group
@click.group(name="locstack")
@click.version_option(version=__version__, prog_name="locstack")
@click.option(
    "--snapshot-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Snapshot directory (default: $LOCSTACK_SNAPSHOT_DIR or ~/.local/locstack)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log what is being done")
@click.pass_context
def cli(ctx: click.Context, snapshot_dir: str, verbose: bool):
    """locstack - named bookmarks for directories.

    Bookmark directories under short identifiers, jump between them, and
    save or restore whole sets of bookmarks as named snapshots.

    Bookmarks live for the lifetime of the process; use `locstack shell`
    for an interactive session that keeps them between commands.
    """
    if isinstance(ctx.obj, ServiceContainer):
        # Running inside a session shell that owns the container
        ignored = [name for name, given in (("--snapshot-dir", snapshot_dir), ("--verbose", verbose)) if given]
        if ignored:
            console.print(
                f"[yellow]Ignoring {', '.join(ignored)}: global options have no effect "
                f"inside a session[/yellow]"
            )
        return

    config = LocstackConfig.from_env().with_overrides(
        snapshot_dir=snapshot_dir,
        log_level="INFO" if verbose else None,
    )
    setup_logging(config.log_level)
    ctx.obj = ServiceContainer(config)


def get_service(ctx: click.Context):
    """Get the location service of the container bound to this invocation."""
    return ctx.find_object(ServiceContainer).location_service


def handle_errors(func):
    """Report fatal application errors and exit with status 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ApplicationError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            click.get_current_context().exit(1)
    return wrapper


def report(result: OperationResult) -> None:
    """Print warnings and the outcome message of an operation."""
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")
    if not result.message:
        return
    if result.ok:
        console.print(f"[green]✓[/green] {escape(result.message)}")
    else:
        console.print(f"[yellow]{escape(result.message)}[/yellow]")


def print_entries(entries: dict, title: str = "Locations") -> None:
    """Print an identifier to path mapping as a table, ``last`` first."""
    if not entries:
        console.print("No matching locations.")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Identifier", style="cyan")
    table.add_column("Path", style="yellow")

    for identifier in sorted(entries, key=lambda k: (k != LAST, k)):
        style = "dim" if identifier == LAST else None
        table.add_row(escape(identifier), escape(entries[identifier]), style=style)

    console.print(Panel.fit(table))


def create_main_cli():
    """Create and configure the main CLI with all subcommands."""
    # Import subcommands here to avoid circular imports
    from .location import add, clear, goto, list_locations, open_locations, remove
    from .session import shell
    from .snapshot import delete_snapshot, export_snapshot, import_snapshot, list_snapshots

    # Register all subcommands
    for command in (
        add, remove, list_locations, goto, open_locations, clear,
        export_snapshot, import_snapshot, list_snapshots, delete_snapshot,
        shell,
    ):
        cli.add_command(command)

    return cli


def main():
    """Entry point for the application script."""
    create_main_cli()()


if __name__ == "__main__":
    main()
