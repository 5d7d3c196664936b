"""CLI commands for saving and restoring snapshots of the bookmarks."""

import rich_click as click
from rich.markup import escape

from .main import console, get_service, handle_errors, print_entries, report


@click.command(name="export")
@click.option("--name", "-n", default="", help="Snapshot name (default: 'default')")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing snapshot")
@click.pass_context
@handle_errors
def export_snapshot(ctx: click.Context, name: str = "", force: bool = False):
    """Save the current bookmarks as a named snapshot."""
    report(get_service(ctx).export(name, force=force))


@click.command(name="import")
@click.option("--name", "-n", default="", help="Snapshot name (default: 'default')")
@click.option("--force", "-f", is_flag=True, help="Confirm replacing the current bookmarks")
@click.option("--merge", is_flag=True, help="Add the snapshot to the current bookmarks instead of replacing them")
@click.pass_context
@handle_errors
def import_snapshot(ctx: click.Context, name: str = "", force: bool = False, merge: bool = False):
    """Load bookmarks from a named snapshot."""
    result = get_service(ctx).import_snapshot(name, force=force, merge=merge)
    report(result)
    if result.ok:
        print_entries(result.entries, title=f"Snapshot {result.names[0]}")


@click.command(name="snapshots")
@click.option("--name-filter", "-n", "name_patterns", multiple=True, help="Snapshot name pattern, '*' as wildcard (repeatable)")
@click.pass_context
@handle_errors
def list_snapshots(ctx: click.Context, name_patterns: tuple = ()):
    """List saved snapshots."""
    result = get_service(ctx).list_snapshots(list(name_patterns))
    report(result)
    if not result.names:
        console.print("No snapshots found.")
        return
    for name in result.names:
        console.print(f"  • {escape(name)}")


@click.command(name="delete-snapshot")
@click.option("--name", "-n", required=True, help="Snapshot name")
@click.option("--force", "-f", is_flag=True, help="Confirm the deletion")
@click.pass_context
@handle_errors
def delete_snapshot(ctx: click.Context, name: str, force: bool = False):
    """Delete a saved snapshot."""
    report(get_service(ctx).delete_snapshot(name, force=force))
