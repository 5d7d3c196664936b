"""CLI commands for bookmarking and navigating locations."""

import rich_click as click
from rich.markup import escape

from .main import console, get_service, handle_errors, print_entries, report


@click.command()
@click.argument("identifier")
@click.option("--path", "-p", help="Directory to bookmark (default: current directory)")
@click.option("--force", "-f", is_flag=True, help="Overwrite the identifier or re-key the path")
@click.pass_context
@handle_errors
def add(ctx: click.Context, identifier: str, path: str = None, force: bool = False):
    """Bookmark a directory under IDENTIFIER.

    Identifiers may contain letters, digits and underscores.

    Examples:
        locstack add proj
        locstack add docs --path ~/Documents
        locstack add docs --path ~/Documents/new --force
    """
    report(get_service(ctx).add(identifier, path=path, force=force))


@click.command()
@click.argument("identifier")
@click.option("--force", "-f", is_flag=True, help="Actually remove (otherwise only show the entry)")
@click.pass_context
@handle_errors
def remove(ctx: click.Context, identifier: str, force: bool = False):
    """Remove the bookmark IDENTIFIER."""
    report(get_service(ctx).remove(identifier, force=force))


@click.command(name="list")
@click.option("--ids", "-i", "id_patterns", multiple=True, help="Identifier pattern, '*' as wildcard (repeatable)")
@click.option("--paths", "-p", "path_patterns", multiple=True, help="Path pattern, '*' as wildcard (repeatable)")
@click.pass_context
@handle_errors
def list_locations(ctx: click.Context, id_patterns: tuple = (), path_patterns: tuple = ()):
    """List bookmarks, optionally filtered by identifier and path patterns."""
    result = get_service(ctx).show(list(id_patterns), list(path_patterns))
    report(result)
    if result.ok:
        print_entries(result.entries)


@click.command()
@click.option("--id", "-i", "identifier", help="Bookmark to go to")
@click.option("--path", "-p", help="Directory to go to")
@click.pass_context
@handle_errors
def goto(ctx: click.Context, identifier: str = None, path: str = None):
    """Change to a bookmark or path, or back to the last location.

    The directory you leave is remembered as 'last', so running goto
    without arguments toggles between two directories.
    """
    result = get_service(ctx).goto(identifier=identifier, path=path)
    if result.ok:
        console.print(f"[green]→[/green] {escape(result.target)}")
    else:
        report(result)


@click.command(name="open")
@click.option("--ids", "-i", "id_patterns", multiple=True, help="Identifier pattern, '*' as wildcard (repeatable)")
@click.option("--paths", "-p", "path_patterns", multiple=True, help="Path pattern, '*' as wildcard (repeatable)")
@click.pass_context
@handle_errors
def open_locations(ctx: click.Context, id_patterns: tuple = (), path_patterns: tuple = ()):
    """Open bookmarks in the file browser (all of them without filters)."""
    result = get_service(ctx).open(list(id_patterns), list(path_patterns))
    report(result)
    for path in result.paths:
        console.print(f"  • {escape(path)}")


@click.command()
@click.option("--force", "-f", is_flag=True, help="Also drop 'last' and reset the store")
@click.pass_context
@handle_errors
def clear(ctx: click.Context, force: bool = False):
    """Remove all bookmarks except 'last'."""
    report(get_service(ctx).clear(force=force))
