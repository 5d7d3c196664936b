"""Shell command - interactive session that keeps the bookmarks between commands."""

import logging
import os
import shlex

import rich_click as click
from rich.markup import escape
from rich.prompt import Prompt

from .main import console

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")


def _prompt() -> str:
    return f"[cyan]locstack[/cyan] [dim]{escape(os.getcwd())}[/dim]"


@click.command()
@click.pass_context
def shell(ctx: click.Context):
    """Start an interactive session.

    Every line is run as a locstack command against the same set of
    bookmarks, and goto changes the session's working directory.

    Special commands:

        exit, quit  - Leave the session (Ctrl-D works too)
    """
    container = ctx.obj
    root = ctx.find_root().command
    console.print("[dim]Type a command (e.g. 'add proj', 'list', 'goto'), '--help', or 'exit'.[/dim]")

    while True:
        try:
            line = Prompt.ask(_prompt(), console=console, default="", show_default=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        try:
            args = shlex.split(line)
        except ValueError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            continue

        if not args:
            continue
        if args[0] in EXIT_COMMANDS:
            break
        if args[0] == "shell":
            console.print("[yellow]Already in a session.[/yellow]")
            continue

        try:
            code = root.main(args, prog_name="locstack", standalone_mode=False, obj=container)
        except click.ClickException as e:
            e.show()
            continue
        except click.Abort:
            console.print("[dim]Aborted[/dim]")
            continue
        if code:
            logger.debug(f"Command {args[0]} exited with status {code}")
