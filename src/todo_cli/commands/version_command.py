"""Command 'version' of todo-cli"""

import typer

from todo_cli import __version__
from todo_cli.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(f"todo-cli {__version__}")
