"""Main CLI entry point for scriptchat"""

import typer

from scriptchat.__version__ import __version__
from scriptchat.cli.commands import chat as chat_module
from scriptchat.cli.commands import check as check_module

app = typer.Typer(
    name="scriptchat",
    help="scriptchat - scripted, linear conversational flows",
    add_completion=False,
)

# Register subcommands
app.add_typer(chat_module.app, name="chat", help="Walk a script interactively")
app.add_typer(check_module.app, name="check", help="Validate a script")


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"scriptchat version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """scriptchat - scripted, linear conversational flows"""
    pass


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
