"""Chat command for interactive sessions."""

import asyncio
from pathlib import Path

import typer

from scriptchat.observability.logging import setup_logging

app = typer.Typer(help="Walk a script interactively in the terminal")


@app.callback(invoke_without_command=True)
def run_chat(
    script: Path = typer.Option(
        "script.yaml", "--script", "-s", help="Path to the YAML script"
    ),
    module: str | None = typer.Option(
        None, "--module", "-m", help="Python module registering validators (e.g. 'app.validators')"
    ),
    validate: bool = typer.Option(
        True, "--validate/--no-validate", help="Validate answers against step input types"
    ),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose mode"),
    ctx: typer.Context = typer.Option(None, hidden=True),
) -> None:
    """Start interactive chat session."""
    if ctx and ctx.invoked_subcommand:
        return

    from scriptchat.cli.chat_runner import ChatConfig, run_chat_session

    setup_logging("DEBUG" if debug else "WARNING")

    chat_config = ChatConfig(
        script_path=script,
        module=module,
        validate_input=validate,
        debug=debug,
        verbose=verbose,
    )

    try:
        asyncio.run(run_chat_session(chat_config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        typer.echo(f"Fatal error: {e}", err=True)
        raise typer.Exit(1)
