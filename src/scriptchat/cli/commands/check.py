"""Check command for validating scripts."""

from pathlib import Path

import typer
from rich.console import Console

from scriptchat.config.loader import ScriptLoader
from scriptchat.core.errors import ScriptChatError, ScriptError
from scriptchat.core.types import START_STEP_ID

app = typer.Typer(help="Validate a script and show its step chain")


@app.callback(invoke_without_command=True)
def check_script(
    script: Path = typer.Option(..., "--script", "-s", help="Path to the YAML script"),
) -> None:
    """Validate a script file."""
    console = Console()

    try:
        config = ScriptLoader.load(script)
        steps = ScriptLoader.build_steps(config)
    except ScriptError as e:
        console.print(f"[red]Invalid script:[/] {script}")
        for problem in e.problems:
            console.print(f"  - {problem}")
        raise typer.Exit(1)
    except ScriptChatError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)

    by_id = {step.id: step for step in steps}
    step = by_id.get(START_STEP_ID, steps[0])
    chain = [step.id]
    # validate_script guarantees every next resolves; stop on the first revisit
    while not step.is_end and step.next is not None and step.next not in chain:
        step = by_id[step.next]
        chain.append(step.id)

    console.print(f"[green]OK[/] {script} ({len(steps)} steps)")
    console.print(" -> ".join(chain))
