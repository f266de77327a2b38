"""Interactive terminal runner for scriptchat scripts."""

import importlib
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from scriptchat.core.errors import ConfigError, ScriptChatError
from scriptchat.core.types import Step
from scriptchat.engine import EngineConfig, FlowEngine
from scriptchat.validation import validate_input


RESET_COMMAND = "/reset"


@dataclass
class ChatConfig:
    """Configuration for chat runner."""

    script_path: Path
    module: str | None = None
    validate_input: bool = True
    verbose: bool = False
    debug: bool = False


class ChatRunner:
    """Interactive chat session runner.

    Wires the engine callbacks to a rich console and feeds it the
    answers typed by the user.
    """

    def __init__(self, config: ChatConfig, console: Console | None = None):
        """Initialize chat runner.

        Args:
            config: Chat configuration
            console: Console to render to (a new one by default)
        """
        self.config = config
        self.console = console or Console()
        self.engine: FlowEngine | None = None
        self.waiting_step: Step | None = None
        self.finished = False
        self._running = False

    async def setup(self) -> None:
        """Load the script and build the engine.

        Raises:
            ConfigError: If the script is invalid
        """
        # 1. Load validators module
        if self.config.module:
            cwd = os.getcwd()
            if cwd not in sys.path:
                sys.path.insert(0, cwd)

            try:
                importlib.import_module(self.config.module)
                if self.config.verbose:
                    self.console.print(f"[dim]Loaded module: {self.config.module}[/]")
            except Exception as e:
                self.console.print(f"[red]Failed to load module {self.config.module}: {e}[/]")
                raise

        # 2. Build engine
        engine_config = EngineConfig(
            before_proceed=validate_input if self.config.validate_input else None,
            on_new_user_message=self._on_user_message,
            on_new_step_message=self._on_step_message,
            on_continue=self._on_continue,
            on_end=self._on_end,
        )
        try:
            self.engine = FlowEngine.from_yaml(self.config.script_path, engine_config)
        except ScriptChatError as e:
            self.console.print(f"[red]Invalid script: {e}[/]")
            raise

    def _on_user_message(self, values: list[str | None]) -> None:
        if self.config.verbose:
            answered = ", ".join(value for value in values if value is not None)
            self.console.print(f"[dim]Recorded: {answered}[/]")

    def _on_step_message(self, message: str) -> None:
        if message:
            self.console.print(f"[bold blue]Bot > [/]{message}\n")

    def _on_continue(self, step: Step) -> None:
        self.waiting_step = step

    def _on_end(self) -> None:
        self.waiting_step = None
        self.finished = True

    def parse_values(self, user_input: str) -> list[str]:
        """Split raw input into step values.

        Choice-only steps (no input type) take comma-separated values.
        """
        text = user_input.strip()
        if not text:
            return []
        step = self.waiting_step
        if step is not None and step.input is None:
            return [part.strip() for part in text.split(",") if part.strip()]
        return [text]

    def _prompt_label(self) -> str:
        step = self.waiting_step
        if step is not None and step.input is not None:
            return f"[bold green]You[/] [dim]({step.input.value})[/]"
        return "[bold green]You[/]"

    async def start(self) -> None:
        """Start the interactive session."""
        if self.engine is None:
            await self.setup()
        if self.engine is None:
            raise ConfigError(f"Script {self.config.script_path} could not be loaded")

        self.console.print(f"Script: [green]{self.config.script_path}[/]")
        self.console.print(f"Type 'exit' or 'quit' to end session, '{RESET_COMMAND}' to restart.\n")

        self.finished = False
        await self.engine.start()

        self._running = True
        while self._running and not self.finished:
            try:
                user_input = Prompt.ask(self._prompt_label(), console=self.console)

                if self._is_exit_command(user_input):
                    self.console.print("\n[yellow]Goodbye![/]")
                    break

                if user_input.strip().lower() == RESET_COMMAND:
                    self.engine.reset()
                    await self.engine.start()
                    continue

                accepted = await self.engine.proceed(self.parse_values(user_input))
                if not accepted:
                    self.console.print("[yellow]That answer was not accepted, try again.[/]")

            except KeyboardInterrupt:
                self.console.print("\n[yellow]Goodbye![/]")
                break
            except ScriptChatError as e:
                self.console.print(f"[red]Script error: {e}[/]")
                raise
            except Exception as e:
                if self.config.debug:
                    self.console.print_exception()
                else:
                    self.console.print(f"[red]Error: {e}[/]")

    def _is_exit_command(self, user_input: str) -> bool:
        """Check if input is an exit command."""
        return user_input.strip().lower() in ("quit", "exit", "q", "/quit", "/exit")

    async def cleanup(self) -> None:
        """Release the engine."""
        self._running = False
        self.engine = None

    async def __aenter__(self) -> "ChatRunner":
        """Async context manager entry."""
        await self.setup()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.cleanup()


async def run_chat_session(config: ChatConfig) -> None:
    """Run an interactive chat session.

    Args:
        config: Chat configuration
    """
    async with ChatRunner(config) as runner:
        await runner.start()
