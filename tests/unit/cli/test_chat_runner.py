"""Tests for ChatRunner class."""

import io
from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console

from scriptchat.cli.chat_runner import ChatConfig, ChatRunner
from scriptchat.core.errors import ConfigError
from scriptchat.core.types import InputType, Step

SCRIPT = """
variables:
  company: Acme
steps:
  - id: start
    next: ask_email
    message: "Welcome to {{company}}! Name?"
    input: text
  - id: ask_email
    next: ask_topics
    message: "Hi {{start}}, email?"
    input: email
  - id: ask_topics
    next: end
    message: "Topics?"
  - id: end
    message: "Bye {{start}}, first topic {{ask_topics.0}}"
"""


class TestChatRunner:
    """Tests for ChatRunner."""

    @pytest.fixture
    def config(self, write_script):
        """Create test config."""
        return ChatConfig(script_path=write_script(SCRIPT))

    @pytest.fixture
    def output(self):
        return io.StringIO()

    @pytest.fixture
    def runner(self, config, output):
        return ChatRunner(config, console=Console(file=output, width=200))

    def test_init_stores_config(self, runner, config):
        """Test that config is stored correctly."""
        assert runner.config == config
        assert runner.engine is None
        assert runner.finished is False

    @pytest.mark.asyncio
    async def test_setup_builds_engine(self, runner):
        await runner.setup()

        assert runner.engine is not None
        assert runner.engine.current_step.id == "start"
        assert runner.engine.custom_variables == {"company": "Acme"}

    @pytest.mark.asyncio
    async def test_setup_with_invalid_script_raises(self, tmp_path, output):
        runner = ChatRunner(
            ChatConfig(script_path=tmp_path / "missing.yaml"),
            console=Console(file=output, width=200),
        )

        with pytest.raises(ConfigError):
            await runner.setup()

        assert "Invalid script" in output.getvalue()

    @pytest.mark.asyncio
    async def test_session_walks_script_to_end(self, runner, output):
        """
        GIVEN a script and scripted user input
        WHEN the session runs
        THEN every answer is recorded and the session stops at the end step
        """
        answers = ["Ann", "ann@example.com", "news, events"]
        with patch("scriptchat.cli.chat_runner.Prompt.ask", side_effect=answers):
            await runner.start()

        assert runner.finished is True
        assert [result.values for result in runner.engine.results] == [
            ("Ann",),
            ("ann@example.com",),
            ("news", "events"),
        ]
        text = output.getvalue()
        assert "Welcome to Acme! Name?" in text
        assert "Hi Ann, email?" in text
        assert "Bye Ann, first topic news" in text

    @pytest.mark.asyncio
    async def test_invalid_email_is_rejected(self, runner, output):
        answers = ["Ann", "not-an-email", "quit"]
        with patch("scriptchat.cli.chat_runner.Prompt.ask", side_effect=answers):
            await runner.start()

        assert runner.engine.current_step.id == "ask_email"
        assert "not accepted" in output.getvalue()

    @pytest.mark.asyncio
    async def test_validation_can_be_disabled(self, write_script, output):
        runner = ChatRunner(
            ChatConfig(script_path=write_script(SCRIPT), validate_input=False),
            console=Console(file=output, width=200),
        )

        with patch("scriptchat.cli.chat_runner.Prompt.ask", side_effect=["Ann", "nope", "q"]):
            await runner.start()

        assert runner.engine.current_step.id == "ask_topics"

    @pytest.mark.asyncio
    async def test_blank_answer_is_not_accepted(self, runner):
        with patch("scriptchat.cli.chat_runner.Prompt.ask", side_effect=["   ", "exit"]):
            await runner.start()

        assert runner.engine.current_step.id == "start"
        assert runner.engine.results == ()

    @pytest.mark.asyncio
    async def test_reset_command_restarts_flow(self, runner, output):
        with patch("scriptchat.cli.chat_runner.Prompt.ask", side_effect=["Ann", "/reset", "quit"]):
            await runner.start()

        assert runner.engine.current_step.id == "start"
        assert runner.engine.results == ()
        assert output.getvalue().count("Welcome to Acme! Name?") == 2

    def test_is_exit_command_recognizes_quit(self, runner):
        """Test exit command recognition."""
        assert runner._is_exit_command("quit")
        assert runner._is_exit_command("exit")
        assert runner._is_exit_command("q")
        assert runner._is_exit_command("/quit")
        assert not runner._is_exit_command("hello")

    def test_parse_values_for_input_step(self, runner):
        runner.waiting_step = Step(id="start", next="end", input=InputType.TEXT)

        assert runner.parse_values("  red, blue ") == ["red, blue"]
        assert runner.parse_values("   ") == []

    def test_parse_values_for_choice_step(self, runner):
        runner.waiting_step = Step(id="pick", next="end")

        assert runner.parse_values("red, blue,, ") == ["red", "blue"]

    @pytest.mark.asyncio
    async def test_cleanup_releases_engine(self, runner):
        await runner.setup()

        await runner.cleanup()

        assert runner.engine is None

    @pytest.mark.asyncio
    async def test_context_manager_calls_setup_and_cleanup(self, runner):
        """Test async context manager protocol."""
        with patch.object(ChatRunner, "setup", new_callable=AsyncMock) as mock_setup:
            with patch.object(ChatRunner, "cleanup", new_callable=AsyncMock) as mock_cleanup:
                async with runner:
                    pass
                mock_setup.assert_called_once()
                mock_cleanup.assert_called_once()

    @pytest.mark.asyncio
    async def test_start_raises_when_setup_leaves_no_engine(self, runner):
        """
        GIVEN a setup that does not build an engine
        WHEN starting the session
        THEN a ConfigError is raised instead of entering the prompt loop
        """
        with patch.object(ChatRunner, "setup", new_callable=AsyncMock) as mock_setup:
            with pytest.raises(ConfigError, match="could not be loaded"):
                await runner.start()

        mock_setup.assert_awaited_once()
        assert runner.engine is None
