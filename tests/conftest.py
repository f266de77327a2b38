"""Shared fixtures for scriptchat tests.

Callbacks are MagicMock/AsyncMock objects so tests can assert exactly
which notifications a transition produced.
"""

from unittest.mock import MagicMock

import pytest

from scriptchat.core.types import InputType, Step
from scriptchat.engine import EngineConfig, FlowEngine


@pytest.fixture
def basic_script() -> list[Step]:
    """Three-step script: start -> q1 -> end."""
    return [
        Step(id="start", next="q1", message="Hi", input=InputType.TEXT),
        Step(id="q1", next="end", message="You said {{start}}", input=InputType.TEXT),
        Step(id="end", next="end", message="Bye"),
    ]


@pytest.fixture
def callbacks() -> EngineConfig:
    """EngineConfig whose notification callbacks are mocks."""
    return EngineConfig(
        on_new_user_message=MagicMock(name="on_new_user_message"),
        on_new_step_message=MagicMock(name="on_new_step_message"),
        on_continue=MagicMock(name="on_continue"),
        on_end=MagicMock(name="on_end"),
    )


@pytest.fixture
def engine(basic_script, callbacks) -> FlowEngine:
    return FlowEngine(basic_script, callbacks)


@pytest.fixture
def write_script(tmp_path):
    """Factory writing YAML text to a script file and returning its path."""

    def _write(content: str, name: str = "script.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
