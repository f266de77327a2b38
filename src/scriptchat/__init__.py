"""scriptchat - scripted, linear conversational flows.

A script is a chain of named steps. The engine walks it forward one
accepted answer at a time, records the answers, fills ``{{step}}`` and
``{{variable}}`` placeholders in later messages, and reports everything
through callbacks so any presentation layer can render it.

Quick start:
    from scriptchat import EngineConfig, FlowEngine, Step

    engine = FlowEngine(
        [
            Step(id="start", next="end", message="Your name?", input="text"),
            Step(id="end", message="Bye {{start}}"),
        ],
        EngineConfig(on_new_step_message=print),
    )
    await engine.proceed(["Ann"])  # prints "Bye Ann"
"""

from scriptchat.__version__ import __version__
from scriptchat.core.errors import (
    ConfigError,
    FlowEndedError,
    FlowError,
    ScriptChatError,
    ScriptError,
    UnknownStepError,
    ValidatorNotFoundError,
)
from scriptchat.core.types import InputType, ProceedEvent, Result, Step
from scriptchat.engine import EngineConfig, FlowEngine

__all__ = [
    "__version__",
    "FlowEngine",
    "EngineConfig",
    "Step",
    "Result",
    "ProceedEvent",
    "InputType",
    "ScriptChatError",
    "ConfigError",
    "ScriptError",
    "FlowError",
    "UnknownStepError",
    "FlowEndedError",
    "ValidatorNotFoundError",
]
