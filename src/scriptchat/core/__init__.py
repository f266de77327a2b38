"""Core domain types and infrastructure."""

from scriptchat.core.errors import (
    ConfigError,
    FlowEndedError,
    FlowError,
    ScriptChatError,
    ScriptError,
    UnknownStepError,
    ValidatorNotFoundError,
)
from scriptchat.core.template import substitute
from scriptchat.core.types import END_STEP_ID, START_STEP_ID, InputType, ProceedEvent, Result, Step

__all__ = [
    "END_STEP_ID",
    "START_STEP_ID",
    "ConfigError",
    "FlowEndedError",
    "FlowError",
    "InputType",
    "ProceedEvent",
    "Result",
    "ScriptChatError",
    "ScriptError",
    "Step",
    "UnknownStepError",
    "ValidatorNotFoundError",
    "substitute",
]
