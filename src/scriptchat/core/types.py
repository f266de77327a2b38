"""Core type definitions for scripted flows."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

START_STEP_ID = "start"
END_STEP_ID = "end"


class InputType(str, Enum):
    """Field types a step can ask the presentation layer to render."""

    TEXT = "text"
    EMAIL = "email"


class Step(BaseModel):
    """A single step of a script.

    Steps are immutable; the engine only mutates its own cursor, results
    and variables.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique step identifier ('start' and 'end' are reserved)")
    next: str | None = Field(default=None, description="Id of the successor step")
    input: InputType | None = Field(
        default=None, description="Field type to render, absent for choice-only steps"
    )
    message: str = Field(default="", description="Message template ({{step}} placeholders)")
    before_proceed: "BeforeProceedHook | None" = Field(
        default=None, description="Replaces the flow-level before_proceed for this step"
    )
    after_proceed: "AfterProceedHook | None" = Field(
        default=None, description="Runs after the flow-level after_proceed when leaving this step"
    )

    @property
    def is_end(self) -> bool:
        return self.id == END_STEP_ID


@dataclass(frozen=True)
class Result:
    """Values captured for a step the user passed through."""

    step: str
    values: tuple[str | None, ...] = ()


@dataclass(frozen=True)
class ProceedEvent:
    """Payload handed to before_proceed and after_proceed hooks.

    For before_proceed, ``current_step`` is the step being left and
    ``next_step`` the one being entered. For after_proceed, ``current_step``
    is the step just entered and ``next_step`` its successor (None at end).
    """

    result: Result
    current_step: Step
    next_step: Step | None
    results: tuple[Result, ...] = field(default_factory=tuple)


BeforeProceedHook = Callable[[ProceedEvent], bool | Awaitable[bool]]
AfterProceedHook = Callable[[ProceedEvent], None | Awaitable[None]]

# Hook fields reference ProceedEvent, which is declared after Step
Step.model_rebuild()
