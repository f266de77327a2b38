"""Flow engine for scripted, linear conversations.

The engine owns the script, the cursor, the recorded results and the
custom variables. It performs no I/O: everything a user should see is
handed to the notification callbacks in :class:`EngineConfig`.

Callers must not run two ``proceed`` calls concurrently on one engine
(e.g. disable the submit control until the call settles). The engine
holds no lock and interleaved calls would corrupt result ordering.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from scriptchat.core.errors import FlowEndedError, ScriptError, UnknownStepError
from scriptchat.core.hooks import maybe_await, notify, resolve_after_proceed, resolve_before_proceed
from scriptchat.core.template import substitute
from scriptchat.core.types import (
    START_STEP_ID,
    AfterProceedHook,
    BeforeProceedHook,
    ProceedEvent,
    Result,
    Step,
)

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Flow-level hooks and notification callbacks."""

    before_proceed: BeforeProceedHook | None = None
    after_proceed: AfterProceedHook | None = None
    on_new_user_message: Callable[[list[str | None]], Any] | None = None
    on_new_step_message: Callable[[str], Any] | None = None
    on_continue: Callable[[Step], Any] | None = None
    on_end: Callable[[], Any] | None = None


class FlowEngine:
    """Walks a linear script forward one step per accepted answer."""

    def __init__(
        self,
        script: Iterable[Step],
        config: EngineConfig | None = None,
        custom_variables: Mapping[str, str] | None = None,
    ):
        """Initialize the engine.

        Args:
            script: Steps of the flow, unique by id
            config: Flow-level hooks and callbacks
            custom_variables: Initial custom variables

        Raises:
            ScriptError: If the script is empty or has duplicate ids
        """
        self._script: tuple[Step, ...] = tuple(script)
        if not self._script:
            raise ScriptError("Script must contain at least one step")

        self._steps: dict[str, Step] = {}
        for step in self._script:
            if step.id in self._steps:
                raise ScriptError(f"Duplicate step id '{step.id}'", [step.id])
            self._steps[step.id] = step

        self.config = config or EngineConfig()
        self._custom_variables: dict[str, str] = dict(custom_variables or {})
        self._entry_step = self._steps.get(START_STEP_ID, self._script[0])
        self._current_step = self._entry_step
        self._results: list[Result] = []

    @classmethod
    def from_yaml(cls, path: Path | str, config: EngineConfig | None = None) -> "FlowEngine":
        """Build an engine from a YAML script document."""
        from scriptchat.config.loader import ScriptLoader

        script_config = ScriptLoader.load(path)
        return cls(
            ScriptLoader.build_steps(script_config),
            config=config,
            custom_variables=script_config.variables,
        )

    @property
    def script(self) -> tuple[Step, ...]:
        return self._script

    @property
    def entry_step(self) -> Step:
        return self._entry_step

    @property
    def current_step(self) -> Step:
        return self._current_step

    @property
    def results(self) -> tuple[Result, ...]:
        """Snapshot of the recorded results, in traversal order."""
        return tuple(self._results)

    @property
    def custom_variables(self) -> dict[str, str]:
        return dict(self._custom_variables)

    @property
    def is_ended(self) -> bool:
        return self._current_step.is_end

    def get_step(self, step_id: str | None) -> Step:
        """Get a step by id.

        Raises:
            UnknownStepError: If the script has no such step
        """
        if step_id is None or step_id not in self._steps:
            raise UnknownStepError(step_id)
        return self._steps[step_id]

    def get_next_step(self) -> Step:
        """Get the successor of the current step."""
        return self.get_step(self._current_step.next)

    def _set_step(self, step_id: str | None) -> Step:
        step = self.get_step(step_id)
        self._current_step = step
        return step

    def substitute(self, template: str) -> str:
        """Fill {{step}}, {{step.N}} and {{variable}} placeholders."""
        return substitute(template, self._results, self._custom_variables)

    def set_custom_variable(self, key: str, value: str) -> None:
        """Add or replace a custom variable."""
        self._custom_variables[key] = value
        logger.debug(f"Custom variable '{key}' set")

    async def start(self) -> None:
        """Announce the current step to the presentation layer.

        Emits the step message and then on_continue (or on_end when the
        flow sits at the terminal step). State is left untouched.
        """
        step = self._current_step
        await notify(self.config.on_new_step_message, self.substitute(step.message))
        if step.is_end:
            await notify(self.config.on_end)
        else:
            await notify(self.config.on_continue, step)

    async def proceed(self, current_step_values: Iterable[str | None]) -> bool:
        """Try to move past the current step with the given values.

        Args:
            current_step_values: Values captured for the current step

        Returns:
            True if the transition was committed, False if it was blocked
            by before_proceed or because no values were given.

        Raises:
            FlowEndedError: If the flow is already at the terminal step
            TypeError: If the values are a single str or bytes object
            UnknownStepError: If the script has a dangling ``next``
        """
        if self.is_ended:
            raise FlowEndedError("Flow has ended; reset it before proceeding")
        if isinstance(current_step_values, (str, bytes)):
            raise TypeError(
                f"proceed() expects a sequence of values, got {type(current_step_values).__name__}"
            )

        current_step = self._current_step
        values = tuple(current_step_values)
        result = Result(step=current_step.id, values=values)
        next_step = self.get_next_step()

        hook = resolve_before_proceed(current_step, self.config.before_proceed)
        if hook is not None:
            event = ProceedEvent(
                result=result,
                current_step=current_step,
                next_step=next_step,
                results=self.results,
            )
            if not bool(await maybe_await(hook, event)):
                logger.debug(f"Transition from '{current_step.id}' blocked by before_proceed")
                return False

        if not values:
            logger.debug(f"Transition from '{current_step.id}' skipped: no values")
            return False

        self._results.append(result)
        await notify(self.config.on_new_user_message, list(values))

        after_hooks = resolve_after_proceed(current_step, self.config.after_proceed)
        self._set_step(next_step.id)
        logger.debug(f"Moved from '{current_step.id}' to '{next_step.id}'")

        await notify(self.config.on_new_step_message, self.substitute(next_step.message))

        if next_step.is_end:
            logger.info("Flow reached end step")
            await notify(self.config.on_end)
            following = None
        else:
            await notify(self.config.on_continue, next_step)
            following = self.get_step(next_step.next)

        after_event = ProceedEvent(
            result=result,
            current_step=next_step,
            next_step=following,
            results=self.results,
        )
        for after_hook in after_hooks:
            await maybe_await(after_hook, after_event)

        return True

    def reset(self) -> None:
        """Return to the entry step and drop all results.

        Custom variables are kept.
        """
        self._current_step = self._entry_step
        self._results = []
        logger.debug("Flow reset")
