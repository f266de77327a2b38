"""Hook resolution and invocation helpers.

Hooks and notification callbacks may be plain callables or coroutine
functions. The engine awaits whatever they return when it is awaitable.
"""

import inspect
from collections.abc import Callable
from typing import Any, cast

from scriptchat.core.types import Step


async def maybe_await(func: Callable[..., Any], *args: Any) -> Any:
    """Call func and await the result if it is awaitable."""
    result = func(*args)
    if inspect.isawaitable(result):
        return await cast(Any, result)
    return result


async def notify(callback: Callable[..., Any] | None, *args: Any) -> None:
    """Invoke an optional notification callback."""
    if callback is not None:
        await maybe_await(callback, *args)


def resolve_before_proceed(
    step: Step,
    default: Callable[..., Any] | None,
) -> Callable[..., Any] | None:
    """Pick the single before_proceed hook for a step.

    The step-level hook replaces the flow-level one.
    """
    return step.before_proceed or default


def resolve_after_proceed(
    step: Step,
    default: Callable[..., Any] | None,
) -> list[Callable[..., Any]]:
    """Collect after_proceed hooks in call order: flow-level, then step-level."""
    return [hook for hook in (default, step.after_proceed) if hook is not None]
