"""Built-in validators and validation hooks"""

import logging
import re
from collections.abc import Callable

from scriptchat.core.types import ProceedEvent
from scriptchat.validation.registry import ValidatorRegistry

logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@ValidatorRegistry.register("text")
def validate_text(value: str) -> bool:
    """Accept any value with visible characters."""
    return isinstance(value, str) and bool(value.strip())


@ValidatorRegistry.register("email")
def validate_email(value: str) -> bool:
    """
    Validate email address format.

    Args:
        value: Address to validate

    Returns:
        True if it looks like local@domain.tld, False otherwise
    """
    if not isinstance(value, str):
        return False
    return bool(_EMAIL_PATTERN.match(value.strip()))


def _all_valid(validator: Callable[[str], bool], event: ProceedEvent) -> bool:
    return all(validator(value) for value in event.result.values if value is not None)


def make_validator_hook(name: str) -> Callable[[ProceedEvent], bool]:
    """Build a before_proceed hook running a registered validator on every value.

    The validator is resolved immediately so unknown names fail at load time.

    Raises:
        ValidatorNotFoundError: If ``name`` is not registered
    """
    validator = ValidatorRegistry.get(name)

    def hook(event: ProceedEvent) -> bool:
        valid = _all_valid(validator, event)
        if not valid:
            logger.debug(f"Validator '{name}' rejected values for step '{event.result.step}'")
        return valid

    hook.__name__ = f"validate_{name}"
    return hook


def validate_input(event: ProceedEvent) -> bool:
    """Flow-level before_proceed checking values against the step's input type.

    Steps without an input type, or whose type has no registered validator,
    always pass.
    """
    input_type = event.current_step.input
    if input_type is None or not ValidatorRegistry.is_registered(input_type.value):
        return True
    return _all_valid(ValidatorRegistry.get(input_type.value), event)
