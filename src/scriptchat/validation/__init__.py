"""Validation module for scriptchat"""

# Import validators to auto-register them
from scriptchat.validation import validators  # noqa: F401
from scriptchat.validation.registry import ValidatorRegistry
from scriptchat.validation.validators import make_validator_hook, validate_input

__all__ = ["ValidatorRegistry", "make_validator_hook", "validate_input"]
