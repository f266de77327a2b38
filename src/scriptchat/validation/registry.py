"""Named checks for step answers, shared by YAML scripts and the input hook."""

import logging
from collections.abc import Callable
from threading import Lock

from scriptchat.core.errors import ValidatorNotFoundError

logger = logging.getLogger(__name__)

Validator = Callable[[str], bool]

_validators: dict[str, Validator] = {}
_validators_lock = Lock()


class ValidatorRegistry:
    """
    Name-to-check mapping for step answers.

    A validator takes one answer string and says whether the step may be
    left with it. Steps reference one by name (``validator: email``) and
    ``validate_input`` picks one by the step's input type.
    """

    @classmethod
    def register(cls, name: str) -> Callable[[Validator], Validator]:
        """
        Register a check for step answers under ``name``.

        Usage:
            @ValidatorRegistry.register("postcode")
            def validate_postcode(answer: str) -> bool:
                return answer.isdigit() and len(answer) == 5

        Args:
            name: Name used by ``validator:`` in a script step

        Returns:
            Decorator that stores the check and returns it unchanged
        """

        def decorator(func: Validator) -> Validator:
            with _validators_lock:
                if name in _validators:
                    logger.warning(
                        f"Validator '{name}' already registered, overwriting",
                        extra={"validator_name": name},
                    )
                _validators[name] = func
                logger.debug(
                    f"Registered validator '{name}'",
                    extra={"validator_name": name},
                )
            return func

        return decorator

    @classmethod
    def get(cls, name: str) -> Validator:
        """
        Look up the check a step names.

        Raises:
            ValidatorNotFoundError: If no check is registered under ``name``
        """
        with _validators_lock:
            if name not in _validators:
                raise ValidatorNotFoundError(
                    f"Validator '{name}' not registered. Available: {list(_validators.keys())}"
                )
            return _validators[name]

    @classmethod
    def validate(cls, name: str, value: str) -> bool:
        """Run the named check against one answer."""
        validator = cls.get(name)
        return bool(validator(value))

    @classmethod
    def list_validators(cls) -> list[str]:
        with _validators_lock:
            return list(_validators.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        with _validators_lock:
            return name in _validators

    @classmethod
    def unregister(cls, name: str) -> None:
        """Drop the named check; unknown names are ignored."""
        with _validators_lock:
            _validators.pop(name, None)
