"""Script loader for YAML script documents."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from scriptchat.config.models import ScriptConfig
from scriptchat.core.errors import ConfigError, ScriptError
from scriptchat.core.types import Step

logger = logging.getLogger(__name__)


def validate_script(steps: Iterable[Step]) -> None:
    """Check that a script forms a resolvable chain.

    Every step except 'end' needs a ``next`` that names a step of the
    script, and ids must be unique.

    Raises:
        ScriptError: Listing every problem found
    """
    script = list(steps)
    if not script:
        raise ScriptError("Script must contain at least one step", ["script is empty"])

    problems: list[str] = []
    ids: set[str] = set()
    for step in script:
        if step.id in ids:
            problems.append(f"duplicate step id '{step.id}'")
        ids.add(step.id)

    for step in script:
        if step.is_end:
            continue
        if step.next is None:
            problems.append(f"step '{step.id}' has no next step")
        elif step.next not in ids:
            problems.append(f"step '{step.id}' points to unknown step '{step.next}'")

    if problems:
        raise ScriptError(f"Invalid script: {'; '.join(problems)}", problems)


class ScriptLoader:
    """Load scripts from YAML files."""

    @staticmethod
    def load(path: Path | str) -> ScriptConfig:
        """Load a script document.

        Args:
            path: Path to the YAML file

        Returns:
            Parsed ScriptConfig

        Raises:
            ConfigError: If the file is missing, unparsable or invalid
        """
        script_path = Path(path)
        if not script_path.is_file():
            raise ConfigError(f"Script not found: {script_path}")

        try:
            with open(script_path, encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse script {script_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Script {script_path} must be a mapping with a 'steps' list")

        try:
            config = ScriptConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid script {script_path}: {e}") from e

        logger.debug(f"Loaded script {script_path} with {len(config.steps)} steps")
        return config

    @staticmethod
    def build_steps(config: ScriptConfig) -> list[Step]:
        """Turn step configs into engine steps.

        Steps naming a ``validator`` get a before_proceed hook running it.

        Raises:
            ScriptError: If the steps do not form a valid chain
            ValidatorNotFoundError: If a validator name is not registered
        """
        from scriptchat.validation.validators import make_validator_hook

        steps = [
            Step(
                id=step.id,
                next=step.next,
                message=step.message,
                input=step.input,
                before_proceed=make_validator_hook(step.validator) if step.validator else None,
            )
            for step in config.steps
        ]
        validate_script(steps)
        return steps
