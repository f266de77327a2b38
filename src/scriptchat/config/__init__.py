"""Configuration module for scriptchat."""

from scriptchat.config.loader import ScriptLoader, validate_script
from scriptchat.config.models import ScriptConfig, StepConfig

__all__ = ["ScriptConfig", "StepConfig", "ScriptLoader", "validate_script"]
