"""Integration test configuration.

Provides the example onboarding script and registers its validators.
"""

import importlib.util
from pathlib import Path

import pytest

from scriptchat.validation import ValidatorRegistry

EXAMPLES_DIR = Path(__file__).resolve().parents[2] / "examples"


@pytest.fixture
def onboarding_script() -> Path:
    return EXAMPLES_DIR / "onboarding" / "script.yaml"


@pytest.fixture
def onboarding_validators():
    """Import the example validators module, unregistering them afterwards."""
    path = EXAMPLES_DIR / "onboarding" / "validators.py"
    spec = importlib.util.spec_from_file_location("onboarding_validators", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    yield module
    ValidatorRegistry.unregister("topic")
