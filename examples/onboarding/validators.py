"""
Onboarding validators.

Load with: scriptchat chat -s examples/onboarding/script.yaml -m examples.onboarding.validators
"""

from scriptchat.validation.registry import ValidatorRegistry

TOPICS = frozenset({"news", "offers", "events"})


@ValidatorRegistry.register("topic")
def validate_topic(value: str) -> bool:
    """Accept only the topics offered by the newsletter."""
    return value.strip().lower() in TOPICS
