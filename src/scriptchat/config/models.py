"""Configuration models for YAML script documents."""

from pydantic import BaseModel, Field, field_validator

from scriptchat.core.types import InputType

# DSL Version constants
SUPPORTED_VERSIONS = frozenset({"1.0"})
CURRENT_VERSION = "1.0"


class StepConfig(BaseModel):
    """Configuration for a single step."""

    id: str = Field(description="Step identifier")
    next: str | None = Field(default=None, description="Successor step id")
    message: str = Field(default="", description="Message template")
    input: InputType | None = Field(default=None, description="Field type: text, email")
    validator: str | None = Field(default=None, description="Validator function name")


class ScriptConfig(BaseModel):
    """Root model of a script document."""

    version: str = CURRENT_VERSION
    variables: dict[str, str] = Field(
        default_factory=dict, description="Initial custom variables"
    )
    steps: list[StepConfig] = Field(min_length=1)

    @field_validator("version", mode="before")
    @classmethod
    def check_version(cls, value: object) -> str:
        version = str(value)
        if version not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported script version '{version}'. "
                f"Supported: {sorted(SUPPORTED_VERSIONS)}"
            )
        return version
