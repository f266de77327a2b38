"""Core interaction errors."""


class ScriptChatError(Exception):
    """Base class for all scriptchat errors."""

    pass


class ConfigError(ScriptChatError):
    """Raised when a script document cannot be loaded."""


class ScriptError(ConfigError):
    """Raised when a script is structurally invalid."""

    def __init__(self, message: str, problems: list[str] | None = None):
        super().__init__(message)
        self.problems = problems or []


class FlowError(ScriptChatError):
    """Raised when flow execution fails."""

    pass


class UnknownStepError(FlowError, KeyError):
    """Raised when a step id is not present in the script."""

    def __init__(self, step_id: str | None):
        super().__init__(f"Script does not contain step '{step_id}'")
        self.step_id = step_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class FlowEndedError(FlowError):
    """Raised when proceeding past the terminal step."""

    pass


class ValidatorNotFoundError(ScriptChatError, ValueError):
    """Raised when a validator name is not registered."""

    pass
