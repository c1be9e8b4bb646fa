"""
Exception classes for jsonhealer.

Malformed input never raises: repair failures degrade to a best-effort string.
The exceptions here cover misuse of the extension API and failures of a single
transformation, which the orchestrator absorbs.
"""


class HealerError(Exception):
    """Base class for all jsonhealer errors."""


class InvalidTransformation(HealerError, TypeError):
    """Raised when a transformation registered with a pipeline is not callable."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(
            f"Transformation {name!r} must be callable, got {type(value).__name__}"
        )


class TransformationError(HealerError):
    """Raised when a transformation does not produce text."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(f"Transformation {name!r} failed: {message}")
