"""
Base classes for transformations.

This module contains the base class shared by the built-in repair steps and the
adapter that lets plain callables take part in a pipeline.
"""

from typing import Callable

from ..core.exceptions import TransformationError
from ..utils.config import HealConfig


class TransformationBase:
    """Base class for transformations with common functionality."""

    name = "transformation"

    def should_apply(self, config: HealConfig) -> bool:
        """Apply unless the configuration disables this step by name."""
        return config.is_enabled(self.name)

    def process(self, text: str) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")

    def __call__(self, text: str) -> str:
        return self.process(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionTransformation(TransformationBase):
    """Adapts a user-supplied text -> text callable."""

    def __init__(self, name: str, func: Callable[[str], str]):
        self.name = name
        self.func = func

    def process(self, text: str) -> str:
        result = self.func(text)
        if not isinstance(result, str):
            raise TransformationError(
                self.name, f"expected str result, got {type(result).__name__}"
            )
        return result
