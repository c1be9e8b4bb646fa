"""
Core interfaces for the repair pipeline.

This module defines the contract every transformation implements so that
built-in and user-supplied repairs can be composed in one ordered pipeline.
"""

from typing import Any, Protocol


class Transformation(Protocol):
    """Protocol for a named text-to-text repair step."""

    name: str

    def process(self, text: str) -> str:
        """Return the repaired text."""
        ...

    def should_apply(self, config: Any) -> bool:
        """Determine if this step should run given the configuration."""
        ...
