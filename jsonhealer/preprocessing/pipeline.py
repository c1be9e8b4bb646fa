"""
Ordered transformation pipeline.

This module implements the caller-owned registry of repair steps. The order of
the steps matters: the orchestrator stops at the first step whose output is
valid JSON.
"""

import logging
from collections.abc import Iterator
from typing import Callable, Optional, Union

from ..core.exceptions import InvalidTransformation
from .balancer import BracketBalancer
from .base import FunctionTransformation, TransformationBase
from .commas import (
    LeadingCommaFixer,
    MissingCommaFixer,
    MultipleCommaFixer,
    TrailingCommaFixer,
)
from .extractors import MarkdownExtractor, MixedTextExtractor
from .handlers import CommentHandler, LiteralHandler
from .normalizers import ControlCharacterEscaper, QuoteNormalizer
from .repairers import BrokenStringCloser, MissingColonFixer, UnquotedKeyFixer

logger = logging.getLogger(__name__)

TransformationLike = Union[TransformationBase, Callable[[str], str]]


class TransformationPipeline:
    """Manages an ordered sequence of uniquely named transformations."""

    def __init__(self, steps: Optional[list[TransformationBase]] = None):
        self.steps: list[TransformationBase] = []
        for step in steps or []:
            self.add_step(step)

    def add_step(self, step: TransformationBase) -> None:
        """Append a transformation under its own name."""
        self.register(step.name, step)

    def register(
        self, name: str, func: TransformationLike, priority: Optional[int] = None
    ) -> None:
        """
        Register a transformation.

        Args:
            name: Unique name; an existing entry with this name is replaced
            func: A TransformationBase or any callable taking and returning str
            priority: Target index, clamped to the pipeline length. Omitted or
                negative priorities append to the end.

        Raises:
            InvalidTransformation: If func is not callable
        """
        if not callable(func):
            raise InvalidTransformation(name, func)

        if isinstance(func, TransformationBase) and func.name == name:
            step = func
        else:
            step = FunctionTransformation(name, func)

        self.remove(name)
        if isinstance(priority, int) and not isinstance(priority, bool) and priority >= 0:
            self.steps.insert(min(priority, len(self.steps)), step)
        else:
            self.steps.append(step)
        logger.debug("Registered transformation %r at index %d", name, self.index(name))

    def remove(self, name: str) -> None:
        """Remove the named transformation; unknown names are ignored."""
        index = self.index(name)
        if index != -1:
            del self.steps[index]
            logger.debug("Removed transformation %r", name)

    def index(self, name: str) -> int:
        """Position of the named transformation, or -1."""
        for i, step in enumerate(self.steps):
            if step.name == name:
                return i
        return -1

    def get(self, name: str) -> Optional[TransformationBase]:
        """Look up a transformation by name."""
        index = self.index(name)
        return self.steps[index] if index != -1 else None

    @property
    def names(self) -> list[str]:
        """Names of the transformations in run order."""
        return [step.name for step in self.steps]

    def copy(self) -> "TransformationPipeline":
        """Create an independent pipeline with the same steps."""
        return TransformationPipeline(list(self.steps))

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[TransformationBase]:
        return iter(list(self.steps))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.index(name) != -1

    def __repr__(self) -> str:
        return f"TransformationPipeline({self.names!r})"

    @classmethod
    def create_default_pipeline(cls) -> "TransformationPipeline":
        """Create a pipeline with the built-in repair steps in standard order."""
        pipeline = cls()

        # Content extraction steps
        pipeline.add_step(MarkdownExtractor())
        pipeline.add_step(MixedTextExtractor())

        # Lexical cleanup and normalization
        pipeline.add_step(CommentHandler())
        pipeline.add_step(LiteralHandler())
        pipeline.add_step(QuoteNormalizer())
        pipeline.add_step(ControlCharacterEscaper())
        pipeline.add_step(UnquotedKeyFixer())
        pipeline.add_step(MissingColonFixer())

        # Separator repair
        pipeline.add_step(TrailingCommaFixer())
        pipeline.add_step(LeadingCommaFixer())
        pipeline.add_step(MultipleCommaFixer())

        # Structure repair (strings first, then commas, then nesting)
        pipeline.add_step(BrokenStringCloser())
        pipeline.add_step(MissingCommaFixer())
        pipeline.add_step(BracketBalancer())

        return pipeline
