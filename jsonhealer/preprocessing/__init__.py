"""
JSON repair transformations.

This module provides the repair pipeline: focused, single-responsibility
transformations that each scan the text once, composed into an ordered
pipeline.
"""

from .balancer import BracketBalancer, count_brackets
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
from .pipeline import TransformationPipeline
from .repairers import BrokenStringCloser, MissingColonFixer, UnquotedKeyFixer

__all__ = [
    "TransformationPipeline",
    "TransformationBase",
    "FunctionTransformation",
    "MarkdownExtractor",
    "MixedTextExtractor",
    "CommentHandler",
    "LiteralHandler",
    "QuoteNormalizer",
    "ControlCharacterEscaper",
    "UnquotedKeyFixer",
    "MissingColonFixer",
    "TrailingCommaFixer",
    "LeadingCommaFixer",
    "MultipleCommaFixer",
    "MissingCommaFixer",
    "BrokenStringCloser",
    "BracketBalancer",
    "count_brackets",
]
