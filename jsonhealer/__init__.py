"""
jsonhealer - repairs malformed JSON-like text into valid JSON.

jsonhealer runs an ordered pipeline of small, string-aware text
transformations over the input and stops as soon as the text is valid JSON.
It is aimed at output from language models, hand-edited configs, truncated
streams and Python-style literals.

Key Features:
- Extract JSON from markdown code fences and surrounding prose
- Remove comments, convert Python/JavaScript literals and single quotes
- Quote bare keys, insert missing colons and commas, drop stray commas
- Close broken strings and balance braces/brackets
- Caller-owned pipelines with custom transformations

Quick Start:
    import jsonhealer
    jsonhealer.heal('{name: "Eve", active: True,}')
    # '{"name": "Eve", "active": true}'

    jsonhealer.parse('{"items": [1 2 3')
    # {'items': [1, 2, 3]}

    # Custom transformations live on your own healer
    healer = jsonhealer.JsonHealer()
    healer.register_transformation("fix_arrows", lambda t: t.replace("=>", ":"), 5)
"""

from .core.engine import (
    HealReport,
    HealState,
    JsonHealer,
    aggressive_repair,
    heal,
    heal_with_report,
    is_valid_json,
    parse,
)
from .core.exceptions import HealerError, InvalidTransformation, TransformationError
from .preprocessing.base import FunctionTransformation, TransformationBase
from .preprocessing.pipeline import TransformationPipeline
from .utils.config import FallbackSettings, HealConfig

__version__ = "0.1.0"
__author__ = "jsonhealer contributors"

__all__ = [
    # Repair functions
    "heal", "heal_with_report", "parse", "is_valid_json", "aggressive_repair",
    # Pipeline and extension points
    "JsonHealer", "TransformationPipeline", "TransformationBase", "FunctionTransformation",
    # Results and configuration
    "HealReport", "HealState", "HealConfig", "FallbackSettings",
    # Exception classes
    "HealerError", "InvalidTransformation", "TransformationError",
]
