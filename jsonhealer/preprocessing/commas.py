"""
Separator repair transformations.

This module contains steps that remove superfluous commas and insert the
commas missing between adjacent values.
"""

import re
from re import Match

from ..core.constants import JSON_LITERALS
from .base import TransformationBase
from .string_utils import CharRole, StringStateTracker, classify_quotes

LITERAL = "(?:" + "|".join(JSON_LITERALS) + ")"
LITERAL_START = rf"\b{LITERAL}"
LITERAL_END = rf"{LITERAL}\b"


def _adjacency_rule(left: str, whitespace: str, right: str) -> re.Pattern[str]:
    """Capture (left value end)(whitespace) followed by a right value start."""
    return re.compile(f"({left})({whitespace})(?={right})")


# A comma is inserted right after the left value. Order follows the repair sequence.
QUOTE_AND_CONTAINER_RULES = [
    _adjacency_rule(r"\}", r"\s*", r"\{"),
    _adjacency_rule(r"\]", r"\s*", r"\["),
    _adjacency_rule(r"\}", r"\s*", '"'),
    _adjacency_rule(r"\]", r"\s*", '"'),
    _adjacency_rule('"', r"\s*", r"\{"),
    _adjacency_rule('"', r"\s*", r"\["),
    _adjacency_rule('"', r"\s*", '"'),
    _adjacency_rule(r"\d", r"\s+", '"'),
    _adjacency_rule('"', r"\s+", r"-?\d"),
]

NUMBER_AND_LITERAL_RULES = [
    _adjacency_rule(r"\]", r"\s+", r"\d"),
    _adjacency_rule(r"\d", r"\s+", r"\["),
    _adjacency_rule(r"\d", r"\s+", r"\{"),
    _adjacency_rule(r"\}", r"\s+", r"\d"),
    _adjacency_rule(r"\}", r"\s+", LITERAL_END),
    _adjacency_rule(LITERAL_START, r"\s+", r"\{"),
    _adjacency_rule(r"\]", r"\s+", LITERAL_END),
    _adjacency_rule(LITERAL_START, r"\s+", r"\["),
    _adjacency_rule('"', r"\s+", LITERAL_END),
    _adjacency_rule(LITERAL_START, r"\s+", '"'),
]

NUMBER_RUN_PATTERN = re.compile(r"[\d.eE+-]+")
NUMBER_AHEAD_PATTERN = re.compile(r"(\s+)(?=-?[\d.])")
LITERAL_RUN_PATTERN = re.compile(rf"{LITERAL}\b")
VALUE_AHEAD_PATTERN = re.compile(rf'(\s+)(?={LITERAL}|"|-?[\d.]|\[|\{{)')


class TrailingCommaFixer(TransformationBase):
    """Removes trailing commas before closing braces/brackets."""

    name = "fix_trailing_commas"

    def process(self, text: str) -> str:
        result: list[str] = []
        tracker = StringStateTracker()
        i = 0

        while i < len(text):
            char = text[i]

            if tracker.in_string or tracker.is_delimiter(text, i):
                tracker.update(text, i)
                result.append(char)
                i += 1
                continue

            if char == ",":
                j = i + 1
                while j < len(text) and (text[j].isspace() or text[j] == ","):
                    j += 1
                if j < len(text) and text[j] in "}]":
                    # Drop the commas and the whitespace between them
                    i = j
                    continue

            result.append(char)
            i += 1

        return "".join(result)


class LeadingCommaFixer(TransformationBase):
    """Removes commas directly after an opening brace/bracket."""

    name = "fix_leading_commas"

    def process(self, text: str) -> str:
        result: list[str] = []
        tracker = StringStateTracker()
        i = 0

        while i < len(text):
            char = text[i]

            if tracker.in_string or tracker.is_delimiter(text, i):
                tracker.update(text, i)
                result.append(char)
                i += 1
                continue

            result.append(char)
            i += 1
            if char in "{[":
                last_comma = -1
                j = i
                while j < len(text) and (text[j].isspace() or text[j] == ","):
                    if text[j] == ",":
                        last_comma = j
                    j += 1
                if last_comma != -1:
                    i = last_comma + 1

        return "".join(result)


class MultipleCommaFixer(TransformationBase):
    """Collapses runs of commas between values into a single comma."""

    name = "fix_multiple_commas"

    def process(self, text: str) -> str:
        result: list[str] = []
        tracker = StringStateTracker()
        i = 0

        while i < len(text):
            char = text[i]

            if tracker.in_string or tracker.is_delimiter(text, i):
                tracker.update(text, i)
                result.append(char)
                i += 1
                continue

            result.append(char)
            i += 1
            if char == ",":
                while i < len(text) and (text[i] == "," or text[i].isspace()):
                    if text[i] != ",":
                        result.append(text[i])
                    i += 1

        return "".join(result)


class MissingCommaFixer(TransformationBase):
    """
    Inserts commas between adjacent values.

    Adjacency rules only fire when both ends of a match sit outside string
    literals. Bare numbers and literals are additionally separated when they
    appear inside an array.
    """

    name = "fix_missing_commas"

    def process(self, text: str) -> str:
        result = text
        for rule in QUOTE_AND_CONTAINER_RULES:
            result = self._apply_rule(rule, result)
        result = self._fix_commas_between_numbers(result)
        result = self._fix_commas_between_literals(result)
        for rule in NUMBER_AND_LITERAL_RULES:
            result = self._apply_rule(rule, result)
        return result

    @staticmethod
    def _apply_rule(rule: re.Pattern[str], text: str) -> str:
        """Apply one adjacency rule where both matched ends are structural."""
        if not rule.search(text):
            return text
        roles = classify_quotes(text)

        def is_structural(index: int, quote_role: CharRole) -> bool:
            if text[index] == '"':
                return roles[index] == quote_role
            return roles[index] == CharRole.OUTSIDE

        def insert_comma(match: Match[str]) -> str:
            if is_structural(match.start(1), CharRole.CLOSE_QUOTE) and is_structural(
                match.end(), CharRole.OPEN_QUOTE
            ):
                return f"{match.group(1)},{match.group(2)}"
            return match.group(0)

        return rule.sub(insert_comma, text)

    @staticmethod
    def _fix_commas_between_numbers(text: str) -> str:
        """Fix missing commas between numbers inside arrays."""
        result: list[str] = []
        tracker = StringStateTracker()
        array_depth = 0
        i = 0

        while i < len(text):
            char = text[i]

            if tracker.in_string or tracker.is_delimiter(text, i):
                tracker.update(text, i)
                result.append(char)
                i += 1
                continue

            if char == "[":
                array_depth += 1
            elif char == "]":
                array_depth -= 1

            if array_depth > 0 and char in "0123456789." and _at_word_start(text, i):
                match = NUMBER_RUN_PATTERN.match(text, i)
                assert match is not None
                result.append(match.group(0))
                i = match.end()
                ahead = NUMBER_AHEAD_PATTERN.match(text, i)
                if ahead:
                    result.append("," + ahead.group(1))
                    i = ahead.end()
                continue

            result.append(char)
            i += 1

        return "".join(result)

    @staticmethod
    def _fix_commas_between_literals(text: str) -> str:
        """Fix missing commas after true/false/null inside arrays."""
        result: list[str] = []
        tracker = StringStateTracker()
        array_depth = 0
        i = 0

        while i < len(text):
            char = text[i]

            if tracker.in_string or tracker.is_delimiter(text, i):
                tracker.update(text, i)
                result.append(char)
                i += 1
                continue

            if char == "[":
                array_depth += 1
            elif char == "]":
                array_depth -= 1

            if array_depth > 0 and _at_word_start(text, i):
                match = LITERAL_RUN_PATTERN.match(text, i)
                if match:
                    result.append(match.group(0))
                    i = match.end()
                    ahead = VALUE_AHEAD_PATTERN.match(text, i)
                    if ahead:
                        result.append("," + ahead.group(1))
                        i = ahead.end()
                    continue

            result.append(char)
            i += 1

        return "".join(result)


def _at_word_start(text: str, pos: int) -> bool:
    """Check that pos does not continue an identifier or number."""
    if pos == 0:
        return True
    prev = text[pos - 1]
    return not (prev.isalnum() or prev in "_$.")
