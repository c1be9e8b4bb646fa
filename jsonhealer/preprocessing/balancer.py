"""
Bracket balancing transformation.

This module reconstructs structural nesting from a damaged character stream:
missing closers are appended and stray closers are deleted.
"""

from typing import NamedTuple

from ..core.constants import CLOSER_FOR, OPENER_FOR
from .base import TransformationBase
from .string_utils import StringStateTracker, iterate_with_string_tracking


class BracketCounts(NamedTuple):
    """Bracket and brace counts outside string literals."""

    open_braces: int
    close_braces: int
    open_brackets: int
    close_brackets: int

    @property
    def balanced(self) -> bool:
        return (
            self.open_braces == self.close_braces
            and self.open_brackets == self.close_brackets
        )


def count_brackets(text: str) -> BracketCounts:
    """Count braces and brackets that sit outside string literals."""
    counts = dict.fromkeys("{}[]", 0)
    for _, char, in_string in iterate_with_string_tracking(text):
        if not in_string and char in counts:
            counts[char] += 1
    return BracketCounts(counts["{"], counts["}"], counts["["], counts["]"])


def _pop_matching(stack: list[tuple[str, int]], opener: str) -> bool:
    """Remove the topmost entry of the given kind, searching downward."""
    for j in range(len(stack) - 1, -1, -1):
        if stack[j][0] == opener:
            del stack[j]
            return True
    return False


class BracketBalancer(TransformationBase):
    """
    Balances braces and brackets.

    The first pass tolerates interleaving noise: a closer removes the nearest
    open container of its own kind, not necessarily the innermost one. The
    containers still open at the end get their closers appended, innermost
    first. The second pass deletes closers that have no opener at all.
    """

    name = "balance_brackets"

    def process(self, text: str) -> str:
        result = self._append_missing_closers(text.strip())
        return self._remove_unmatched_closers(result)

    @staticmethod
    def _append_missing_closers(text: str) -> str:
        stack: list[tuple[str, int]] = []
        tracker = StringStateTracker()

        for i, char in enumerate(text):
            if tracker.update(text, i):
                continue
            if char in CLOSER_FOR:
                stack.append((char, i))
            elif char in OPENER_FOR:
                _pop_matching(stack, OPENER_FOR[char])

        return text + "".join(CLOSER_FOR[opener] for opener, _ in reversed(stack))

    @staticmethod
    def _remove_unmatched_closers(text: str) -> str:
        stack: list[tuple[str, int]] = []
        to_remove: list[int] = []
        tracker = StringStateTracker()

        for i, char in enumerate(text):
            if tracker.update(text, i):
                continue
            if char in CLOSER_FOR:
                stack.append((char, i))
            elif char in OPENER_FOR and not _pop_matching(stack, OPENER_FOR[char]):
                to_remove.append(i)

        if not to_remove:
            return text

        chars = list(text)
        # Delete from the end so earlier indices stay valid
        for index in sorted(to_remove, reverse=True):
            del chars[index]
        return "".join(chars)
