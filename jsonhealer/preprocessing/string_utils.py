"""
String-literal aware scanning shared by every transformation.

Each repair step walks the buffer left to right and must know whether the
current character belongs to a string literal. This module contains the single
implementation of that decision so the steps never disagree about escapes.
"""

from collections.abc import Generator
from enum import Enum
from typing import Optional


class CharRole(Enum):
    """Role of a character relative to double-quoted string literals."""

    OUTSIDE = "outside"
    OPEN_QUOTE = "open"
    CONTENT = "content"
    CLOSE_QUOTE = "close"


def is_escaped(text: str, index: int) -> bool:
    """
    Check whether the character at index is escaped by a backslash.

    Counts the whole run of preceding backslashes: an odd count escapes the
    character, an even count means the backslashes escape each other.
    """
    count = 0
    j = index - 1
    while j >= 0 and text[j] == "\\":
        count += 1
        j -= 1
    return count % 2 == 1


class StringStateTracker:
    """Helper class to track string state during text processing."""

    def __init__(self, quote_chars: str = '"') -> None:
        self.quote_chars = quote_chars
        self.in_string = False
        self.string_char: Optional[str] = None

    def is_delimiter(self, text: str, index: int) -> bool:
        """Return True if the character at index would open or close a string."""
        char = text[index]
        if char not in self.quote_chars or is_escaped(text, index):
            return False
        if self.in_string:
            return char == self.string_char
        return True

    def update(self, text: str, index: int) -> bool:
        """
        Update string state based on the character at index.

        Args:
            text: The buffer being scanned
            index: Position of the character being consumed

        Returns:
            True if currently inside a string
        """
        if self.is_delimiter(text, index):
            if self.in_string:
                self.in_string = False
                self.string_char = None
            else:
                self.in_string = True
                self.string_char = text[index]
        return self.in_string

    def reset(self) -> None:
        """Reset string state tracking."""
        self.in_string = False
        self.string_char = None


def iterate_with_string_tracking(
    text: str, quote_chars: str = '"'
) -> Generator[tuple[int, str, bool], None, None]:
    """
    Iterate through text with string state tracking.

    Yields:
        Tuple of (index, character, in_string_state). Opening quotes report
        True, closing quotes report False.
    """
    tracker = StringStateTracker(quote_chars)
    for i, char in enumerate(text):
        yield i, char, tracker.update(text, i)


def is_inside_string(text: str, index: int, quote_chars: str = '"') -> bool:
    """
    Report whether index lies inside a string literal.

    The delimiting quotes themselves are not considered inside. An index at or
    past the end of the text reports whether a string is still unterminated.
    """
    tracker = StringStateTracker(quote_chars)
    for i in range(min(index, len(text))):
        tracker.update(text, i)
    if index >= len(text):
        return tracker.in_string
    return tracker.in_string and not tracker.is_delimiter(text, index)


def find_string_end(text: str, start: int) -> int:
    """
    Find the closing quote for the string opened at start.

    Args:
        text: The text to search in
        start: Position of the opening quote

    Returns:
        Index of the closing quote, or -1 if the string is unterminated
    """
    if start >= len(text) or text[start] not in "\"'":
        return -1

    quote_char = text[start]
    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote_char:
            return i
        i += 1
    return -1


def classify_quotes(text: str) -> list[CharRole]:
    """Assign a CharRole to every index of text for double-quoted strings."""
    roles = []
    tracker = StringStateTracker('"')
    for i in range(len(text)):
        if tracker.is_delimiter(text, i):
            role = CharRole.CLOSE_QUOTE if tracker.in_string else CharRole.OPEN_QUOTE
        else:
            role = CharRole.CONTENT if tracker.in_string else CharRole.OUTSIDE
        tracker.update(text, i)
        roles.append(role)
    return roles
