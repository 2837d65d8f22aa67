"""String manipulation problems."""

from __future__ import annotations


def reverse_words(text: str) -> str:
    """Reverse the characters of every space-separated word, keeping the
    words in order and the spacing as it was."""
    return " ".join(word[::-1] for word in text.split(" "))