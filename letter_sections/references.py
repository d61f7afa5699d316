"""Extraction of marginal reference words from index pages."""

from __future__ import annotations

import html
from typing import Iterable, List

import regex

from .models import ReferenceEntry, Word

__all__ = ["clean_word", "is_reference_token", "extract_references"]

# Quotes and punctuation OCR tends to glue onto headwords.
TRIM_CHARS = ' "“.\':„'

# Optional leading hyphen, a letter, an optional hyphen or dot, one or more
# letters, an optional trailing slash or exclamation mark.
_LETTER = r"\p{L}"
REFERENCE_PATTERN = regex.compile(rf"-?{_LETTER}[-.]?{_LETTER}+[/!]?")


def clean_word(content: str) -> str:
    return html.unescape(content).strip(TRIM_CHARS)


def is_reference_token(token: str) -> bool:
    return REFERENCE_PATTERN.fullmatch(token) is not None


def extract_references(words: Iterable[Word], page_index: int) -> ReferenceEntry:
    """Collect headword-like tokens, keeping only the first and last survivors."""
    tokens: List[str] = []
    for word in words:
        candidate = clean_word(word.content)
        if is_reference_token(candidate):
            tokens.append(candidate)

    if len(tokens) > 2:
        tokens = [tokens[0], tokens[-1]]

    return ReferenceEntry(words=tokens, page_index=page_index)
