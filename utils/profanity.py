"""Profanity filter applied to chirp bodies before they are stored."""
from __future__ import annotations

from typing import AbstractSet

MASK = "****"
BANNED_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})


def clean_body(body: str, banned_words: AbstractSet[str] = BANNED_WORDS) -> str:
    """
    Replace every whitespace-separated word that matches a banned word
    (case-insensitively) with MASK. Runs of whitespace collapse to one space.
    Words with punctuation attached ("sharbert!") are left alone.
    """
    words = body.split()
    return " ".join(MASK if word.lower() in banned_words else word for word in words)
