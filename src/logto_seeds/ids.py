"""Utilities for generating the platform's standard random identifiers."""

from __future__ import annotations

import secrets
from typing import Callable

__all__ = [
    "STANDARD_ALPHABET",
    "STANDARD_ID_SIZE",
    "generate_standard_id",
    "is_standard_id",
]


# Lowercase alphanumerics only; identifiers must stay URL-safe.
STANDARD_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
STANDARD_ID_SIZE = 21
_BASE = len(STANDARD_ALPHABET)
_ALPHABET_SET = frozenset(STANDARD_ALPHABET)


def generate_standard_id(
    size: int = STANDARD_ID_SIZE,
    *,
    random_source: Callable[[int], int] | None = None,
) -> str:
    """Generate a new random identifier of ``size`` characters.

    ``random_source`` receives the alphabet length and must return an index
    below it; it defaults to :func:`secrets.randbelow`.
    """

    if size < 1:
        raise ValueError("standard ids require at least one character")
    pick = random_source or secrets.randbelow
    return "".join(STANDARD_ALPHABET[pick(_BASE)] for _ in range(size))


def is_standard_id(value: str, size: int = STANDARD_ID_SIZE) -> bool:
    return len(value) == size and all(char in _ALPHABET_SET for char in value)
