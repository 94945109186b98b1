"""Utility modules."""

from criticus.utils.normalization import (
    count_words,
    is_valid_email,
    normalize_choice,
    normalize_email,
    normalize_text,
)

__all__ = [
    "count_words",
    "is_valid_email",
    "normalize_choice",
    "normalize_email",
    "normalize_text",
]
