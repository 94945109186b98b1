"""Data normalization utilities for consistent data quality."""

import re
from typing import Optional


# local@domain.tld, no whitespace and a single @
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def normalize_text(value: Optional[str]) -> str:
    """Strip surrounding whitespace; None becomes an empty string."""
    if value is None:
        return ""
    return value.strip()


def normalize_email(email: Optional[str]) -> Optional[str]:
    """
    Normalize email to lowercase.

    Args:
        email: Raw email input

    Returns:
        Lowercased email or None if empty
    """
    if not email:
        return None
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def normalize_choice(value: str) -> str:
    """
    Canonical form for select values: lowercase, hyphens read as spaces.

    'Word-of-Mouth' and 'word of mouth' both become 'word of mouth'.
    """
    return " ".join(value.strip().lower().replace("-", " ").split())


def count_words(text: str) -> int:
    """Count whitespace-separated words, ignoring empty tokens."""
    return len(text.split())
