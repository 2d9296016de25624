"""
Mapping logic: turn password criteria into the character pools to draw from.
"""

from __future__ import annotations

from .config import (
    AMBIGUOUS,
    LOWERCASE,
    NUMBERS,
    SYMBOLS,
    UPPERCASE,
    PasswordCriteria,
)

CLASS_ALPHABETS: dict[str, str] = {
    "uppercase": UPPERCASE,
    "lowercase": LOWERCASE,
    "numbers": NUMBERS,
    "symbols": SYMBOLS,
}


def effective_pool(name: str, exclude_ambiguous: bool = False) -> str:
    """
    Return the characters eligible for one class.

    Ambiguous characters are removed by set difference, keeping the
    alphabet order. The symbols pool is never filtered.
    """
    try:
        alphabet = CLASS_ALPHABETS[name]
    except KeyError:
        raise ValueError(f"Unknown character class: {name!r}") from None

    if not exclude_ambiguous or name == "symbols":
        return alphabet
    return "".join(ch for ch in alphabet if ch not in AMBIGUOUS)


def class_pools(criteria: PasswordCriteria) -> list[tuple[str, str]]:
    """(class name, effective pool) for every enabled class, in fixed order."""
    return [
        (name, effective_pool(name, criteria.exclude_ambiguous))
        for name in criteria.enabled_classes
    ]


def combined_charset(criteria: PasswordCriteria) -> str:
    """Concatenate all enabled pools into the charset used for filling."""
    return "".join(pool for _name, pool in class_pools(criteria))
