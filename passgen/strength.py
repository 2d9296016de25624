"""
Strength estimation for generated passwords.

The estimate trusts the criteria that produced the password: the alphabet
size is derived from the enabled classes, not from scanning the password.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import PasswordCriteria

# (lower entropy bound, score, label, color), highest tier first.
STRENGTH_TIERS = (
    (80.0, 4, "Strong", "strength-meter-strong"),
    (60.0, 3, "Good", "strength-meter-good"),
    (40.0, 2, "Fair", "strength-meter-fair"),
    (float("-inf"), 1, "Weak", "strength-meter-weak"),
)


@dataclass(frozen=True)
class PasswordStrength:
    score: int
    label: str
    color: str
    percentage: float
    entropy_bits: float


def assumed_alphabet_size(criteria: PasswordCriteria) -> int:
    """
    Alphabet size implied by the criteria.

    The ambiguous-excluded sizes are rounded figures (24 / 24 / 8) rather
    than the exact pool sizes; scores depend on them, so keep them.
    """
    size = 0
    if criteria.include_uppercase:
        size += 24 if criteria.exclude_ambiguous else 26
    if criteria.include_lowercase:
        size += 24 if criteria.exclude_ambiguous else 26
    if criteria.include_numbers:
        size += 8 if criteria.exclude_ambiguous else 10
    if criteria.include_symbols:
        size += 24
    return size


def entropy_bits(password: str, criteria: PasswordCriteria) -> float:
    """H = len(password) * log2(alphabet size)."""
    return len(password) * math.log2(assumed_alphabet_size(criteria))


def estimate_strength(password: str, criteria: PasswordCriteria) -> PasswordStrength:
    """
    Score `password` on a 1-4 scale from its estimated entropy.

    Callers only score passwords they generated with `criteria`, so an
    empty password or a criteria without any class is never passed in.
    """
    bits = entropy_bits(password, criteria)

    for bound, score, label, color in STRENGTH_TIERS:
        if bits >= bound:
            break

    return PasswordStrength(
        score=score,
        label=label,
        color=color,
        percentage=min(100.0, bits),
        entropy_bits=bits,
    )
