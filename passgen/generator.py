"""
Password generator: criteria in, randomized password out.
"""

from __future__ import annotations

from .config import PasswordCriteria
from .entropy import DEFAULT_SOURCE, RandomSource
from .mapping import class_pools


class PasswordGenerationError(ValueError):
    """Criteria cannot produce a password. Adjust them and retry."""


class NoCharacterClassSelected(PasswordGenerationError):
    """No character class is enabled, or every enabled pool is empty."""


class LengthTooShortForCriteria(PasswordGenerationError):
    """Fewer positions than required characters (one per enabled class)."""


def _pick(pool: str, source: RandomSource) -> str:
    return pool[source.randbelow(len(pool))]


def generate_password(
    criteria: PasswordCriteria,
    source: RandomSource | None = None,
) -> str:
    """
    Generate one password satisfying `criteria`.

    Steps:
    - Build the effective pool of every enabled class and join them into
      one charset, in class order.
    - Draw one required character from each non-empty pool so that every
      requested class appears at least once.
    - Fill the remaining positions from the whole charset.
    - Fisher-Yates shuffle everything so the required characters do not
      sit at predictable positions.

    Raises NoCharacterClassSelected or LengthTooShortForCriteria.
    """
    rng = source or DEFAULT_SOURCE

    charset = ""
    required: list[str] = []
    for _name, pool in class_pools(criteria):
        charset += pool
        if pool:
            required.append(_pick(pool, rng))

    if not charset:
        raise NoCharacterClassSelected("At least one character type must be selected")

    if len(required) > criteria.length:
        raise LengthTooShortForCriteria(
            "Password length is too short for selected criteria"
        )

    chars = list(required)
    for _ in range(criteria.length - len(required)):
        chars.append(_pick(charset, rng))

    for i in range(len(chars) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        chars[i], chars[j] = chars[j], chars[i]

    return "".join(chars)
