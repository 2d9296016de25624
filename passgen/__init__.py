"""
Secure Password Generator package.
"""

from .config import PasswordCriteria, DEFAULT_CRITERIA, MIN_LENGTH, MAX_LENGTH
from .entropy import RandomSource, SecureRandomSource
from .generator import (
    PasswordGenerationError,
    NoCharacterClassSelected,
    LengthTooShortForCriteria,
    generate_password,
)
from .strength import PasswordStrength, estimate_strength
from .cli import GenerationMeta, generate_password_with_meta

__all__ = [
    "PasswordCriteria",
    "DEFAULT_CRITERIA",
    "MIN_LENGTH",
    "MAX_LENGTH",
    "RandomSource",
    "SecureRandomSource",
    "PasswordGenerationError",
    "NoCharacterClassSelected",
    "LengthTooShortForCriteria",
    "generate_password",
    "PasswordStrength",
    "estimate_strength",
    "GenerationMeta",
    "generate_password_with_meta",
]
