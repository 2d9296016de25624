"""
Configuration for the Secure Password Generator.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


# Character alphabets, in the fixed class order used for generation.
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Visually confusable characters, dropped from the alphanumeric pools
# when `exclude_ambiguous` is set. Never applied to SYMBOLS.
AMBIGUOUS = "il1Lo0O"

MIN_LENGTH = 4
MAX_LENGTH = 64


@dataclass(frozen=True)
class PasswordCriteria:
    # Desired password length in characters (MIN_LENGTH..MAX_LENGTH).
    length: int = 16

    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    # Remove AMBIGUOUS from uppercase / lowercase / number pools.
    exclude_ambiguous: bool = False

    @property
    def enabled_classes(self) -> list[str]:
        """Names of the enabled character classes, in generation order."""
        flags = (
            ("uppercase", self.include_uppercase),
            ("lowercase", self.include_lowercase),
            ("numbers", self.include_numbers),
            ("symbols", self.include_symbols),
        )
        return [name for name, enabled in flags if enabled]

    @property
    def has_character_class(self) -> bool:
        return bool(self.enabled_classes)

    @property
    def in_length_range(self) -> bool:
        return MIN_LENGTH <= self.length <= MAX_LENGTH

    def replace(self, **changes) -> "PasswordCriteria":
        return replace(self, **changes)


@dataclass(frozen=True)
class QuantumSourceConfig:
    # Number of qubits to prepare in superposition per circuit run.
    # Each qubit gives one raw bit.
    # NOTE: Keep this <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20

    # Independent circuit runs XOR-combined into one block.
    quantum_streams: int = 2

    # Rounds of SHA-256 mixing applied to each block.
    entropy_rounds: int = 2


# Default instances you can import elsewhere
DEFAULT_CRITERIA = PasswordCriteria()
DEFAULT_QUANTUM_CONFIG = QuantumSourceConfig()
