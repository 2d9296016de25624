"""
Command-line interface and high-level generator functions.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from .config import DEFAULT_CRITERIA, MAX_LENGTH, MIN_LENGTH, PasswordCriteria
from .entropy import DEFAULT_SOURCE, RandomSource
from .generator import PasswordGenerationError, generate_password
from .mapping import combined_charset
from .strength import PasswordStrength, estimate_strength


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    password: str
    strength: PasswordStrength
    criteria: PasswordCriteria

    # Size of the charset actually drawn from (exact, after filtering).
    charset_size: int

    # Class name of the random source used.
    source: str


def generate_password_with_meta(
    criteria: PasswordCriteria | None = None,
    source: RandomSource | None = None,
) -> GenerationMeta:
    """
    Generate a password and score it against the same criteria.
    """
    crit = criteria or DEFAULT_CRITERIA
    rng = source or DEFAULT_SOURCE

    password = generate_password(crit, rng)

    return GenerationMeta(
        password=password,
        strength=estimate_strength(password, crit),
        criteria=crit,
        charset_size=len(combined_charset(crit)),
        source=type(rng).__name__,
    )


def _length(value: str) -> int:
    try:
        length = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid length: {value!r}") from None
    if not DEFAULT_CRITERIA.replace(length=length).in_length_range:
        raise argparse.ArgumentTypeError(
            f"length must be between {MIN_LENGTH} and {MAX_LENGTH}"
        )
    return length


def _count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from None
    if count < 1:
        raise argparse.ArgumentTypeError("count must be at least 1")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate secure random passwords and score their strength.",
    )
    parser.add_argument(
        "-l", "--length", type=_length, default=DEFAULT_CRITERIA.length,
        help=f"password length ({MIN_LENGTH}-{MAX_LENGTH}, default %(default)s)",
    )
    parser.add_argument("--no-uppercase", action="store_true", help="omit A-Z")
    parser.add_argument("--no-lowercase", action="store_true", help="omit a-z")
    parser.add_argument("--no-numbers", action="store_true", help="omit 0-9")
    parser.add_argument("--no-symbols", action="store_true", help="omit symbols")
    parser.add_argument(
        "--exclude-ambiguous", action="store_true",
        help="leave out look-alike characters (i l 1 L o 0 O)",
    )
    parser.add_argument(
        "-n", "--count", type=_count, default=1,
        help="number of passwords to generate (default %(default)s)",
    )
    parser.add_argument(
        "--quantum", action="store_true",
        help="mix quantum circuit samples into the random source",
    )
    return parser


def criteria_from_args(args: argparse.Namespace) -> PasswordCriteria:
    return PasswordCriteria(
        length=args.length,
        include_uppercase=not args.no_uppercase,
        include_lowercase=not args.no_lowercase,
        include_numbers=not args.no_numbers,
        include_symbols=not args.no_symbols,
        exclude_ambiguous=args.exclude_ambiguous,
    )


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `passgen` script, `python -m passgen.cli`
    and `run_passgen.py`.
    """
    args = build_parser().parse_args(argv)
    criteria = criteria_from_args(args)

    if not criteria.has_character_class:
        print("error: Please select at least one character type", file=sys.stderr)
        return 1

    source: RandomSource = DEFAULT_SOURCE
    if args.quantum:
        from .quantum_engine import QuantumMixedSource

        source = QuantumMixedSource()

    print("\n[Secure Password Generator]")
    for _ in range(args.count):
        try:
            meta = generate_password_with_meta(criteria, source)
        except PasswordGenerationError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

        strength = meta.strength
        print(f"Generated password: {meta.password}")
        print(
            f"Strength: {strength.label} "
            f"({strength.percentage:.0f}%, {strength.entropy_bits:.1f} bits)\n"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
