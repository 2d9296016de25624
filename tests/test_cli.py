"""Tests for the pipeline helpers and the command-line front end."""

from __future__ import annotations

import pytest

from passgen.cli import build_parser, criteria_from_args, generate_password_with_meta, main
from passgen.config import DEFAULT_CRITERIA, PasswordCriteria
from passgen.generator import NoCharacterClassSelected


class TestGenerateWithMeta:
    def test_defaults(self):
        meta = generate_password_with_meta()
        assert len(meta.password) == 16
        assert meta.criteria == DEFAULT_CRITERIA
        assert meta.charset_size == 88
        assert meta.source == "SecureRandomSource"
        assert meta.strength.label == "Strong"

    def test_custom_source_and_criteria(self, seeded_source):
        criteria = PasswordCriteria(length=10, include_symbols=False, exclude_ambiguous=True)
        meta = generate_password_with_meta(criteria, seeded_source)
        assert len(meta.password) == 10
        assert meta.charset_size == 24 + 23 + 8
        assert meta.source == "SeededSource"
        # 10 * log2(24 + 24 + 8)
        assert meta.strength.label == "Fair"

    def test_propagates_errors(self, no_classes):
        with pytest.raises(NoCharacterClassSelected):
            generate_password_with_meta(no_classes)


class TestParser:
    def test_defaults_match_default_criteria(self):
        args = build_parser().parse_args([])
        assert criteria_from_args(args) == DEFAULT_CRITERIA
        assert args.count == 1
        assert not args.quantum

    def test_flags(self):
        args = build_parser().parse_args(
            ["-l", "30", "--no-symbols", "--no-uppercase", "--exclude-ambiguous"]
        )
        assert criteria_from_args(args) == PasswordCriteria(
            length=30,
            include_uppercase=False,
            include_symbols=False,
            exclude_ambiguous=True,
        )

    @pytest.mark.parametrize("value", ["3", "65", "abc"])
    def test_rejects_bad_length(self, value, capsys):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--length", value])
        assert excinfo.value.code == 2

    def test_rejects_zero_count(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-n", "0"])


class TestMain:
    def test_prints_passwords(self, capsys):
        assert main(["-l", "12", "-n", "3"]) == 0
        out = capsys.readouterr().out
        lines = [ln for ln in out.splitlines() if ln.startswith("Generated password: ")]
        assert len(lines) == 3
        for line in lines:
            assert len(line[len("Generated password: "):]) == 12
        assert out.count("Strength: ") == 3

    def test_no_class_selected(self, capsys):
        code = main(["--no-uppercase", "--no-lowercase", "--no-numbers", "--no-symbols"])
        assert code == 1
        err = capsys.readouterr().err
        assert "error: Please select at least one character type" in err
