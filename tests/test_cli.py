"""Tests for the high-level pipeline and the command-line entry point."""

from __future__ import annotations

import base64
import math

import pytest

from conftest import FailingSource, FixedSource
from gvpass import entropy
from gvpass.cli import (
    generate,
    generate_key_with_meta,
    generate_password_with_meta,
    main,
)
from gvpass.config import GenerationOptions
from gvpass.strength import KEY_RESULT, StrengthResult


class TestGenerate:
    def test_password_mode_defaults(self):
        value, strength = generate()
        assert len(value) == 16
        assert strength == StrengthResult(4, "Secure")

    def test_base64_mode(self):
        value, strength = generate("base64")
        assert len(base64.b64decode(value, validate=True)) == 32
        assert strength == KEY_RESULT
        assert strength.label == "Secure Key"

    def test_base64_mode_ignores_password_options(self, all_off):
        value, _ = generate("base64", all_off)
        assert len(value) == 44

    def test_empty_charset(self, all_off):
        assert generate("password", all_off) == ("", StrengthResult(0, "Empty"))

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown mode"):
            generate("hex")


class TestMeta:
    def test_password_meta(self, all_on):
        meta = generate_password_with_meta(all_on, source=FixedSource(b"\x00"))
        assert meta.value == "A" * 16
        assert meta.mode == "password"
        assert meta.charset_size == 88
        assert meta.entropy_bits == pytest.approx(16 * math.log2(88))
        assert meta.options is all_on

    def test_key_meta(self):
        meta = generate_key_with_meta(16, url_friendly=True)
        assert meta.mode == "base64"
        assert meta.entropy_bits == 128.0
        assert "=" not in meta.value


class TestMain:
    def test_password_output(self, capsys):
        assert main(["--length", "20", "--no-symbols"]) == 0
        out = capsys.readouterr().out.splitlines()
        password = out[2]
        assert len(password) == 20
        assert password.isalnum()
        assert "Strength: Strong" in out[3]

    def test_key_output(self, capsys):
        assert main(["--mode", "base64", "--url-safe", "-n", "3"]) == 0
        lines = capsys.readouterr().out.splitlines()
        keys = [line for line in lines[2:] if not line.startswith("  ")]
        assert len(keys) == 3
        for key in keys:
            assert not set(key) & {"+", "/", "="}

    def test_invalid_length_exit_code(self, capsys):
        assert main(["--length", "-5"]) == 2
        assert "outside" in capsys.readouterr().err

    def test_invalid_count(self):
        with pytest.raises(SystemExit):
            main(["--count", "0"])

    def test_entropy_failure_exit_code(self, monkeypatch, capsys):
        monkeypatch.setattr(entropy, "SYSTEM_SOURCE", FailingSource())
        assert main([]) == 1
        assert "Secure random source failed" in capsys.readouterr().err
