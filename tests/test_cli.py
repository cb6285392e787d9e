"""Tests for the command-line entry point (cli/app.py).

Coverage:
* Encoding from positional arguments, result on stdout only.
* Key parsing and the errors raised for bad input.
* ``--interactive`` and ``--explain`` wiring.
* The ``cli()`` error boundary and its exit codes.
"""

from __future__ import annotations

import logging
import sys
from unittest.mock import patch

import pytest

from password_encoder.cli import exit_codes
from password_encoder.cli.app import cli, main, parse_key
from password_encoder.exceptions import (
    InvalidCharacterError,
    InvalidKeyError,
    UsageError,
)


# ---------------------------------------------------------------------------
# parse_key
# ---------------------------------------------------------------------------

class TestParseKey:
    def test_plain_integer(self) -> None:
        assert parse_key("312") == 312

    def test_surrounding_whitespace(self) -> None:
        assert parse_key(" 42 ") == 42

    def test_negative_text_parses(self) -> None:
        """Sign checks belong to the cipher engine."""
        assert parse_key("-5") == -5

    def test_explicit_plus_sign(self) -> None:
        assert parse_key("+7") == 7

    def test_key_longer_than_int_str_limit(self) -> None:
        assert parse_key("1" + "0" * 5000) == 10 ** 5000

    def test_long_key_digits_in_order(self) -> None:
        text = "9" + "0" * 2500 + "31"
        assert parse_key(text) == 9 * 10 ** 2502 + 31

    @pytest.mark.parametrize("text", ["abc", "", "3.5", "0x10", "1_000", "--5", "12 34"])
    def test_not_an_integer(self, text: str) -> None:
        with pytest.raises(InvalidKeyError, match="was not an integer") as exc_info:
            parse_key(text)
        assert exc_info.value.hint is not None
        assert "password-encoder <message> <key>" in exc_info.value.hint


# ---------------------------------------------------------------------------
# main — encoding
# ---------------------------------------------------------------------------

class TestMainEncode:
    def test_prints_result_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["hello", "312"])
        captured = capsys.readouterr()
        assert code == exit_codes.SUCCESS
        assert captured.out == "kfnop\n"

    def test_password_example(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["password", "1234"])
        assert capsys.readouterr().out == "qcvwxquh\n"

    def test_empty_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["", "7"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "\n"

    def test_invalid_character_propagates(self) -> None:
        with pytest.raises(InvalidCharacterError):
            main(["PASSWORD", "1234"])

    def test_invalid_key_text(self) -> None:
        with pytest.raises(InvalidKeyError, match="was not an integer"):
            main(["hello", "abc"])

    def test_negative_key(self) -> None:
        with pytest.raises(InvalidKeyError, match="negative"):
            main(["hello", "-5"])

    def test_message_without_key_is_an_error_not_a_usage_printout(self) -> None:
        """Only a bare invocation prints help; a lone message is rejected."""
        with pytest.raises(UsageError, match="required") as exc_info:
            main(["hello"])
        assert exc_info.value.hint == "Usage: password-encoder <message> <key>"

    def test_key_longer_than_int_str_limit(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["ab", "1" + "0" * 5000])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "bb\n"

    def test_nothing_printed_on_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(InvalidCharacterError):
            main(["ab!", "1"])
        assert capsys.readouterr().out == ""


class TestMainOptions:
    def test_interactive_uses_prompt(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "password_encoder.cli.input_prompt.prompt_message_and_key",
            return_value=("hello", "312"),
        ) as mock_prompt:
            code = main(["--interactive"])
        assert code == exit_codes.SUCCESS
        mock_prompt.assert_called_once_with()
        assert capsys.readouterr().out == "kfnop\n"

    def test_interactive_ignores_positionals(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch(
            "password_encoder.cli.input_prompt.prompt_message_and_key",
            return_value=("pa", "1111"),
        ):
            main(["-i", "hello", "312"])
        assert capsys.readouterr().out == "qb\n"

    def test_explain_renders_breakdown(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("password_encoder.cli.breakdown.display_breakdown") as mock_display:
            code = main(["--explain", "hello", "312"])
        assert code == exit_codes.SUCCESS
        steps = mock_display.call_args.args[0]
        assert [step.rotation for step in steps] == [3, 1, 2, 3, 1]
        assert capsys.readouterr().out == "kfnop\n"

    def test_verbose_enables_debug_logging(self) -> None:
        main(["-v", "hello", "312"])
        assert logging.getLogger().level == logging.DEBUG

    def test_default_logging_is_warning(self) -> None:
        main(["hello", "312"])
        assert logging.getLogger().level == logging.WARNING

    def test_debug_log_never_contains_message(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["-v", "secretword", "312"])
        captured = capsys.readouterr()
        assert "secretword" not in captured.err
        assert "Derived rotation schedule" in captured.err


# ---------------------------------------------------------------------------
# cli — error boundary
# ---------------------------------------------------------------------------

def _run_cli(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["password-encoder", *args])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    return exc_info.value.code  # type: ignore[return-value]


class TestErrorBoundary:
    def test_success_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run_cli(monkeypatch, "hello", "312") == exit_codes.SUCCESS
        assert capsys.readouterr().out == "kfnop\n"

    def test_invalid_character_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "p!", "1111")
        captured = capsys.readouterr()
        assert code == exit_codes.GENERAL_ERROR
        assert "is not a lowercase letter" in captured.err
        assert captured.out == ""

    def test_bracket_in_message_is_shown_literally(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "[", "1")
        assert code == exit_codes.GENERAL_ERROR
        assert "'['" in capsys.readouterr().err

    def test_message_without_key_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run_cli(monkeypatch, "hello") == exit_codes.GENERAL_ERROR
        assert "required" in capsys.readouterr().err

    def test_bad_key_shows_hint(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "hello", "abc")
        captured = capsys.readouterr()
        assert code == exit_codes.GENERAL_ERROR
        assert "was not an integer" in captured.err
        assert "Hint:" in captured.err

    def test_keyboard_interrupt(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _interrupt(argv: list[str] | None = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr("password_encoder.cli.app.main", _interrupt)
        assert _run_cli(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT
        assert "Aborted" in capsys.readouterr().err

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _boom(argv: list[str] | None = None) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr("password_encoder.cli.app.main", _boom)
        assert _run_cli(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError" in capsys.readouterr().err
