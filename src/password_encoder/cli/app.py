"""CLI application entry point and command routing for password-encoder.

This module is the **sole error boundary** for the entire application.
It catches :class:`~password_encoder.exceptions.PasswordEncoderError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No cipher logic lives here — all work is delegated to ``core``.
* Only the encoded result is written to stdout; help aside, everything
  else goes to stderr so the output can be piped.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys

from password_encoder.cli import exit_codes
from password_encoder.cli.console import console, escape
from password_encoder.exceptions import InvalidKeyError, PasswordEncoderError, UsageError
from password_encoder.utils.log import configure_logging
from password_encoder.version import __version__

logger = logging.getLogger(__name__)

USAGE_LINE: str = "Usage: password-encoder <message> <key>"

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
_PARSE_CHUNK_DIGITS: int = 1000


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``password-encoder <message> <key>``  — encode and print the result
    * ``password-encoder --interactive``    — prompt for message and key
    * ``password-encoder --version``
    """
    parser = argparse.ArgumentParser(
        prog="password-encoder",
        description=(
            "Encode a message (string of lowercase letters) using a key "
            "(integer)."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Prompt for the message (hidden input) and the key.",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show how each letter was shifted.",
    )
    parser.add_argument(
        "message",
        nargs="?",
        default=None,
        help="Lowercase letters to encode, e.g. hello.",
    )
    parser.add_argument(
        "key",
        nargs="?",
        default=None,
        help="Non-negative integer whose digits drive the rotation, e.g. 312.",
    )
    return parser


# ---------------------------------------------------------------------------
# Input handling
# ---------------------------------------------------------------------------

def parse_key(text: str) -> int:
    """Parse the textual key into an ``int``.

    Accepts base-10 digits with an optional sign and surrounding
    whitespace.  Sign validation is left to the cipher engine, which
    rejects negative keys with the same :class:`InvalidKeyError`.
    """
    stripped = text.strip()
    if not _INTEGER_TEXT.fullmatch(stripped):
        raise InvalidKeyError(
            f"Your <key> was not an integer: {text!r}",
            hint=USAGE_LINE,
        )

    sign = -1 if stripped.startswith("-") else 1
    digits = stripped.lstrip("+-")
    # Converted in chunks: int() refuses strings over the interpreter's
    # int/str conversion digit limit.
    value = 0
    for start in range(0, len(digits), _PARSE_CHUNK_DIGITS):
        chunk = digits[start:start + _PARSE_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return sign * value


def _collect_inputs(args: argparse.Namespace) -> tuple[str, str]:
    """Return ``(message, key_text)`` from the command line or prompts.

    A message without a key raises :class:`UsageError` (exit 1) instead
    of printing usage; only a bare invocation prints help and exits 0.
    """
    if args.interactive:
        from password_encoder.cli.input_prompt import prompt_message_and_key

        return prompt_message_and_key()

    if args.message is None or args.key is None:
        raise UsageError(
            "Both <message> and <key> are required.",
            hint=USAGE_LINE,
        )
    return args.message, args.key


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_encode(message: str, key: int, *, explain: bool) -> int:
    """Encode *message* and print the result to stdout."""
    from password_encoder.core import cipher

    if explain:
        from password_encoder.cli.breakdown import display_breakdown

        steps = cipher.explain(key, message)
        display_breakdown(steps)
        encoded = "".join(step.encoded for step in steps)
    else:
        encoded = cipher.encode(key, message)

    logger.debug("Encoded %d character(s)", len(encoded))
    print(encoded)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the password-encoder CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.interactive and args.message is None and args.key is None:
        parser.print_help()
        return exit_codes.SUCCESS

    message, key_text = _collect_inputs(args)
    key = parse_key(key_text)
    return _handle_encode(message, key, explain=args.explain)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PasswordEncoderError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
