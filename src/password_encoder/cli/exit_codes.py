"""Process exit codes returned by ``password-encoder``.

Scripts that pipe the encoded password onward can rely on these
values: anything non-zero means nothing was written to stdout.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Encoded result printed to stdout, or help shown for a bare invocation."""

GENERAL_ERROR: int = 1
"""Input rejected: a non a-z character in the message, a negative or
non-integer key, a missing argument, or a cancelled prompt."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C, typically during the interactive prompts (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""A bug: an exception other than PasswordEncoderError reached ``cli()``."""
