"""Custom exception hierarchy for password-encoder.

All exceptions that cross layer boundaries must inherit from
:class:`PasswordEncoderError`.  The CLI error boundary renders these as
clean one-line messages; anything else is treated as a bug.

Hierarchy
---------
PasswordEncoderError
├── InvalidCharacterError
├── InvalidKeyError
├── UsageError
└── EnvironmentError
"""

from __future__ import annotations


class PasswordEncoderError(Exception):
    """Base exception for all password-encoder errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Cipher input validation -----------------------------------------------

class InvalidCharacterError(PasswordEncoderError):
    """Raised when a message contains a character outside ``a``-``z``."""

    def __init__(
        self,
        character: str,
        position: int,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"{character!r} is not a lowercase letter (position {position})",
            hint=hint,
        )
        self.character: str = character
        """The offending character."""

        self.position: int = position
        """Zero-based index of the offending character in the message."""


class InvalidKeyError(PasswordEncoderError):
    """Raised when a key is negative or not an integer."""


# --- Command line ----------------------------------------------------------

class UsageError(PasswordEncoderError):
    """Raised when the command line is incomplete or a prompt is cancelled."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(PasswordEncoderError):
    """Raised when an optional runtime dependency is not available."""
