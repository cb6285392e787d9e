"""Interactive collection of the message and key.

Used by ``password-encoder --interactive`` so that the message never
appears in shell history.  The message is read with hidden input; the
key is validated as a non-negative integer before it is accepted.
"""

from __future__ import annotations

from typing import Any

from password_encoder.exceptions import EnvironmentError, UsageError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def validate_key_text(text: str) -> bool | str:
    """questionary validator: ``True`` or the message shown under the prompt."""
    stripped = text.strip()
    if not stripped.isdecimal() or not stripped.isascii():
        return "The key must be a whole number, e.g. 312."
    return True


def prompt_message_and_key() -> tuple[str, str]:
    """Ask for the message and key and return both as raw text.

    Returns
    -------
    tuple[str, str]
        ``(message, key_text)``.  The key text is parsed by the caller.

    Raises
    ------
    UsageError
        If the user cancels either prompt (Esc / Ctrl+C returns ``None``).
    """
    questionary = _import_questionary()

    message: str | None = questionary.password(
        "Message (lowercase letters):",
    ).ask()
    if message is None:
        raise UsageError("No message entered.")

    key_text: str | None = questionary.text(
        "Key (whole number):",
        validate=validate_key_text,
    ).ask()
    if key_text is None:
        raise UsageError("No key entered.")

    return message, key_text.strip()
