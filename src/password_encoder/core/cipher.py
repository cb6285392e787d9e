"""Keyed letter-rotation cipher.

Every function in this module is a **pure** transformation — no I/O,
no shared state, fully deterministic.

Pipeline order (enforced by :func:`encode`):

1. **Schedule** — expand the key into its decimal digits.
2. **Validate** — reject the first character outside ``a``-``z``.
3. **Rotate** — shift each letter by the digit at its position,
   cycling through the digits.

Example with key ``312`` and message ``"hello"``::

    h +3 -> k
    e +1 -> f
    l +2 -> n
    l +3 -> o
    o +1 -> p

giving ``"kfnop"``.
"""

from __future__ import annotations

import logging

from password_encoder.core.models import RotationSchedule, RotationStep
from password_encoder.exceptions import InvalidCharacterError, InvalidKeyError

logger = logging.getLogger(__name__)

ALPHABET_SIZE: int = 26
_FIRST_LETTER: int = ord("a")
_LAST_LETTER: int = ord("z")


# ---------------------------------------------------------------------------
# 1. Schedule
# ---------------------------------------------------------------------------

def key_digits(key: int) -> tuple[int, ...]:
    """Return the decimal digits of *key*, most significant first.

    ``0`` yields ``(0,)``; no other key produces a leading zero.

    Raises
    ------
    InvalidKeyError
        If *key* is not an ``int`` or is negative.
    """
    # bool is an int subclass but never a meaningful key.
    if isinstance(key, bool) or not isinstance(key, int):
        raise InvalidKeyError(
            f"Key must be an integer, got {type(key).__name__}.",
        )
    if key < 0:
        raise InvalidKeyError(
            "Key must not be negative.",
            hint="Use a key of zero or more digits, e.g. 312.",
        )
    # Arithmetic expansion; str(key) is capped by the interpreter's
    # int/str conversion digit limit.
    digits: list[int] = []
    while True:
        key, digit = divmod(key, 10)
        digits.append(digit)
        if key == 0:
            break
    return tuple(reversed(digits))


def build_schedule(key: int) -> RotationSchedule:
    """Derive the rotation schedule for *key*."""
    schedule = RotationSchedule(digits=key_digits(key))
    logger.debug("Derived rotation schedule of %d digit(s)", len(schedule))
    return schedule


# ---------------------------------------------------------------------------
# 2. Validate
# ---------------------------------------------------------------------------

def _is_lowercase_letter(char: str) -> bool:
    return len(char) == 1 and _FIRST_LETTER <= ord(char) <= _LAST_LETTER


def _check_letter(char: str, position: int) -> None:
    if not _is_lowercase_letter(char):
        logger.debug("Rejected character at position %d", position)
        raise InvalidCharacterError(
            char,
            position,
            hint="Messages may only contain the letters a-z.",
        )


# ---------------------------------------------------------------------------
# 3. Rotate
# ---------------------------------------------------------------------------

def rotate(letter: str, rotation: int) -> str:
    """Shift *letter* forward by *rotation* places, wrapping ``z`` to ``a``.

    ``rotate("a", 2) == "c"`` and ``rotate("z", 1) == "a"``.
    """
    offset = ord(letter) - _FIRST_LETTER
    return chr(_FIRST_LETTER + (offset + rotation) % ALPHABET_SIZE)


# ---------------------------------------------------------------------------
# Public operations
# ---------------------------------------------------------------------------

def explain(key: int, message: str) -> tuple[RotationStep, ...]:
    """Encode *message* and return the breakdown of every position.

    Validation is identical to :func:`encode`: the whole call fails on
    the first invalid character and no partial breakdown is returned.
    """
    schedule = build_schedule(key)
    steps: list[RotationStep] = []
    for position, letter in enumerate(message):
        _check_letter(letter, position)
        rotation = schedule.rotation_at(position)
        steps.append(
            RotationStep(
                position=position,
                letter=letter,
                rotation=rotation,
                encoded=rotate(letter, rotation),
            )
        )
    return tuple(steps)


def encode(key: int, message: str) -> str:
    """Encode *message* with the rotation schedule derived from *key*.

    Parameters
    ----------
    key:
        Non-negative integer whose decimal digits form the schedule.
    message:
        Lowercase letters ``a``-``z``.  May be empty.

    Returns
    -------
    str
        The encoded message, same length as *message*.

    Raises
    ------
    InvalidKeyError
        If *key* is negative or not an integer.
    InvalidCharacterError
        On the first character of *message* outside ``a``-``z``.
    """
    return "".join(step.encoded for step in explain(key, message))
