"""Domain models for password-encoder.

All models are **frozen** dataclasses — immutable value objects with no
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Rotation schedule
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RotationSchedule:
    """Repeating sequence of rotation amounts derived from a key.

    The digits are the key's decimal expansion, most significant first.
    Message position ``i`` is rotated by ``digits[i % len(digits)]``.
    """

    digits: tuple[int, ...]
    """Decimal digits of the key, each in ``[0, 9]``.  Never empty."""

    def __post_init__(self) -> None:
        if not self.digits:
            raise ValueError("A rotation schedule needs at least one digit.")
        if any(not 0 <= digit <= 9 for digit in self.digits):
            raise ValueError(f"Rotation digits must be in [0, 9]: {self.digits}")

    def __len__(self) -> int:
        return len(self.digits)

    def rotation_at(self, position: int) -> int:
        """Return the rotation applied to message *position*."""
        return self.digits[position % len(self.digits)]


# ---------------------------------------------------------------------------
# Per-letter breakdown
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RotationStep:
    """One encoded position: ``letter`` shifted by ``rotation`` gives ``encoded``."""

    position: int
    """Zero-based index in the message."""

    letter: str
    """Original lowercase letter."""

    rotation: int
    """Rotation amount taken from the schedule."""

    encoded: str
    """Resulting lowercase letter."""
