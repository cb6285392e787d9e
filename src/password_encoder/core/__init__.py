"""Core layer — the cipher engine and its value objects.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from password_encoder.core.cipher import build_schedule, encode, explain, key_digits, rotate
from password_encoder.core.models import RotationSchedule, RotationStep

__all__: list[str] = [
    "RotationSchedule",
    "RotationStep",
    "build_schedule",
    "encode",
    "explain",
    "key_digits",
    "rotate",
]
