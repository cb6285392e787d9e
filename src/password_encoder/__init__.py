"""password-encoder — keyed letter-rotation cipher for reproducible passwords.

A message of lowercase letters is shifted letter by letter using the
decimal digits of an integer key as a repeating rotation schedule.
"""

from password_encoder.core.cipher import encode
from password_encoder.version import __version__

__all__: list[str] = ["__version__", "encode"]
