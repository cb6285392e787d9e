"""Entry point for ``python -m password_encoder hello 312``.

Runs the same error boundary as the ``password-encoder`` script.
"""

from __future__ import annotations

from password_encoder.cli.app import cli

if __name__ == "__main__":
    cli()
