"""Error type and error reporting for the raycaster."""

from __future__ import annotations

import sys

_DEFAULT_MESSAGE = "Error"


class CubError(Exception):
    """Raised when a scene file, map or resource cannot be used."""


def report_error(message: str | None) -> str:
    """Write ``message`` (or a generic ``Error``) on its own line to stderr.

    Returns the text that was written, without the trailing newline.
    """
    text = message if message else _DEFAULT_MESSAGE
    print(text, file=sys.stderr)
    return text