# colorlevel/tty.py
"""Interactive terminal detection for output streams."""

import io
import os
from typing import Any, Optional, Protocol


class TTYProbe(Protocol):
    """Callable that reports whether a stream is an interactive terminal."""

    def __call__(self, stream: Any) -> bool:
        ...


def descriptor_of(stream: Any) -> Optional[int]:
    """Return the numeric descriptor behind ``stream``, or None if it has none.

    Accepts plain integers as well as file-like objects with ``fileno()``.
    Closed streams and in-memory buffers (``io.StringIO``) have no descriptor.
    """
    if isinstance(stream, bool):
        return None
    if isinstance(stream, int):
        return stream
    fileno = getattr(stream, "fileno", None)
    if fileno is None:
        return None
    try:
        return fileno()
    except (io.UnsupportedOperation, OSError, ValueError):
        return None


def is_terminal(stream: Any) -> bool:
    """Check whether ``stream`` is connected to an interactive terminal."""
    fd = descriptor_of(stream)
    if fd is None:
        return False
    try:
        return os.isatty(fd)
    except (OSError, OverflowError):
        return False
