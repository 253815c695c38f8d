"""Process-wide unique name generator."""

import itertools
from threading import Lock

_counter = itertools.count(1)
_lock = Lock()


def make_uid(prefix: str = "") -> str:
    """Return ``prefix`` followed by a number never handed out before in this process."""
    with _lock:
        n = next(_counter)
    return f"{prefix}{n}"
