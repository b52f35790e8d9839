from __future__ import annotations

import os
from typing import Optional

__all__ = [
    "DEFAULT_PREFIX",
    "resolve_prefix",
    "join_prefix",
]

DEFAULT_PREFIX = "/usr"


def resolve_prefix(install_prefix: Optional[str]) -> str:
    """Return the installation root to refresh caches under.

    Rules:
    - A non-empty `install_prefix` is used verbatim (whitespace-only counts as non-empty).
    - None or "" falls back to DEFAULT_PREFIX.
    """
    if install_prefix:
        return install_prefix
    return DEFAULT_PREFIX


def join_prefix(prefix: str, relative: tuple[str, ...]) -> str:
    """Join a prefix with a relative path given as components."""
    return os.path.join(prefix, *relative)
