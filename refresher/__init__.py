"""Post-install desktop cache refresher package.

Exposes the package version; the entry point lives in `refresher.refresh`.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("desktop-cache-refresh")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
