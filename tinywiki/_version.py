"""Installed distribution version; source checkouts report 0.0.0+source."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("tinywiki")
except PackageNotFoundError:
    __version__ = "0.0.0+source"
