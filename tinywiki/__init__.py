"""TinyWiki — a minimal file-backed wiki."""
from tinywiki._version import __version__

__all__ = ["__version__"]
