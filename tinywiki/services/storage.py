#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page storage — one ``<title>.txt`` file per page under the data directory.

Files hold the raw body bytes verbatim, with no header or metadata.  There
is no locking: two saves to the same title race and the last write wins.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import os
from pathlib import Path

import aiofiles
from fastapi import Request

from tinywiki.schemas import Page, PageState


# -----------------------------------------------------------------------------

log = logging.getLogger(__name__)

PAGE_SUFFIX = ".txt"
FILE_MODE = 0o600


# -----------------------------------------------------------------------------

class StorageError(Exception):
    """A page could not be read or written."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title


class PageNotFound(StorageError):
    """No file exists for the page yet."""

    def __init__(self, title: str) -> None:
        super().__init__(title, f"Page '{title}' not found")


class MalformedPage(StorageError):
    """The stored bytes are not valid text."""


# -----------------------------------------------------------------------------

class PageStore:

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"PageStore({str(self.root)!r})"

    def path_for(self, title: str) -> Path:
        return self.root / f"{title}{PAGE_SUFFIX}"

    # ── Read ──────────────────────────────────────────────────────────────

    async def load(self, title: str) -> Page:
        path = self.path_for(title)
        try:
            async with aiofiles.open(path, "rb") as f:
                body = await f.read()
        except FileNotFoundError:
            raise PageNotFound(title) from None
        except OSError as e:
            log.error("Could not read %s: %s", path, e)
            raise StorageError(title, f"Could not read page '{title}': {e.strerror}") from e

        try:
            body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedPage(title, f"Page '{title}' is not valid UTF-8 text") from e

        return Page(title=title, body=body, state=PageState.PERSISTED)

    def titles(self) -> list[str]:
        if not self.root.is_dir():
            return []
        return sorted(
            p.stem for p in self.root.glob(f"*{PAGE_SUFFIX}")
            if p.is_file() and p.stem.isalnum() and p.stem.isascii()
        )

    # ── Write ─────────────────────────────────────────────────────────────

    async def save(self, title: str, body: bytes) -> Page:
        path = self.path_for(title)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(body)
            os.chmod(path, FILE_MODE)
        except OSError as e:
            log.exception("Could not write %s", path)
            raise StorageError(title, f"Could not save page '{title}': {e.strerror}") from e

        log.info("Saved page %s (%d bytes)", title, len(body))
        return Page(title=title, body=body, state=PageState.PERSISTED)


# -----------------------------------------------------------------------------

def get_store(request: Request) -> PageStore:
    """FastAPI dependency — the store built by the app factory."""
    return request.app.state.store


# -----------------------------------------------------------------------------
