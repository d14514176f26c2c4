#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 models for pages and the JSON API.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import enum
from typing import Optional

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field


# -----------------------------------------------------------------------------

TITLE_PATTERN = r"^[a-zA-Z0-9]+$"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Pages
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PageState(str, enum.Enum):
    MISSING   = "missing"
    EDITABLE  = "editable"
    PERSISTED = "persisted"


class Page(BaseModel):
    """A wiki page.

    ``body`` holds the raw bytes exactly as stored; ``display_body`` is the
    rendered HTML fragment and is only filled in for the view layout.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: str = Field(..., pattern=TITLE_PATTERN)
    body: bytes = b""
    display_body: Optional[Markup] = None
    state: PageState = PageState.MISSING

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# API
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PageSummary(BaseModel):
    title: str
    url: str


class RenderRequest(BaseModel):
    body: str = Field(default="", max_length=1_000_000)


class RenderResponse(BaseModel):
    html: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    app: str


# -----------------------------------------------------------------------------
