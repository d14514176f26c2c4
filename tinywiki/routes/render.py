#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoint — live preview for the editor.

POST /api/v1/render   {"body": "..."}  →  {"html": "..."}
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter

from tinywiki.schemas import RenderRequest, RenderResponse
from tinywiki.services.renderer import render


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/render", tags=["render"])


# -----------------------------------------------------------------------------

@router.post("", response_model=RenderResponse)
async def render_preview(data: RenderRequest):
    """Return the display HTML for an unsaved page body."""
    return RenderResponse(html=str(render(data.body)))


# -----------------------------------------------------------------------------
