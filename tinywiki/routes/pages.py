#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pages API
=========
GET /api/v1/pages               — list all stored pages
GET /api/v1/pages/{title}/raw   — raw page body as text/plain
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, status
from fastapi.responses import PlainTextResponse

from tinywiki.schemas import TITLE_PATTERN, PageSummary
from tinywiki.services.storage import PageNotFound, PageStore, StorageError, get_store


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/pages", tags=["pages"])


# -----------------------------------------------------------------------------

@router.get("", response_model=list[PageSummary])
async def list_pages(store: PageStore = Depends(get_store)):
    return [PageSummary(title=t, url=f"/view/{t}") for t in store.titles()]


@router.get("/{title}/raw", response_class=PlainTextResponse)
async def get_page_raw(
    title: str = Path(..., pattern=TITLE_PATTERN),
    store: PageStore = Depends(get_store),
):
    try:
        page = await store.load(title)
    except PageNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return PlainTextResponse(page.text)


# -----------------------------------------------------------------------------
