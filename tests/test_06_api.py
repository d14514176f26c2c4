#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the JSON API: health, render preview and page listing."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from tests.conftest import save


@pytest.mark.asyncio
async def test_health(client, settings):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["app"] == settings.app_name


# ── Render preview ────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_render_preview(client):
    resp = await client.post("/api/v1/render", json={"body": "See [Home] & <b>"})
    assert resp.status_code == 200
    assert resp.json()["html"] == 'See <a href="/view/Home">Home</a> &amp; &lt;b&gt;'


@pytest.mark.asyncio
async def test_render_preview_empty(client):
    resp = await client.post("/api/v1/render", json={})
    assert resp.status_code == 200
    assert resp.json()["html"] == ""


# ── Pages ─────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_list_pages(client):
    assert (await client.get("/api/v1/pages")).json() == []
    await save(client, "Two", "2")
    await save(client, "One", "1")
    resp = await client.get("/api/v1/pages")
    assert resp.json() == [
        {"title": "One", "url": "/view/One"},
        {"title": "Two", "url": "/view/Two"},
    ]


@pytest.mark.asyncio
async def test_get_page_raw(client):
    await save(client, "Raw", "raw <b>[Link]</b>")
    resp = await client.get("/api/v1/pages/Raw/raw")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "raw <b>[Link]</b>"


@pytest.mark.asyncio
async def test_get_page_raw_missing(client):
    resp = await client.get("/api/v1/pages/Nope/raw")
    assert resp.status_code == 404
    assert "Nope" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_unknown_api_path_is_json_404(client):
    resp = await client.get("/api/v1/nothing-here")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Not Found"


@pytest.mark.asyncio
async def test_get_page_raw_malformed_is_json_500(client, settings):
    settings.data_dir.mkdir(parents=True)
    (settings.data_dir / "Broken.txt").write_bytes(b"\xff\xfe")
    resp = await client.get("/api/v1/pages/Broken/raw")
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Page 'Broken' is not valid UTF-8 text"


# -----------------------------------------------------------------------------
