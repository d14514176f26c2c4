#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for TinyWiki tests.
Each test gets its own temporary data directory, so no state is shared.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tinywiki.core.config import Settings
from tinywiki.main import create_app
from tinywiki.services.storage import PageStore


# -----------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def store(settings) -> PageStore:
    return PageStore(settings.data_dir)


@pytest_asyncio.fixture(scope="function")
async def client(settings):
    """HTTP test client wired to an isolated data directory."""
    app = create_app(settings)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
# Helper functions for tests
# -----------------------------------------------------------------------------

async def save(client: AsyncClient, title: str, body: str):
    resp = await client.post(f"/save/{title}", data={"body": body})
    assert resp.status_code == 302, resp.text
    return resp


# -----------------------------------------------------------------------------
