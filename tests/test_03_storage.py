"""Tests for the file-backed page store."""
from __future__ import annotations

import stat

import pytest

from tinywiki.schemas import PageState
from tinywiki.services.storage import MalformedPage, PageNotFound, PageStore, StorageError


# ── Load / save ───────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_save_then_load(store):
    await store.save("Home", b"hello [World]")
    page = await store.load("Home")
    assert page.title == "Home"
    assert page.body == b"hello [World]"
    assert page.state == PageState.PERSISTED
    assert page.display_body is None


@pytest.mark.asyncio
async def test_file_layout(store):
    await store.save("Notes", b"raw <b>bytes</b>\r\n")
    path = store.root / "Notes.txt"
    assert store.path_for("Notes") == path
    assert path.read_bytes() == b"raw <b>bytes</b>\r\n"


@pytest.mark.asyncio
async def test_file_mode(store):
    await store.save("Private", b"x")
    mode = stat.S_IMODE(store.path_for("Private").stat().st_mode)
    assert mode == 0o600


@pytest.mark.asyncio
async def test_save_overwrites(store):
    await store.save("Page", b"first")
    await store.save("Page", b"second")
    assert (await store.load("Page")).body == b"second"


@pytest.mark.asyncio
async def test_save_empty_body(store):
    await store.save("Empty", b"")
    assert (await store.load("Empty")).body == b""


# ── Errors ────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_load_missing(store):
    with pytest.raises(PageNotFound) as exc_info:
        await store.load("NoSuchPage")
    assert exc_info.value.title == "NoSuchPage"
    assert isinstance(exc_info.value, StorageError)


@pytest.mark.asyncio
async def test_load_invalid_utf8(store):
    store.root.mkdir(parents=True)
    store.path_for("Bad").write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(MalformedPage):
        await store.load("Bad")


@pytest.mark.asyncio
async def test_save_failure_raises_storage_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    bad_store = PageStore(blocker)
    with pytest.raises(StorageError) as exc_info:
        await bad_store.save("Home", b"body")
    assert not isinstance(exc_info.value, PageNotFound)


# ── Listing ───────────────────────────────────────────────────────────────────

def test_titles_empty_when_no_dir(store):
    assert store.titles() == []


@pytest.mark.asyncio
async def test_titles_sorted_and_filtered(store):
    for title in ("Zeta", "Alpha", "Mid2"):
        await store.save(title, b"x")
    (store.root / "notes.md").write_text("ignored")
    (store.root / "bad-name.txt").write_text("ignored")
    assert store.titles() == ["Alpha", "Mid2", "Zeta"]
