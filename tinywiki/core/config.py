#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via TINYWIKI_* environment variables or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from tinywiki._version import __version__ as _pkg_version


# -----------------------------------------------------------------------------

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="TINYWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "TinyWiki"
    app_version: str = _pkg_version
    site_name: str = "TinyWiki"
    debug: bool = False
    log_level: str = "INFO"

    # ── Server ─────────────────────────────────────────────────────────────

    host: str = "127.0.0.1"
    port: int = 8080

    # ── Storage ────────────────────────────────────────────────────────────

    data_dir: Path = Path("./data")

    # ── UI ─────────────────────────────────────────────────────────────────

    templates_dir: Path = _PACKAGE_DIR / "templates"
    static_dir: Path = _PACKAGE_DIR / "static"
    front_page: str = "index"

    @property
    def data_dir_resolved(self) -> Path:
        p = self.data_dir
        p.mkdir(parents=True, exist_ok=True)
        return p


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
