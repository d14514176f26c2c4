#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Template assembly.

One PageTemplates is built by the app factory, kept on ``app.state`` and
handed to handlers via the ``get_templates`` dependency, so templates are
parsed once per process and never looked up through a module global.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from tinywiki.schemas import Page
from .config import Settings


# -----------------------------------------------------------------------------

log = logging.getLogger(__name__)

Layout = Literal["view", "edit", "index", "error"]


# -----------------------------------------------------------------------------

class PageTemplates:

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.jinja = Jinja2Templates(directory=str(settings.templates_dir))

    def _ctx(self, **extra: Any) -> dict:
        return {
            "site_name": self.settings.site_name,
            "app_version": self.settings.app_version,
            **extra,
        }

    def render(
        self,
        request: Request,
        layout: Layout,
        page: Page | None = None,
        status_code: int = 200,
        **extra: Any,
    ) -> HTMLResponse:
        ctx = self._ctx(**extra)
        if page is not None:
            ctx.update(
                title=page.title,
                body=page.text,
                # only the view layout gets the rendered fragment
                display_body=page.display_body if layout == "view" else None,
            )
        try:
            return self.jinja.TemplateResponse(
                request, f"{layout}.html", ctx, status_code=status_code,
            )
        except TemplateError as e:
            log.exception("Template %s failed", layout)
            return HTMLResponse(str(e), status_code=500)


# -----------------------------------------------------------------------------

def get_templates(request: Request) -> PageTemplates:
    return request.app.state.templates


# -----------------------------------------------------------------------------
