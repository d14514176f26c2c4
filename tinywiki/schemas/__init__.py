from tinywiki.schemas.schemas import (
    TITLE_PATTERN,
    PageState, Page,
    PageSummary,
    RenderRequest, RenderResponse,
    HealthResponse,
)

__all__ = [
    "TITLE_PATTERN",
    "PageState", "Page",
    "PageSummary",
    "RenderRequest", "RenderResponse",
    "HealthResponse",
]
