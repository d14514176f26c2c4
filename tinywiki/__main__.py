#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Run the wiki under uvicorn:  python -m tinywiki
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import uvicorn

from tinywiki.core.config import get_settings


# -----------------------------------------------------------------------------

def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "tinywiki.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()


# -----------------------------------------------------------------------------
