#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Logging setup — called once from the application lifespan.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from .config import Settings


# -----------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# -----------------------------------------------------------------------------

def setup_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("tinywiki").setLevel(level)


# -----------------------------------------------------------------------------
