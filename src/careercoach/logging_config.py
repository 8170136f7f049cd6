from __future__ import annotations

import logging

from careercoach.config import get_settings


_LOG_CONFIGURED = False


def configure_logging() -> None:
    global _LOG_CONFIGURED
    if _LOG_CONFIGURED:
        return

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # urllib3 debug lines include the request URL, and the Gemini key travels in its query string
    logging.getLogger("urllib3").setLevel(max(logging.INFO, logging.root.level))
    _LOG_CONFIGURED = True
