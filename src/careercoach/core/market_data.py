from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def fetch_market_data(industry: str) -> dict[str, Any]:
    """Market snapshot for an industry.

    Static figures until a labour-market feed is wired in; the shape is what
    the industry insight prompt and table expect.
    """
    logger.debug("Using static market data for industry=%s", industry)
    return {
        "salaryRange": {"min": 80000, "max": 120000},
        "growthRate": 15,
        "demandLevel": "High",
        "keyTrends": ["AI", "Remote Work", "Sustainability"],
    }
