from __future__ import annotations

import logging
import re

DEFAULT_PRICE_FALLBACK = 49

_DIGITS = re.compile(r"\d+")

logger = logging.getLogger(__name__)


def extract_price(label: str | None, fallback: int = DEFAULT_PRICE_FALLBACK) -> int:
    """
    Best-effort base price from marketing copy ("Starting at $199" -> 199).
    Labels without digits fall back to ``fallback`` and are logged, never raised.
    """
    match = _DIGITS.search(label) if isinstance(label, str) else None
    if match is None:
        logger.warning("Malformed price label, using fallback", extra={"label": label, "reason": f"fallback={fallback}"})
        return fallback
    return int(match.group(0))
