"""Lightweight models used by the transport layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

DEFAULT_RATE_LIMIT = 10000


@dataclass
class RateLimit:
    """Rate-limit counters as last reported by ``X-RateLimit-*`` headers.

    ``reset`` stays ``None`` until a response carries ``X-RateLimit-Reset``.
    """

    limit: int = DEFAULT_RATE_LIMIT
    remaining: int = DEFAULT_RATE_LIMIT
    reset: datetime | None = None
