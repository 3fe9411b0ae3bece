# This project was developed with assistance from AI tools.
"""Artificial response delays for the placeholder pipelines."""

import random
from asyncio import sleep

from ..core.config import settings


async def simulate_latency(min_ms: int, max_ms: int | None = None) -> None:
    """Sleep between ``min_ms`` and ``max_ms`` milliseconds. No-op when disabled."""
    if not settings.SIMULATE_LATENCY:
        return
    delay_ms = min_ms if max_ms is None else random.randint(min_ms, max(min_ms, max_ms))
    await sleep(delay_ms / 1000)


async def simulate_response_latency() -> None:
    """Delay used by the ask and eligibility endpoints."""
    await simulate_latency(settings.RESPONSE_DELAY_MIN_MS, settings.RESPONSE_DELAY_MAX_MS)
