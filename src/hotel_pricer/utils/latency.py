"""Helpers that simulate remote-call latency."""
from __future__ import annotations

import asyncio


async def simulate_latency(seconds: float) -> None:
    """Sleep for ``seconds`` to model a remote round trip; no-op when not positive."""
    if seconds <= 0:
        return
    await asyncio.sleep(seconds)
