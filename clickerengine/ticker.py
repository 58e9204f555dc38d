from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clickerengine.runtime import GameRuntime

logger = logging.getLogger(__name__)


async def run_ticker(
    runtime: GameRuntime,
    interval: float | None = None,
    max_ticks: int | None = None,
) -> int:
    """Call ``runtime.tick()`` every *interval* seconds until cancelled.

    Runs on the caller's event loop, so ticks interleave with other handlers
    on that loop but never overlap them. Returns the number of ticks fired
    when *max_ticks* is reached.
    """
    if interval is None:
        interval = runtime.definition.config.tick_interval
    if interval <= 0:
        raise ValueError(f"Tick interval must be positive, got {interval!r}")

    loop = asyncio.get_running_loop()
    next_at = loop.time() + interval
    fired = 0
    logger.debug("Ticker started (interval=%ss)", interval)
    try:
        while max_ticks is None or fired < max_ticks:
            await asyncio.sleep(max(0.0, next_at - loop.time()))
            runtime.tick()
            fired += 1
            next_at += interval
    finally:
        logger.debug("Ticker stopped after %d tick(s)", fired)
    return fired


def start_ticker(runtime: GameRuntime, interval: float | None = None) -> asyncio.Task[int]:
    """Schedule the ticker as a task on the running loop."""
    return asyncio.get_running_loop().create_task(run_ticker(runtime, interval))
