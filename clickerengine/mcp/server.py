"""MCP server exposing a GameRuntime as the game's input and render surface."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from clickerengine.definition import GameDefinition
from clickerengine.engine import Outcome
from clickerengine.runtime import GameRuntime
from clickerengine.storage import KeyValueStore
from clickerengine.ticker import start_ticker

# Maximum ticks per advance() call (24 hours at one tick per second)
_MAX_TICKS = 86400
# Maximum clicks per click() call
_MAX_CLICKS = 1000

_REASONS = {
    Outcome.INSUFFICIENT_FUNDS: "Cannot afford",
    Outcome.UNKNOWN_GENERATOR: "Unknown generator",
    Outcome.IDLE: "Nothing is producing",
}


@dataclass
class _GameHolder:
    """Holds the active game definition and runtime."""

    definition: GameDefinition
    runtime: GameRuntime


def _round(value: float) -> float:
    return round(value, 2)


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_game_info(holder: _GameHolder) -> dict[str, Any]:
    defn = holder.definition
    return {
        "name": defn.config.name,
        "tick_interval": defn.config.tick_interval,
        "click_value": defn.config.click_value,
        "generators": [
            {
                "id": g.id,
                "display_name": g.display_name,
                "base_cost": g.base_cost,
                "production": g.production,
            }
            for g in defn.generators
        ],
    }


def _tool_get_game_state(holder: _GameHolder) -> dict[str, Any]:
    view = holder.runtime.view()
    return {
        "score": _round(view.score),
        "score_text": view.score_text,
        "rate": _round(view.rate),
        "rate_text": view.rate_text,
        "generators": [
            {
                "id": g.id,
                "display_name": g.display_name,
                "count": g.count,
                "cost": g.cost,
                "cost_text": g.cost_text,
                "production_text": g.production_text,
                "purchasable": g.purchasable,
            }
            for g in view.generators
        ],
    }


def _tool_click(holder: _GameHolder, count: int = 1) -> dict[str, Any]:
    if count < 1:
        return {"error": "Count must be at least 1"}
    if count > _MAX_CLICKS:
        return {"error": f"Count cannot exceed {_MAX_CLICKS}"}

    before = holder.runtime.get_state().score
    for _ in range(count):
        holder.runtime.click()
    after = holder.runtime.get_state().score
    return {
        "clicks": count,
        "total_earned": _round(after - before),
        "new_score": _round(after),
    }


def _tool_purchase(holder: _GameHolder, generator_id: str) -> dict[str, Any]:
    if holder.definition.get_generator(generator_id) is None:
        return {"error": f"Unknown generator: {generator_id!r}"}

    cost = holder.runtime.compute_cost(generator_id)
    outcome = holder.runtime.purchase(generator_id)
    if outcome.applied:
        state = holder.runtime.get_state()
        return {
            "success": True,
            "generator_id": generator_id,
            "cost_paid": cost,
            "new_count": state.count(generator_id),
            "new_score": _round(state.score),
        }
    return {"success": False, "reason": _REASONS[outcome], "cost": cost}


def _tool_advance(holder: _GameHolder, ticks: int = 1) -> dict[str, Any]:
    if ticks < 1:
        return {"error": "Ticks must be at least 1"}
    if ticks > _MAX_TICKS:
        return {"error": f"Cannot advance more than {_MAX_TICKS} ticks per call"}

    before = holder.runtime.get_state().score
    applied = 0
    for _ in range(ticks):
        if holder.runtime.tick().applied:
            applied += 1
    after = holder.runtime.get_state().score
    return {
        "ticks": ticks,
        "productive_ticks": applied,
        "total_earned": _round(after - before),
        "new_score": _round(after),
        "rate": _round(holder.runtime.production_rate()),
    }


def _tool_save(holder: _GameHolder) -> dict[str, Any]:
    holder.runtime.save()
    return {"success": True, "save_key": holder.definition.config.save_key}


def _tool_reset(holder: _GameHolder, confirm: bool = False) -> dict[str, Any]:
    if not holder.runtime.reset(confirm=lambda: confirm):
        return {
            "success": False,
            "reason": "Confirmation required",
            "prompt": holder.definition.presentation.reset_prompt,
        }
    return {"success": True, "message": "Game reset to initial state"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(
    definition: GameDefinition,
    store: KeyValueStore | None = None,
    realtime: bool = True,
) -> FastMCP:
    """Create an MCP server wrapping a GameRuntime for the given definition.

    With *realtime* on, the server's lifespan runs the tick timer on the
    same event loop that serves tool calls.
    """
    holder = _GameHolder(
        definition=definition,
        runtime=GameRuntime(definition, store),
    )

    @contextlib.asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[None]:
        if not realtime:
            yield
            return
        task = start_ticker(holder.runtime)
        try:
            yield
        finally:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    mcp = FastMCP(
        name=f"Clicker: {definition.config.name}",
        lifespan=lifespan,
    )

    @mcp.tool()
    def get_game_info() -> dict[str, Any]:
        """Get static game overview: generators with base cost and production."""
        return _tool_get_game_info(holder)

    @mcp.tool()
    def get_game_state() -> dict[str, Any]:
        """Get current score, production rate and per-generator cost, count and purchasability."""
        return _tool_get_game_state(holder)

    @mcp.tool()
    def click(count: int = 1) -> dict[str, Any]:
        """Click N times (max 1000). Returns points earned."""
        return _tool_click(holder, count)

    @mcp.tool()
    def purchase(generator_id: str) -> dict[str, Any]:
        """Buy one generator. Returns success/failure with reason."""
        return _tool_purchase(holder, generator_id)

    @mcp.tool()
    def advance(ticks: int = 1) -> dict[str, Any]:
        """Apply N production ticks immediately (max 86400)."""
        return _tool_advance(holder, ticks)

    @mcp.tool()
    def save() -> dict[str, Any]:
        """Write the current game to storage."""
        return _tool_save(holder)

    @mcp.tool()
    def reset(confirm: bool = False) -> dict[str, Any]:
        """Erase all progress. Requires confirm=true."""
        return _tool_reset(holder, confirm)

    return mcp
