from __future__ import annotations

import logging
from typing import Callable

from clickerengine import engine
from clickerengine.definition import GameDefinition
from clickerengine.engine import Event, Outcome
from clickerengine.save import erase_game, load_game, save_game
from clickerengine.state import GameState
from clickerengine.storage import KeyValueStore, MemoryStore
from clickerengine.view import GameView, RenderSink, build_view

logger = logging.getLogger(__name__)


class GameRuntime:
    """Authoritative holder of the game state.

    Every applied event is written through to the store and then pushed to
    the render sinks, in that order, before the call returns.
    """

    def __init__(
        self,
        definition: GameDefinition,
        store: KeyValueStore | None = None,
    ) -> None:
        errors = definition.validate()
        if errors:
            raise ValueError(
                "Invalid GameDefinition:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        self.definition = definition
        self.store = store if store is not None else MemoryStore()
        self.state: GameState = load_game(definition, self.store)
        self._sinks: list[RenderSink] = []

    # ── Player actions ───────────────────────────────────────────────

    def dispatch(self, event: Event) -> Outcome:
        """Apply one event; persist and render if it changed anything."""
        outcome = engine.reduce(self.definition, self.state, event)
        if outcome.applied:
            self._persist()
            self.render()
        elif outcome is Outcome.UNKNOWN_GENERATOR:
            logger.debug("Ignoring purchase of unknown generator: %r", event)
        return outcome

    def click(self) -> Outcome:
        return self.dispatch(engine.Click())

    def purchase(self, generator_id: str) -> Outcome:
        return self.dispatch(engine.Purchase(generator_id))

    def tick(self) -> Outcome:
        return self.dispatch(engine.Tick())

    def save(self) -> None:
        self._persist()

    def reset(self, confirm: Callable[[], bool] | None = None) -> bool:
        """Erase the save and start over. Returns False if not confirmed.

        If the save cannot be erased, the fresh state is written over it.
        """
        if confirm is not None and not confirm():
            return False
        self.state = GameState.initial(self.definition)
        try:
            erase_game(self.definition, self.store)
        except OSError:
            logger.exception("Could not erase save %r", self.definition.config.save_key)
            self._persist()
        logger.info("Game %r reset", self.definition.config.name)
        self.render()
        return True

    # ── Queries ──────────────────────────────────────────────────────

    def get_state(self) -> GameState:
        """Return live reference to game state."""
        return self.state

    def compute_cost(self, generator_id: str) -> float | None:
        gdef = self.definition.get_generator(generator_id)
        if gdef is None:
            return None
        return engine.compute_cost(self.definition, gdef, self.state)

    def production_rate(self) -> float:
        return engine.compute_production_rate(self.definition, self.state)

    def view(self) -> GameView:
        return build_view(self.definition, self.state)

    # ── Rendering ────────────────────────────────────────────────────

    def add_render_sink(self, sink: RenderSink) -> None:
        self._sinks.append(sink)

    def render(self) -> None:
        if not self._sinks:
            return
        view = self.view()
        for sink in self._sinks:
            sink(view)

    # ── Private helpers ──────────────────────────────────────────────

    def _persist(self) -> None:
        try:
            save_game(self.definition, self.state, self.store)
        except OSError:
            logger.exception("Could not write save %r", self.definition.config.save_key)
