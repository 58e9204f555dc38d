"""Snapshot codec: game state to and from a JSON string.

Loading never raises. A missing, unparsable or wrongly shaped snapshot
yields ``None`` so the caller starts from defaults, and every accepted
snapshot is reconciled against the current generator catalog.
"""

from __future__ import annotations

import json
import logging
import math
from typing import TYPE_CHECKING, Any

from clickerengine.definition import SCORE_FIELDS
from clickerengine.generator import GeneratorState
from clickerengine.state import GameState

if TYPE_CHECKING:
    from clickerengine.definition import GameDefinition
    from clickerengine.storage import KeyValueStore

logger = logging.getLogger(__name__)


def _to_number(value: Any) -> float:
    """Lenient numeric coercion. Anything unusable becomes 0."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        text = value.strip()
        # float() takes digit separators, saved text never carries them
        if not text or "_" in text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def build_save_dict(definition: GameDefinition, state: GameState) -> dict[str, Any]:
    """Build a JSON-serializable dict from game state."""
    generators = []
    for gs in state.generators:
        gdef = definition.get_generator(gs.id)
        entry: dict[str, Any] = {"id": gs.id}
        if gdef is not None:
            entry.update({
                "name": gdef.display_name,
                "base_cost": gdef.base_cost,
                "production": gdef.production,
            })
        entry["count"] = gs.count
        generators.append(entry)

    return {
        definition.config.score_field: state.score,
        "generators": generators,
    }


def encode_state(definition: GameDefinition, state: GameState) -> str:
    return json.dumps(build_save_dict(definition, state), ensure_ascii=False)


def restore_from_dict(definition: GameDefinition, data: Any) -> GameState | None:
    """Reconcile a decoded snapshot with the catalog. ``None`` if unusable."""
    if not isinstance(data, dict):
        logger.warning("Ignoring save data: expected an object, got %s", type(data).__name__)
        return None

    saved_generators = data.get("generators")
    if saved_generators is None:
        saved_generators = []
    if not isinstance(saved_generators, list):
        logger.warning("Ignoring save data: 'generators' is not a list")
        return None

    # Configured field first, then the other accepted spelling
    fields = [definition.config.score_field]
    fields += [f for f in SCORE_FIELDS if f not in fields]
    score = 0.0
    for name in fields:
        if name in data:
            score = _to_number(data[name])
            break

    saved_by_id: dict[str, Any] = {}
    for entry in saved_generators:
        if not isinstance(entry, dict):
            continue
        saved_id = entry.get("id")
        if isinstance(saved_id, str):
            saved_by_id[saved_id] = entry

    unknown = set(saved_by_id) - set(definition.generator_ids())
    if unknown:
        logger.info("Discarding saved generators not in catalog: %s", sorted(unknown))

    generators = []
    for gdef in definition.generators:
        saved = saved_by_id.get(gdef.id, {})
        count = max(0, math.floor(_to_number(saved.get("count"))))
        generators.append(GeneratorState(id=gdef.id, count=count))

    return GameState(score=max(0.0, score), generators=generators)


def decode_state(definition: GameDefinition, raw: str | None) -> GameState | None:
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.warning("Ignoring corrupt save data: %s", e)
        return None
    return restore_from_dict(definition, data)


def load_game(definition: GameDefinition, store: KeyValueStore) -> GameState:
    """Stored snapshot if usable, otherwise the initial state."""
    state = decode_state(definition, store.get(definition.config.save_key))
    if state is None:
        return GameState.initial(definition)
    logger.debug("Loaded save %r (score=%s)", definition.config.save_key, state.score)
    return state


def save_game(definition: GameDefinition, state: GameState, store: KeyValueStore) -> None:
    store.set(definition.config.save_key, encode_state(definition, state))


def erase_game(definition: GameDefinition, store: KeyValueStore) -> None:
    store.delete(definition.config.save_key)
