# clickerengine: Incremental Clicker Game Engine

from clickerengine.cost_scaling import CostScaling
from clickerengine.generator import GeneratorDef, GeneratorState
from clickerengine.formatting import NumberFormat
from clickerengine.presentation import Presentation
from clickerengine.definition import GameDefinition, GameConfig
from clickerengine.state import GameState
from clickerengine.engine import (
    Outcome,
    Click,
    Purchase,
    Tick,
    compute_cost,
    compute_production_rate,
    apply_click,
    apply_purchase,
    apply_tick,
    reduce,
)
from clickerengine.storage import KeyValueStore, MemoryStore, FileStore
from clickerengine.save import encode_state, decode_state, load_game, save_game
from clickerengine.view import GameView, GeneratorView, build_view, format_text_view
from clickerengine.runtime import GameRuntime
from clickerengine.ticker import run_ticker, start_ticker
from clickerengine.variants import VARIANTS, classic, japanese

__all__ = [
    # Cost
    "CostScaling",
    # Data model
    "GeneratorDef",
    "GeneratorState",
    "GameState",
    # Presentation
    "NumberFormat",
    "Presentation",
    # Definition
    "GameDefinition",
    "GameConfig",
    # Engine
    "Outcome",
    "Click",
    "Purchase",
    "Tick",
    "compute_cost",
    "compute_production_rate",
    "apply_click",
    "apply_purchase",
    "apply_tick",
    "reduce",
    # Storage
    "KeyValueStore",
    "MemoryStore",
    "FileStore",
    "encode_state",
    "decode_state",
    "load_game",
    "save_game",
    # View
    "GameView",
    "GeneratorView",
    "build_view",
    "format_text_view",
    # Runtime
    "GameRuntime",
    "run_ticker",
    "start_ticker",
    # Variants
    "VARIANTS",
    "classic",
    "japanese",
]
