from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

from clickerengine.definition import GameDefinition
from clickerengine.engine import Outcome
from clickerengine.runtime import GameRuntime
from clickerengine.storage import FileStore
from clickerengine.variants import VARIANTS
from clickerengine.view import format_text_view

DEFAULT_SAVE_DIR = Path("~/.clickerengine")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clickerengine",
        description="clickerengine: Incremental Clicker CLI",
    )
    parser.add_argument(
        "--game",
        default="classic",
        help=f"Built-in game ({', '.join(VARIANTS)}) or module with define_game()",
    )
    parser.add_argument(
        "--save-dir",
        type=Path,
        default=DEFAULT_SAVE_DIR,
        help="Directory holding save files (default: ~/.clickerengine)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)"
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("status", help="Show score, rate and the shop")

    click = sub.add_parser("click", help="Click for points")
    click.add_argument("--times", type=_positive_int, default=1, help="Number of clicks")

    buy = sub.add_parser("buy", help="Buy a generator")
    buy.add_argument("generator_id", help="Generator ID")
    buy.add_argument("--times", type=_positive_int, default=1, help="Units to try to buy")

    tick = sub.add_parser("tick", help="Apply production ticks now")
    tick.add_argument("--count", type=_positive_int, default=1, help="Number of ticks")

    sub.add_parser("save", help="Write the current game to disk")

    reset = sub.add_parser("reset", help="Erase all progress")
    reset.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    serve = sub.add_parser("serve", help="Run the MCP server over stdio")
    serve.add_argument(
        "--no-realtime",
        action="store_true",
        help="Do not run the tick timer; production only via advance()",
    )

    return parser


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def load_game(name: str) -> GameDefinition:
    """Built-in variant by name, or import module and call define_game()."""
    factory = VARIANTS.get(name)
    if factory is not None:
        return factory()
    mod = importlib.import_module(name)
    if not hasattr(mod, "define_game"):
        print(f"Error: module {name!r} has no define_game() function", file=sys.stderr)
        sys.exit(1)
    return mod.define_game()


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(args.verbose)
    definition = load_game(args.game)
    store = FileStore(args.save_dir)

    if args.command == "serve":
        from clickerengine.mcp.server import create_server

        server = create_server(definition, store, realtime=not args.no_realtime)
        server.run(transport="stdio")
        return

    runtime = GameRuntime(definition, store)

    if args.command == "click":
        for _ in range(args.times):
            runtime.click()

    elif args.command == "buy":
        if definition.get_generator(args.generator_id) is None:
            print(f"Unknown generator: {args.generator_id!r}", file=sys.stderr)
            sys.exit(2)
        bought = 0
        for _ in range(args.times):
            if runtime.purchase(args.generator_id) is not Outcome.APPLIED:
                break
            bought += 1
        print(f"Bought {bought} x {args.generator_id}")

    elif args.command == "tick":
        for _ in range(args.count):
            runtime.tick()

    elif args.command == "save":
        runtime.save()
        print(f"Saved to {store.path_for(definition.config.save_key)}")
        return

    elif args.command == "reset":
        prompt = definition.presentation.reset_prompt
        confirm = None if args.yes else (lambda: _ask(prompt))
        if not runtime.reset(confirm=confirm):
            print("Reset cancelled")
            return

    print(format_text_view(runtime.view(), definition))


def _ask(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")
