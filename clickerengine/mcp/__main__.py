"""Entry point: python -m clickerengine.mcp [game] [save_dir]"""

from __future__ import annotations

import logging
import sys


def main() -> None:
    if len(sys.argv) > 3:
        print("Usage: python -m clickerengine.mcp [game] [save_dir]", file=sys.stderr)
        print("Example: python -m clickerengine.mcp japanese ~/.clickerengine", file=sys.stderr)
        sys.exit(1)

    game = sys.argv[1] if len(sys.argv) > 1 else "classic"
    save_dir = sys.argv[2] if len(sys.argv) > 2 else None

    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    # Redirect stdout to stderr during module loading in case define_game() prints
    real_stdout = sys.stdout
    sys.stdout = sys.stderr
    try:
        from clickerengine.cli import DEFAULT_SAVE_DIR, load_game

        definition = load_game(game)
    finally:
        sys.stdout = real_stdout

    from clickerengine.mcp.server import create_server
    from clickerengine.storage import FileStore

    server = create_server(definition, FileStore(save_dir or DEFAULT_SAVE_DIR))
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
