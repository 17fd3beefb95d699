"""Entry point: ``python -m arena``.

Supports two modes:
  - ``python -m arena``          → Play on stdin/stdout (game referee protocol)
  - ``python -m arena serve``    → Launch the FastAPI inspection server
"""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Arena Control Bot")
    sub = parser.add_subparsers(dest="command")

    # --- Referee mode (default) ---
    play = sub.add_parser("play", help="Read turns from stdin, write commands to stdout (default)")
    play.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])
    play.add_argument("--no-debug", action="store_true", help="Silence per-turn diagnostics on stderr")

    # --- Server mode ---
    srv = sub.add_parser("serve", help="Start the FastAPI inspection server")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_play(args: argparse.Namespace) -> None:
    from arena.config import ArenaConfig
    from arena.engine.protocol import GameLoop
    from arena.utils.logging import setup_logging

    config = ArenaConfig(log_level=args.log_level, debug=not args.no_debug)
    setup_logging(config.log_level, sys.stderr)
    GameLoop(sys.stdin, sys.stdout, config).run()


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from arena.api.app import create_app
    from arena.config import ArenaConfig

    config = ArenaConfig(log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to referee mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["play"])
    if args.command == "serve":
        _run_server(args)
    else:
        _run_play(args)


if __name__ == "__main__":
    main()
