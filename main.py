"""Entry point for Phat Parrot."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from phat_parrot import (
    GameConfig,
    KeyboardInput,
    ParrotGame,
    SocketInput,
    SocketInputConfig,
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fly Phat Parrot through the gates.")
    parser.add_argument(
        "--seed",
        type=int,
        help="Optional random seed for deterministic gate heights.",
    )
    parser.add_argument(
        "--speed",
        type=int,
        help="Initial tick interval in milliseconds (20-140, default: config value).",
    )
    parser.add_argument(
        "--assets",
        type=Path,
        help="Directory holding the game images (default: ./assets, drawn placeholders if absent).",
    )
    parser.add_argument(
        "--socket-input",
        action="store_true",
        help="Enable JSON-over-TCP command interface for scripted play.",
    )
    parser.add_argument(
        "--socket-host",
        help="Override socket input bind host (default: config value).",
    )
    parser.add_argument(
        "--socket-port",
        type=int,
        help="Override socket input port (default: config value).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    args = parser.parse_args(argv)
    if args.assets is not None and not args.assets.is_dir():
        parser.error(f"asset directory not found: {args.assets}")
    return args


def build_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig()

    if args.assets is not None:
        config = replace(config, asset_dir=args.assets)

    if args.speed is not None:
        config = replace(config, loop=replace(config.loop, initial_interval_ms=args.speed))

    socket_cfg: SocketInputConfig = config.socket_input
    socket_overrides = {}
    if args.socket_host:
        socket_overrides["host"] = args.socket_host
    if args.socket_port is not None:
        socket_overrides["port"] = args.socket_port

    if socket_overrides:
        socket_cfg = replace(socket_cfg, **socket_overrides)
        config = replace(config, socket_input=socket_cfg)

    return config


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    config = build_config(args)

    input_provider = KeyboardInput(config.keys)
    if args.socket_input:
        input_provider = SocketInput(base=input_provider, config=config.socket_input, keys=config.keys)

    game = ParrotGame(config=config, input_provider=input_provider, rng=rng)
    game.run()


if __name__ == "__main__":
    main()
