"""
Entry point for blockfall.

Supports two modes:
  - console: Play in the terminal with line commands.
  - play:    Play in a pygame window with keyboard controls.

Usage:
    python main.py --mode console
    python main.py --mode play --config config/default.yaml
    python main.py --mode console --seed 42 --verbose
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from blockfall.config import GameConfig, load_config


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with mode, config, seed and verbose attributes.
    """
    parser = argparse.ArgumentParser(
        description="blockfall — a falling-block puzzle game.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["console", "play"],
        default="console",
        help="Run mode: 'console' (terminal line commands), 'play' (pygame window).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML configuration file (default: built-in defaults).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the piece bag; overrides the config file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log game events at DEBUG level.",
    )
    return parser.parse_args()


def main() -> None:
    """Main entry point: parse args, load config, and dispatch to the selected mode."""
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
        if args.seed is not None:
            config = dataclasses.replace(config, seed=args.seed)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.mode == "console":
        from blockfall.console import play_console
        play_console(config)

    elif args.mode == "play":
        try:
            from blockfall.play import play_window
            play_window(config)
        except ImportError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    else:
        print(f"Unknown mode: {args.mode}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
