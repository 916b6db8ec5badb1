"""Entry point for the Fountain of Objects console game.

Sets up the ECS world, event bus, systems and the rich console.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from rich.console import Console

from fountain.components.level_layout import LevelSize
from fountain.config.settings import GameSettings, get_settings
from fountain.events.bus import EventBus
from fountain.factories.levels import get_level_layout
from fountain.input.console_input import ConsoleInputProvider
from fountain.rendering.console_renderer import ConsoleRenderSystem
from fountain.systems.game_flow_system import GameFlowSystem
from fountain.world import create_world

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fountain", description="Find and enable the Fountain of Objects.")
    parser.add_argument("--level", choices=[size.value for size in LevelSize], help="skip the cavern size prompt")
    parser.add_argument("--charges", type=int, help="number of arrows to start with")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    return parser


def resolve_settings(args: argparse.Namespace, settings: GameSettings) -> GameSettings:
    """Command-line flags override the environment."""
    if args.level:
        settings.level = args.level
    if args.charges is not None:
        if args.charges < 0:
            raise SystemExit("--charges must not be negative")
        settings.attack_charges = args.charges
    if args.log_level:
        settings.log_level = args.log_level.upper()
    if args.no_color:
        settings.no_color = True
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args, get_settings())
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    console = Console(no_color=settings.no_color)
    event_bus = EventBus()
    world = create_world(event_bus, initial_charges=settings.attack_charges)
    ConsoleRenderSystem(world, event_bus, console)
    flow = GameFlowSystem(world, event_bus, ConsoleInputProvider(event_bus, console))

    layout = None
    if settings.level:
        try:
            layout = get_level_layout(settings.level)
        except KeyError:
            logger.warning("Unknown level %r; asking instead", settings.level)

    try:
        outcome = flow.run(layout)
    except (EOFError, KeyboardInterrupt) as exc:
        logger.info("Session aborted: %s", type(exc).__name__)
        console.print()
        return 130 if isinstance(exc, KeyboardInterrupt) else 1
    logger.info("Session finished: %s", outcome.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
