"""Myths of Ulan dungeon generator CLI entry point.

Provides subcommands to generate and inspect dungeons from the terminal and
to run the JSON HTTP server. Accepts configuration via flags and environment
variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

__version__ = "0.2.0"


def _color_enabled() -> bool:
    # Disable colors if output is not a real terminal (e.g., during pytest capture)
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Myths of Ulan dungeon generator

    Generate seeded room-and-door dungeons, list the available generation
    strategies, or run the JSON HTTP API. Configuration can be provided via
    CLI flags or DUNGEON_* environment variables. If both are present, CLI
    flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          DUNGEON_MIN_ROOMS, DUNGEON_MAX_ROOMS          Room count bounds
          DUNGEON_MIN_ROOM_SIZE, DUNGEON_MAX_ROOM_SIZE  Room side length bounds
          DUNGEON_WIDTH, DUNGEON_HEIGHT                 Dungeon grid size
          HOST            Bind address for the web server (default: 127.0.0.1)
          PORT            Port for the web server (default: 5000)

        Examples:
          # Generate a dungeon for seed 42 and print every room
          python run.py generate --seed 42 --ascii

          # Same dungeon as JSON
          python run.py generate --seed 42 --json

          # Run the API server on a custom port
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="ulan",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Myths of Ulan Dungeon Generator {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a dungeon and print it",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    gen_parser.add_argument("--seed", default=None, help="Seed (integer or any text; random if omitted)")
    gen_parser.add_argument("--generator", default="simple", help="Generation strategy key (default: simple)")
    gen_parser.add_argument("--min-rooms", dest="min_rooms", type=int, default=None)
    gen_parser.add_argument("--max-rooms", dest="max_rooms", type=int, default=None)
    gen_parser.add_argument("--min-room-size", dest="min_room_size", type=int, default=None)
    gen_parser.add_argument("--max-room-size", dest="max_room_size", type=int, default=None)
    gen_parser.add_argument("--width", dest="dungeon_width", type=int, default=None)
    gen_parser.add_argument("--height", dest="dungeon_height", type=int, default=None)
    output = gen_parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the dungeon as JSON")
    output.add_argument("--ascii", action="store_true", help="Print every room as text")
    gen_parser.set_defaults(command="generate")

    list_parser = subparsers.add_parser("generators", help="List generation strategies")
    list_parser.set_defaults(command="generators")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the JSON HTTP API",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 127.0.0.1)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]

    return parser.parse_args(argv)


def _summary(dungeon, color: bool) -> str:
    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if color else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
    stairs = dungeon.stairs_location()
    lines = [
        divider,
        f"  {label('Generator:'):12} {value(dungeon.generator)}",
        f"  {label('Seed:'):12} {value(dungeon.seed)}",
        f"  {label('Rooms:'):12} {value(len(dungeon.rooms))}",
        f"  {label('Links:'):12} {value(dungeon.metrics.get('connections', 0))}",
        f"  {label('Start:'):12} {value(dungeon.current_room_id)} at {dungeon.player_pos}",
        f"  {label('Stairs:'):12} {value(stairs[0] if stairs else '-')}",
        divider,
    ]
    for rid, room in dungeon.rooms.items():
        exits = ", ".join(f"{d}->{t}" for d, t in room.connections.items()) or "none"
        lines.append(f"  {rid:8} {room.name:18} {room.width}x{room.height} at ({room.x},{room.y})  exits: {exits}")
    return "\n".join(lines)


def cmd_generate(args) -> int:
    from ulan import app
    from ulan.dungeon import GenerationError, GeneratorConfig, build_dungeon, coerce_seed
    from ulan.dungeon.display import render_room

    registry = app.extensions["ulan.generators"]
    if args.generator not in registry:
        print(f"[ERROR] Unknown generator '{args.generator}'. Available: {', '.join(registry.keys())}")
        return 1
    seed = coerce_seed(args.seed)
    try:
        config = GeneratorConfig.from_mapping(os.environ).with_overrides(
            min_rooms=args.min_rooms,
            max_rooms=args.max_rooms,
            min_room_size=args.min_room_size,
            max_room_size=args.max_room_size,
            dungeon_width=args.dungeon_width,
            dungeon_height=args.dungeon_height,
        )
        dungeon = build_dungeon(config, seed, registry.get(args.generator))
    except GenerationError as exc:
        print(f"[ERROR] {exc}")
        return 1
    if args.json:
        print(json.dumps(dungeon.to_dict(), indent=2))
        return 0
    color = _color_enabled()
    if color:
        _color_init()
    print(_summary(dungeon, color))
    if args.ascii:
        for rid, room in dungeon.rooms.items():
            player = dungeon.player_pos if rid == dungeon.current_room_id else None
            print()
            print(render_room(room, player))
    return 0


def cmd_generators() -> int:
    from ulan import app

    for entry in app.extensions["ulan.generators"].describe():
        print(f"{entry['key']:10} {entry['name']}")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    if mode == "generate":
        return cmd_generate(args)
    if mode == "generators":
        return cmd_generators()

    host = getattr(args, "host", None) or os.getenv("HOST", "127.0.0.1")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))

    from ulan.logging_utils import log
    from ulan.server import start_server

    log.info(event="startup", mode=mode, host=host, port=port)
    start_server(host, port, getattr(args, "debug", False))
    return 0


def cli():
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
