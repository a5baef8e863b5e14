"""
PATHFINDING GAME - Main Entry Point
===================================

Usage:
    # Play the default 20x15 level
    python main.py

    # Play a custom ASCII layout with a different background
    python main.py --layout levels/corridor.txt --background NEW.webp

    # Print the distance-to-goal table without opening a window
    python main.py --print-distances

Environment:
    PATHGAME_LOG_LEVEL=DEBUG and the PATHGAME_* variables read by
    GameConfig.from_env() apply before command-line flags.
"""

import argparse
import sys
import os
import logging
from typing import List, Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)
if os.environ.get('PATHGAME_LOG_LEVEL', '').upper() == 'DEBUG':
    logging.getLogger().setLevel(logging.DEBUG)

from pathgame.core.config import GameConfig, ConfigError, EASING_NAMES
from pathgame.simulation.grid_world import GridWorld, LayoutError
from pathgame.simulation.shortest_paths import compute_shortest_paths

EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grid pathfinding game: reach the goal, follow the highlighted path",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  Arrow keys   Move
  R            Restart
  P            Toggle path overlay
  ESC          Quit
        """
    )
    parser.add_argument('--layout', type=str, default=None,
                        help='ASCII layout file (. free, # obstacle, S start, G goal)')
    parser.add_argument('--background', type=str, default=None,
                        help='Background image file (default: NEW.webp)')
    parser.add_argument('--tile-size', type=int, default=None,
                        help='Tile size in pixels')
    parser.add_argument('--fps', type=int, default=None,
                        help='Frame rate cap')
    parser.add_argument('--move-duration', type=float, default=None,
                        help='Seconds per one-cell move animation')
    parser.add_argument('--easing', choices=EASING_NAMES, default=None,
                        help='Move animation easing')
    parser.add_argument('--no-path', action='store_true',
                        help='Start with the path overlay hidden')
    parser.add_argument('--print-distances', action='store_true',
                        help='Print the distance-to-goal table and exit')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity')
    return parser


def build_config(args: argparse.Namespace) -> GameConfig:
    """Environment config with command-line flags applied on top."""
    config = GameConfig.from_env()

    overrides = {
        'layout_path': args.layout,
        'background_path': args.background,
        'tile_size': args.tile_size,
        'fps': args.fps,
        'move_duration': args.move_duration,
        'easing': args.easing,
    }
    for attr, value in overrides.items():
        if value is not None:
            setattr(config, attr, value)
    if args.no_path:
        config.show_path_overlay = False

    return config.validate()


def load_world(config: GameConfig) -> GridWorld:
    if config.layout_path:
        return GridWorld.load_layout(config.layout_path)
    return GridWorld.default()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        logging.getLogger().setLevel(getattr(logging, args.log_level))

    try:
        config = build_config(args)
        world = load_world(config)
    except (ConfigError, LayoutError) as e:
        logger.error("%s", e)
        return EXIT_USAGE
    except OSError as e:
        logger.error("Could not read layout: %s", e)
        return EXIT_USAGE

    if args.print_distances:
        field = compute_shortest_paths(world)
        # User-facing output - keep print() for CLI summary
        print(field.format_table())
        start_dist = field.distance_to_goal(world.start)
        if start_dist is None:
            print(f"\nGoal {world.goal} is unreachable from start {world.start}")
        else:
            print(f"\nShortest path from start {world.start} to goal {world.goal}: {start_dist} steps")
        return 0

    from pathgame.visualization.game import PathfindingGame

    game = PathfindingGame(world, config)
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
