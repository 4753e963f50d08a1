"""
Brutalist Buildings Generator - Main CLI

Generates a brutalist building (optionally a whole city) and prints a
summary, or the full primitive structure as JSON, to stdout.

Usage:
    python -m brutalist_buildings.main --floors 5 --width 10 --depth 10 --seed 42

Example:
    python -m brutalist_buildings.main --seed 7 --rooftop-garden --city --json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import PipelineConfig, CITY_SIZE
from .models.building import BuildingConfig, concrete_color_from_hex
from .generators.building_generator import BuildingPipeline, GenerationResult


def setup_logging(verbose: bool = False) -> None:
    """
    Configure console logging.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    # Logs go to stderr so --json output stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description='Brutalist Buildings Generator - Procedural brutalist architecture'
    )

    parser.add_argument('--floors', type=int, default=5, help='Number of floors (default: 5)')
    parser.add_argument('--width', type=float, default=10.0, help='Footprint width (default: 10)')
    parser.add_argument('--depth', type=float, default=10.0, help='Footprint depth (default: 10)')

    parser.add_argument(
        '--window-density',
        type=float,
        default=0.5,
        help='Probability of each window slot holding a window, 0-1 (default: 0.5)'
    )

    parser.add_argument(
        '--seed',
        type=float,
        default=42.0,
        help='Seed of the generation (default: 42)'
    )

    parser.add_argument('--name', default='BRUTALIST TOWER', help='Building name')

    parser.add_argument(
        '--color',
        default='#cccccc',
        help='Concrete colour as #rrggbb (default: #cccccc)'
    )

    parser.add_argument('--roughness', type=float, default=0.8, help='Texture roughness 0-1')

    parser.add_argument(
        '--rooftop-garden',
        action='store_true',
        help='Add trees, flower beds and paths on the roof'
    )

    parser.add_argument(
        '--ground-park',
        action='store_true',
        help='Add a park with trees and benches around the building'
    )

    parser.add_argument(
        '--city',
        action='store_true',
        help='Surround the building with 5-9 satellite buildings'
    )

    parser.add_argument(
        '--city-size',
        type=float,
        default=CITY_SIZE,
        help=f'Outer radius of the city (default: {CITY_SIZE:g})'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the generated structure as JSON instead of a summary'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def format_summary(result: GenerationResult) -> str:
    """Human-readable summary of a generation result."""
    config = result.config
    params = result.params

    setbacks = ', '.join(f"floor {s.floor} -{s.amount:.2f}" for s in params.setbacks)
    overhangs = ', '.join(
        f"floor {o.floor} {o.side.value} +{o.amount:.2f}" for o in params.overhangs
    )
    core = params.core_shaft
    core_text = (
        f"{core.width:.2f}x{core.depth:.2f}, {core.height:.2f} tall" if core else "none"
    )

    lines = [
        f"{config.building_name} (seed {config.seed:g})",
        f"  Floors: {len(result.floors)}, height {params.total_height:g}",
        f"  Setbacks: {setbacks or 'none'}",
        f"  Overhangs: {overhangs or 'none'}",
        f"  Core shaft: {core_text}",
        f"  Side extensions: {len(result.extensions)}",
        f"  Windows: {len(result.windows)}",
        f"  Doors: {', '.join(('main ' if d.is_main else 'secondary ') + d.face.value for d in result.doors)}",
        f"  Decorations: {', '.join(e.kind.value for e in result.decorations)}",
    ]
    if result.garden is not None:
        lines.append(
            f"  Rooftop garden: {len(result.garden.trees)} trees, "
            f"{len(result.garden.flower_beds)} flower beds"
        )
    if result.park is not None:
        lines.append(
            f"  Ground park: {len(result.park.trees)} trees, {len(result.park.benches)} benches"
        )
    if result.city is not None:
        lines.append(f"  City: {len(result.city)} buildings")
    return '\n'.join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)

    try:
        config = BuildingConfig(
            floors=args.floors,
            width=args.width,
            depth=args.depth,
            window_density=args.window_density,
            texture_roughness=args.roughness,
            concrete_color=concrete_color_from_hex(args.color),
            building_name=args.name,
            rooftop_garden=args.rooftop_garden,
            ground_park=args.ground_park,
            city_mode=args.city,
            seed=args.seed,
        )
        pipeline = BuildingPipeline(PipelineConfig(
            city_size=args.city_size,
            memoize=False,
            verbose=args.verbose,
        ))
        result = pipeline.generate(config)

        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
        else:
            print(format_summary(result))
        return 0

    except Exception as e:
        logging.exception(f"Generation failed: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
