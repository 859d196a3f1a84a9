"""Run the elevator simulation in a terminal: elevator-sim [floors] [cars] [steps]."""
from __future__ import annotations

import argparse
import logging
import time
from typing import Dict, List, Optional, Sequence

from .config import SimulationConfig
from .people import state_counts
from .render import render_frame
from .simulation import Simulation, build_simulation

logger = logging.getLogger(__name__)

POSITIONALS = ("floors", "cars", "steps")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="elevator-sim", description=__doc__)
    parser.add_argument(
        "counts",
        nargs="*",
        metavar="N",
        help="Up to three positive integers: floors, cars and steps",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for passenger spawns")
    parser.add_argument(
        "--spawn-interval",
        type=float,
        default=SimulationConfig.spawn_interval,
        help="Simulated time between passenger spawns",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=SimulationConfig.frame_delay,
        help="Wall-clock seconds to sleep between steps, 0 to disable",
    )
    parser.add_argument("--headless", action="store_true", help="Do not render frames")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )
    return parser


def parse_counts(values: Sequence[str]) -> Dict[str, int]:
    """Parse positional counts, keeping the default for any malformed value."""
    defaults = SimulationConfig()
    counts = {
        "floors": defaults.num_floors,
        "cars": defaults.car_count,
        "steps": defaults.steps,
    }
    for name, raw in zip(POSITIONALS, values):
        try:
            value = int(raw)
        except ValueError:
            value = 0
        if value <= 0:
            logger.warning("%s must be a positive integer, got %r; using %s", name, raw, counts[name])
            continue
        counts[name] = value
    return counts


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    counts = parse_counts(args.counts)
    return SimulationConfig(
        num_floors=counts["floors"],
        car_count=counts["cars"],
        steps=counts["steps"],
        spawn_interval=args.spawn_interval,
        frame_delay=max(0.0, args.delay),
        random_seed=args.seed,
    )


def run(simulation: Simulation, steps: int, frame_delay: float = 0.0, render: bool = True) -> None:
    for _ in range(steps):
        simulation.step()
        if render:
            print(render_frame(simulation.building.state, simulation.passengers.people), end="")
        if frame_delay > 0:
            time.sleep(frame_delay)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.counts) > len(POSITIONALS):
        parser.error("too many arguments; usage: elevator-sim [floors] [cars] [steps]")

    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(message)s")

    config = config_from_args(args)
    simulation = build_simulation(config)
    run(simulation, config.steps, frame_delay=config.frame_delay, render=not args.headless)

    print(f"Floors: {config.num_floors}  Cars: {config.car_count}  Steps: {simulation.step_count}")
    print("People:")
    for state, count in state_counts(simulation.passengers.people).items():
        print(f"  {state.value}: {count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
