#!/usr/bin/env python3
"""Command-line interface for running the single-server queue simulation."""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from ..config import SimulationConfig, build_simulation

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> Tuple[SimulationConfig, Optional[str]]:
    """Build a SimulationConfig and the optional plot path from arguments."""
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(
        description='Next-event simulation of a single-server queue; '
                    'prints clock, completed count and customers waiting per step')

    parser.add_argument('--arrival-rate', type=float, default=defaults.arrival_rate,
                        help='Exponential inter-arrival rate (default: 1/7)')
    parser.add_argument('--service-mean', type=float, default=defaults.service_mean,
                        help='Log-normal service location mu (default: 1.5)')
    parser.add_argument('--service-sigma', type=float, default=defaults.service_sigma,
                        help='Log-normal service scale sigma (default: 0.5)')
    parser.add_argument('-n', '--steps', type=int, default=defaults.steps,
                        help='Number of steps to run (default: 1000)')
    parser.add_argument('-s', '--seed', type=int, default=None,
                        help='Random seed (default: unseeded)')

    parser.add_argument('--plot-file', type=str,
                        help='Save a plot of the queue length to file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log every event to stderr')

    args = parser.parse_args(argv)

    config = SimulationConfig(
        arrival_rate=args.arrival_rate,
        service_mean=args.service_mean,
        service_sigma=args.service_sigma,
        steps=args.steps,
        seed=args.seed,
        verbose=args.verbose,
    )
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))
    return config, args.plot_file


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI."""
    config, plot_file = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    simulation = build_simulation(config)
    states = []
    for state in simulation.run(config.steps):
        print(state.to_line())
        if plot_file:
            states.append(state)
    logger.info("Finished %d steps at clock %s", config.steps, simulation.clock)

    if plot_file:
        from ..visualization import plot_trajectory

        fig = plot_trajectory(states)
        fig.savefig(plot_file, dpi=300, bbox_inches='tight')
        logger.info("Plot saved to: %s", plot_file)


if __name__ == '__main__':
    main()
