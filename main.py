#!/usr/bin/env python3
"""
Fuzzy Handover Simulation

Simulates a user moving between two base stations and compares a crisp
RSS-margin handover trigger with a fuzzy-logic controller fusing the RSS
margin and user speed into a handover urgency.

Usage:
    python main.py [options]

Options:
    --config FILE         JSON configuration file (scenario/decision parameters)
    --seed N              Seed of the shadowing noise (default: 1)
    --speed V             User speed in m/s (default: 20)
    --distance D          Distance between the base stations in m (default: 1000)
    --dt S                Time step in s (default: 0.1)
    --num-points N        Output samples used for defuzzification (default: 1001)
    --results-file FILE   Output results filename (default: simulation_results.json)
    --figures-dir DIR     Folder for the figures (default: figures)
    --no-plots            Skip figure export
    --verbose             Enable verbose logging
"""

import argparse
import sys
import logging
from dataclasses import replace

from fuzzy_handover import Config, setup_logging
from fuzzy_handover.utils import load_config, save_json
from fuzzy_handover.simulation import HandoverSimulator
from fuzzy_handover.reporters import print_results, format_fis_summary, save_figures


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Threshold vs. fuzzy-logic handover between two base stations"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON configuration file"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed of the shadowing noise"
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=None,
        help="User speed in m/s"
    )
    parser.add_argument(
        "--distance",
        type=float,
        default=None,
        help="Distance between the base stations in m"
    )
    parser.add_argument(
        "--dt",
        type=float,
        default=None,
        help="Simulation time step in s"
    )
    parser.add_argument(
        "--num-points",
        type=int,
        default=None,
        help="Output samples used for defuzzification"
    )
    parser.add_argument(
        "--results-file",
        type=str,
        default=None,
        help="Filename to save results"
    )
    parser.add_argument(
        "--figures-dir",
        type=str,
        default=None,
        help="Folder to save figures"
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Do not export figures"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Merge the optional config file with command-line overrides."""
    base = load_config(args.config) if args.config else Config()

    overrides = {
        "seed": args.seed,
        "speed_ms": args.speed,
        "distance_m": args.distance,
        "dt_s": args.dt,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    scenario = base.scenario
    if overrides:
        if "distance_m" in overrides:
            # Keep BS2 at the end of the new distance
            overrides["bs2_position_m"] = None
        scenario = replace(scenario, **overrides)

    return Config(
        scenario=scenario,
        decision=base.decision,
        num_points=args.num_points if args.num_points is not None else base.num_points,
        results_file=args.results_file if args.results_file is not None else base.results_file,
        figures_dir=args.figures_dir if args.figures_dir is not None else base.figures_dir,
        log_level=logging.DEBUG if args.verbose else logging.INFO
    )


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logging(level=log_level)

    try:
        config = build_config(args)

        logger.info("Building fuzzy inference system...")
        simulator = HandoverSimulator.from_config(config)
        logger.debug(format_fis_summary(simulator.fis))

        result = simulator.run()

        # Print results
        print_results(result)

        # Save results
        output_data = result.to_dict()
        output_data["config"] = config.to_dict()
        save_json(output_data, config.results_file)
        logger.info(f"Results saved to {config.results_file}")

        if not args.no_plots:
            save_figures(result, simulator.fis, config.figures_dir)

        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
