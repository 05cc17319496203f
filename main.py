#!/usr/bin/env python3
"""
LEO Mobility - Polar Constellation Simulator

Command-line entry point for running LEO constellation mobility simulations
with optional visualization.

Usage:
    python main.py                                  # 10 planes x 12 sats at 2000 km
    python main.py -p 6 -s 8 -a 780                 # Custom constellation
    python main.py --headless --duration 3600       # Headless simulation
    python main.py --help                           # Show all options
"""

import argparse
import logging
import math
import sys


logger = logging.getLogger("leo_mobility")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LEO Polar Constellation Mobility Simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                    # Default 10 planes x 12 satellites
  %(prog)s -p 6 -s 8 -a 780                   # 6 planes x 8 satellites at 780 km
  %(prog)s --headless --duration 7200         # 2-hour headless run
  %(prog)s --headless --log-file run.json     # Save positions and links
  %(prog)s --max-link-range 5000              # Drop links longer than 5000 km

Controls (visualization mode):
  [ ]         : Decrease/increase time scale
  SPACE       : Pause/Resume
  R           : Reset simulation
  ESC         : Quit
        """,
    )

    # -------------------------------------------------------------------------
    # Constellation parameters
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--planes",
        "-p",
        type=int,
        default=10,
        help="Number of orbital planes (default: 10)",
    )
    parser.add_argument(
        "--sats-per-plane",
        "-s",
        type=int,
        default=12,
        help="Satellites per orbital plane (default: 12)",
    )
    parser.add_argument(
        "--altitude",
        "-a",
        type=float,
        default=2000.0,
        help="Orbital altitude in km (default: 2000)",
    )
    parser.add_argument(
        "--start-time",
        type=float,
        default=0.0,
        help="Simulation time of the initial positions in seconds (default: 0)",
    )
    parser.add_argument(
        "--max-link-range",
        type=float,
        default=None,
        help="Maximum inter-satellite link length in km (default: unlimited)",
    )

    # -------------------------------------------------------------------------
    # Simulation control
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run simulation without visualization",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=3600.0,
        help="Simulation duration in seconds for headless mode (default: 3600)",
    )
    parser.add_argument(
        "--timestep",
        type=float,
        default=60.0,
        help="Simulation timestep in seconds for headless mode (default: 60)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write per-step positions and links to this JSON file (headless mode)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    # -------------------------------------------------------------------------
    # Visualization
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--time-scale",
        type=float,
        default=10.0,
        help="Time scale: sim seconds per real second (default: 10)",
    )
    parser.add_argument(
        "--paused",
        action="store_true",
        help="Start with simulation paused",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=1000,
        help="Window width in pixels (default: 1000)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=560,
        help="Window height in pixels (default: 560)",
    )

    return parser


def run_headless(sim, args) -> None:
    """Step the simulation for the requested duration and print a report."""
    print(f"\n{'=' * 60}")
    print(f"Running headless simulation for {args.duration:.0f} seconds...")
    print(f"Timestep: {args.timestep:.1f} seconds")
    print(f"{'=' * 60}")

    elapsed = 0.0
    report_interval = max(600.0, args.duration / 10)
    next_report = report_interval

    while elapsed < args.duration:
        sim.step(args.timestep)
        elapsed += args.timestep

        if elapsed >= next_report:
            print(f"\nTime: {elapsed/60:.1f} minutes")

            for index, geo in list(sim.state.satellite_positions.items())[:3]:
                print(
                    f"  Satellite {index}: lat={geo.latitude:+.1f}°, "
                    f"lon={geo.longitude:+.1f}°, alt={geo.altitude:.0f} km"
                )
            if sim.num_satellites > 3:
                print(f"  ... and {sim.num_satellites - 3} more satellites")

            next_report += report_interval

    print(f"\n{'=' * 60}")
    print("Simulation Complete!")
    print(f"{'=' * 60}")
    print(f"Final simulation time: {sim.simulation_time:.0f} seconds")
    print(f"Steps executed: {sim.state.step_count}")

    stats = sim.get_link_statistics()
    print(f"\nInter-satellite links: {stats['count']}")
    if stats["count"]:
        print(f"  Min: {stats['min_km']:.0f} km")
        print(f"  Max: {stats['max_km']:.0f} km")
        print(f"  Avg: {stats['avg_km']:.0f} km")

    if args.log_file:
        sim.save_log(args.log_file)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s"
    )

    from mobility import ConfigurationError, Simulation, SimulationConfig

    if not math.isfinite(args.timestep) or args.timestep <= 0:
        logger.error(f"Timestep must be finite and positive, got {args.timestep}")
        return 2
    if not math.isfinite(args.duration):
        logger.error(f"Duration must be finite, got {args.duration}")
        return 2

    try:
        config = SimulationConfig(
            num_planes=args.planes,
            sats_per_plane=args.sats_per_plane,
            altitude=args.altitude,
            start_time=args.start_time,
            max_link_range=args.max_link_range,
        )
        sim = Simulation(config, enable_logging=args.log_file is not None)
        sim.initialize()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    # -------------------------------------------------------------------------
    # Print configuration summary
    # -------------------------------------------------------------------------
    summary = sim.get_summary()
    print("=" * 60)
    print("LEO Mobility - Polar Constellation Simulator")
    print("=" * 60)
    print(f"\nOrbital Planes: {args.planes}")
    print(f"Satellites per Plane: {args.sats_per_plane}")
    print(f"Total Satellites: {sim.num_satellites}")
    print(f"Altitude: {args.altitude} km")
    print(f"Orbital Speed: {sim.satellites[0].speed:.3f} km/s")
    print(f"Orbital Period: {summary['orbital_period_s']:.1f} s")
    if args.max_link_range is not None:
        print(f"Inter-satellite Range: {args.max_link_range} km")
    else:
        print("Inter-satellite Range: Unlimited")

    if args.headless:
        run_headless(sim, args)
        return 0

    try:
        from visualization import Visualizer
    except ImportError as e:
        logger.error(f"Could not import visualization module: {e}")
        logger.error("Try running with --headless flag for simulation without graphics.")
        return 1

    visualizer = Visualizer(
        width=args.width,
        height=args.height,
        time_scale=args.time_scale,
        paused=args.paused,
    )
    visualizer.set_simulation(sim)
    visualizer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
