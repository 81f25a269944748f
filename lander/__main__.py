"""Command-line entry point: ``python -m lander``.

Without ``--autopilot`` the game is played interactively at the console.
With it, the named strategy flies the descent and the trajectory can be
exported or plotted.
"""

import argparse
import logging
import sys

from autopilot.strategies import get_strategy, list_strategies
from lander.console import play
from lander.landing import SAFE_LANDING_SPEED, LandingOutcome
from lander.simulation import SimConfig, SimulationResult, run_simulation


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="lander", description="Lunar lander descent simulation.")
    p.add_argument(
        "--autopilot",
        choices=list_strategies(),
        default=None,
        help="Fly with a scripted strategy instead of prompting for thrust.",
    )
    p.add_argument("--dt", type=float, default=1.0, help="Time step (s).")
    p.add_argument("--max-steps", type=int, default=1000, help="Tick limit for autopilot runs.")
    p.add_argument("--safe-speed", type=float, default=SAFE_LANDING_SPEED,
                   help="Largest survivable touchdown speed (m/s).")
    p.add_argument("--json", default=None, help="Export the autopilot trajectory to JSON.")
    p.add_argument("--csv", default=None, help="Export the autopilot trajectory to CSV.")
    p.add_argument("--plot", default=None, help="Save a trajectory plot (PNG/PDF/SVG).")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity.")
    return p.parse_args(argv)


def print_summary(result: SimulationResult) -> None:
    """Print the per-tick table and final status of an autopilot run."""
    print("TIME\tALT(m)\tVEL(m/s)\tFUEL\tTHRUST%")
    for state, thrust in zip(result.states, result.commands):
        print(f"{state.time:.0f}\t{state.altitude:.1f}\t{state.velocity:.2f}\t{state.fuel:.1f}\t{thrust:.0f}")

    final = result.final_state
    print("\nFinal:")
    print(f"   Time: {int(final.time)}s")
    print(f"   Velocity: {final.velocity:.2f} m/s")
    print(f"   Fuel: {final.fuel:.2f} kg")

    outcome = result.outcome
    if outcome is None:
        print(f"   Run ended without touchdown ({result.reason.value}).")
    else:
        print(f"   {outcome.message}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    level = logging.WARNING - 10 * args.verbose
    logging.basicConfig(level=max(level, logging.DEBUG), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = SimConfig(dt=args.dt, max_steps=args.max_steps, safe_landing_speed=args.safe_speed)
    except ValueError as e:
        print(f"lander: error: {e}", file=sys.stderr)
        return 2

    if args.autopilot is None:
        outcome = play(dt=config.dt, safe_speed=config.safe_landing_speed)
        return 0 if outcome is LandingOutcome.SUCCESS else 1

    result = run_simulation(get_strategy(args.autopilot), config=config)
    print_summary(result)

    if args.json:
        from lander.export import export_trajectory_to_json

        export_trajectory_to_json(result, args.json)
    if args.csv:
        from lander.export import export_trajectory_to_csv

        export_trajectory_to_csv(result, args.csv)
    if args.plot:
        import matplotlib

        matplotlib.use("Agg")
        from lander.plotting import plot_trajectory

        plot_trajectory(result).savefig(args.plot)
        print(f"Saved plot to {args.plot}")

    return 0 if result.landed_safely else 1


if __name__ == "__main__":
    sys.exit(main())
