#!/usr/bin/env python
"""Autopilot comparison example.

Flies every registered autopilot strategy from the same initial state and
reports how each descent ended:
1. Build a fresh policy per strategy
2. Run the simulation to touchdown (or empty tanks)
3. Tabulate final velocity, fuel left and the verdict
"""

from autopilot import get_strategy, list_strategies
from lander import LanderState, SimConfig, run_simulation


def main() -> None:
    """Run the autopilot comparison example."""

    print("=" * 60)
    print("AUTOPILOT COMPARISON")
    print("=" * 60)

    config = SimConfig(dt=1.0, max_steps=1000)
    print(f"\n{'Strategy':<20}{'Time (s)':>10}{'Vel (m/s)':>12}{'Fuel (kg)':>12}  Result")
    print("-" * 66)

    for name in list_strategies():
        result = run_simulation(get_strategy(name), state=LanderState(), config=config)
        final = result.final_state
        verdict = result.outcome.value if result.outcome is not None else result.reason.value
        print(f"{name:<20}{final.time:>10.0f}{final.velocity:>12.2f}{final.fuel:>12.1f}  {verdict}")

    print("\n" + "=" * 60)
    print("COMPARISON COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
