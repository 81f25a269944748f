"""Interactive console game.

The console is both Input Source and Output Sink: it prints the lander
status, prompts for a throttle each tick and reports the verdict at the end.
Input and output are injected (``read``/``write``) so the game can be
driven from tests.
"""

import math
from collections.abc import Callable

from beartype import beartype

from lander.landing import SAFE_LANDING_SPEED, LandingOutcome, classify_landing
from lander.simulation import simulate_step
from lander.state import NUMERIC_CONF, LanderState

PROMPT = "Enter thrust % (0-100): "


@beartype
def parse_thrust(text: str) -> float:
    """Parse a throttle entry.

    Args:
        text: Raw user input

    Returns:
        Throttle [%] within [0, 100]

    Raises:
        ValueError: If the text is not a finite number in [0, 100]
    """
    value = float(text.strip())
    if not math.isfinite(value) or not 0.0 <= value <= 100.0:
        raise ValueError(f"Thrust must be between 0 and 100, got {text.strip()!r}")
    return value


@beartype
def format_status(state: LanderState) -> str:
    """Multi-line status block shown before each prompt."""
    return (
        f"TIME: {int(state.time)}s\n"
        f"ALTITUDE: {state.altitude:.2f} m\n"
        f"VELOCITY: {state.velocity:.2f} m/s\n"
        f"FUEL: {state.fuel:.2f} kg"
    )


@beartype(conf=NUMERIC_CONF)
def play(
    read: Callable[[str], str] = input,
    write: Callable[..., object] = print,
    state: LanderState | None = None,
    dt: float = 1.0,
    safe_speed: float = SAFE_LANDING_SPEED,
) -> LandingOutcome | None:
    """Play one game at the console.

    Invalid entries are rejected and re-prompted without advancing the
    simulation. The game ends on touchdown, when the tanks run dry (scored
    on the velocity at that moment) or when the input stream ends.

    Args:
        read: Prompt function returning one line of input
        write: Output function taking one line of text
        state: Initial state (mutated in place); defaults to a fresh state
        dt: Time step [s]
        safe_speed: Largest survivable touchdown speed [m/s]

    Returns:
        The landing outcome, or None if the input stream ended first
    """
    if state is None:
        state = LanderState()

    write("Lunar Lander")
    write(f"Goal: Land with vertical speed <= {safe_speed:g} m/s without running out of fuel.\n")

    while state.altitude > 0:
        write(format_status(state))

        try:
            text = read(PROMPT)
        except EOFError:
            write("\nInput closed. Mission aborted.")
            return None

        try:
            thrust = parse_thrust(text)
        except ValueError:
            write("Invalid input. Try again.")
            continue

        simulate_step(state, thrust, dt)

        if state.fuel <= 0:
            write("\nOut of fuel!")
            break

        write("")

    if state.altitude > 0:
        write(f"Tanks empty at {state.altitude:.2f} m.")

    outcome = classify_landing(state.velocity, safe_speed)
    write("\nImpact!")
    write(f"Final velocity: {state.velocity:.2f} m/s")
    write(outcome.message)
    return outcome
