"""Touchdown classification.

A run that reaches the surface is scored on its final vertical speed: at or
below the safe landing speed it is a successful landing, anything faster is
a crash.
"""

from enum import Enum

from beartype import beartype

from lander.state import NUMERIC_CONF

SAFE_LANDING_SPEED = 5.0  # [m/s]


class LandingOutcome(Enum):
    """Result of a touchdown."""
    SUCCESS = "success"
    CRASH = "crash"

    @property
    def message(self) -> str:
        """Player-facing verdict."""
        if self is LandingOutcome.SUCCESS:
            return "Successful landing!"
        return "Crash landing."


@beartype(conf=NUMERIC_CONF)
def classify_landing(velocity: float, safe_speed: float = SAFE_LANDING_SPEED) -> LandingOutcome:
    """Classify a touchdown from its final vertical velocity.

    Args:
        velocity: Vertical velocity at touchdown [m/s]
        safe_speed: Largest survivable vertical speed [m/s] (inclusive)

    Returns:
        LandingOutcome.SUCCESS if ``abs(velocity) <= safe_speed``,
        otherwise LandingOutcome.CRASH
    """
    if abs(velocity) <= safe_speed:
        return LandingOutcome.SUCCESS
    return LandingOutcome.CRASH
