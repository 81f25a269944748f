"""PID throttle control.

A small PID loop on the vertical velocity error, with a clamp on the
integral state, and the velocity-tracking throttle policy built on it.

Example:
    >>> from autopilot.pid import PIDThrottle
    >>> from lander.simulation import run_simulation
    >>>
    >>> result = run_simulation(PIDThrottle(kp=20.0))
    >>> result.landed_safely
    True
"""

from dataclasses import dataclass, field

import numpy as np
from beartype import beartype

from lander.state import LanderState

# =============================================================================
# PID Controller
# =============================================================================


@beartype
@dataclass
class PIDController:
    """PID loop on the velocity error, in throttle percent.

        u = kp * e + ki * sum(e * dt) + kd * (e - e_prev) / dt

    Saturation is left to the caller, which adds the hover feed-forward
    first and clips the sum to the throttle range.

    Attributes:
        kp: Proportional gain
        ki: Integral gain
        kd: Derivative gain
        integral_limits: (min, max) clamp on the accumulated error
    """
    kp: float = 1.0
    ki: float = 0.0
    kd: float = 0.0
    integral_limits: tuple[float, float] | None = None

    _integral: float = field(default=0.0, init=False, repr=False)
    _prev_error: float | None = field(default=None, init=False, repr=False)

    def reset(self) -> None:
        self._integral = 0.0
        self._prev_error = None

    def update(self, error: float, dt: float) -> float:
        """Correction for ``error`` over a tick of ``dt`` seconds; 0 if ``dt <= 0``."""
        if dt <= 0:
            return 0.0

        self._integral += error * dt
        if self.integral_limits:
            self._integral = float(np.clip(self._integral, *self.integral_limits))

        # No slope on the first tick after a reset
        derivative = 0.0 if self._prev_error is None else (error - self._prev_error) / dt
        self._prev_error = error

        return self.kp * error + self.ki * self._integral + self.kd * derivative


# =============================================================================
# Velocity-Tracking Throttle
# =============================================================================


@beartype
@dataclass
class PIDThrottle:
    """Throttle policy that tracks an altitude-scheduled descent rate.

    The target descent rate shrinks linearly with altitude:

        v_target = -(touchdown_speed + altitude / altitude_scale)

    The throttle is the hover throttle (feed-forward) plus a PID correction
    on the velocity error, saturated to [0, 100] %.

    Attributes:
        kp: Proportional gain [% per m/s]
        ki: Integral gain [% per m]
        kd: Derivative gain [% per m/s^2]
        touchdown_speed: Descent rate targeted at zero altitude [m/s]
        altitude_scale: Altitude per extra m/s of descent rate [s]
        dt: Control period [s], matching the simulation step
    """
    kp: float = 20.0
    ki: float = 0.0
    kd: float = 0.0
    touchdown_speed: float = 2.0
    altitude_scale: float = 30.0
    dt: float = 1.0

    _pid: PIDController = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._pid = PIDController(
            kp=self.kp,
            ki=self.ki,
            kd=self.kd,
            integral_limits=(-20.0, 20.0),
        )

    def target_velocity(self, altitude: float) -> float:
        """Commanded vertical velocity at ``altitude`` [m/s]."""
        return -(self.touchdown_speed + max(altitude, 0.0) / self.altitude_scale)

    def reset(self) -> None:
        self._pid.reset()

    def __call__(self, state: LanderState) -> float:
        error = self.target_velocity(state.altitude) - state.velocity
        throttle = state.hover_throttle + self._pid.update(error, self.dt)
        return float(np.clip(throttle, 0.0, 100.0))
