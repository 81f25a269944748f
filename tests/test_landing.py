"""Unit tests for touchdown classification."""

import pytest

from lander.landing import SAFE_LANDING_SPEED, LandingOutcome, classify_landing


class TestClassifyLanding:
    """Test the safe-speed boundary."""

    @pytest.mark.parametrize("velocity", [-5.0, 5.0, 0.0, -4.99, 2.5])
    def test_success_within_limit(self, velocity):
        """Speeds up to and including 5 m/s are successful landings."""
        assert classify_landing(velocity) is LandingOutcome.SUCCESS

    @pytest.mark.parametrize("velocity", [-5.01, 5.01, -56.7, 100.0])
    def test_crash_beyond_limit(self, velocity):
        """Anything faster than 5 m/s is a crash."""
        assert classify_landing(velocity) is LandingOutcome.CRASH

    def test_custom_safe_speed(self):
        assert classify_landing(-3.0, safe_speed=2.0) is LandingOutcome.CRASH
        assert classify_landing(-2.0, safe_speed=2.0) is LandingOutcome.SUCCESS

    def test_integer_velocity(self):
        assert classify_landing(-5) is LandingOutcome.SUCCESS
        assert classify_landing(-6, safe_speed=5) is LandingOutcome.CRASH

    def test_default_threshold(self):
        assert SAFE_LANDING_SPEED == 5.0


class TestLandingOutcome:
    """Test verdict messages."""

    def test_messages(self):
        assert LandingOutcome.SUCCESS.message == "Successful landing!"
        assert LandingOutcome.CRASH.message == "Crash landing."
