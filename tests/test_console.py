"""Tests for the interactive console game.

Input is scripted through an injected ``read`` function and output is
captured through ``write``.
"""

import pytest
from numpy.testing import assert_allclose

from lander.console import PROMPT, format_status, parse_thrust, play
from lander.landing import LandingOutcome
from lander.state import LanderState


def make_io(lines):
    """Build (read, write, output) with ``read`` raising EOFError when exhausted."""
    remaining = iter(lines)
    output = []
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    def write(*args):
        output.append(" ".join(str(a) for a in args))

    return read, write, output, prompts


# =============================================================================
# Parsing Tests
# =============================================================================


class TestParseThrust:
    """Test throttle entry validation."""

    @pytest.mark.parametrize("text, expected", [("0", 0.0), ("100", 100.0), (" 42.5 ", 42.5), ("7\n", 7.0)])
    def test_valid(self, text, expected):
        assert parse_thrust(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "100.01", "-0.5", "nan", "inf", "50%"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_thrust(text)


class TestFormatStatus:
    """Test the status block."""

    def test_format(self):
        state = LanderState(altitude=998.376, velocity=-1.62, fuel=500.0, time=3.7)
        assert format_status(state) == (
            "TIME: 3s\n"
            "ALTITUDE: 998.38 m\n"
            "VELOCITY: -1.62 m/s\n"
            "FUEL: 500.00 kg"
        )


# =============================================================================
# Game Loop Tests
# =============================================================================


class TestPlay:
    """Test full games with scripted input."""

    def test_invalid_input_does_not_advance(self):
        """Rejected entries are re-prompted without consuming a tick."""
        read, write, output, prompts = make_io(["abc", "150", "-1", "0"])
        state = LanderState()

        outcome = play(read=read, write=write, state=state)

        assert outcome is None
        assert output.count("Invalid input. Try again.") == 3
        assert prompts == [PROMPT] * 5
        # Only the single valid entry stepped the simulation
        assert state.time == 1.0
        assert_allclose(state.altitude, 998.38)

    def test_successful_landing(self):
        read, write, output, _ = make_io(["0"])
        state = LanderState(altitude=1.0, velocity=-2.0)

        outcome = play(read=read, write=write, state=state)

        assert outcome is LandingOutcome.SUCCESS
        assert "Final velocity: -3.62 m/s" in output
        assert output[-1] == "Successful landing!"

    def test_crash_landing(self):
        read, write, output, _ = make_io(["0"])
        state = LanderState(altitude=1.0, velocity=-10.0)

        outcome = play(read=read, write=write, state=state)

        assert outcome is LandingOutcome.CRASH
        assert output[-1] == "Crash landing."

    def test_free_fall_game(self):
        """Thirty-five zero entries end in a crash from the default state."""
        read, write, output, prompts = make_io(["0"] * 40)

        outcome = play(read=read, write=write)

        assert outcome is LandingOutcome.CRASH
        assert len(prompts) == 35

    def test_out_of_fuel_ends_game(self):
        """Emptying the tanks above ground ends the game and scores the current velocity."""
        read, write, output, _ = make_io(["100"])
        state = LanderState(fuel=1.0)

        outcome = play(read=read, write=write, state=state)

        assert outcome is LandingOutcome.SUCCESS
        assert "\nOut of fuel!" in output
        assert "Tanks empty at 1002.38 m." in output
        assert "\nImpact!" in output
        assert "Final velocity: 2.38 m/s" in output
        assert output[-1] == "Successful landing!"
        assert state.fuel == 0.0

    def test_out_of_fuel_while_falling_fast(self):
        read, write, output, _ = make_io(["100"])
        state = LanderState(velocity=-20.0, fuel=1.0)

        outcome = play(read=read, write=write, state=state)

        assert outcome is LandingOutcome.CRASH
        assert "Final velocity: -17.62 m/s" in output
        assert output[-1] == "Crash landing."

    def test_status_shown_before_prompt(self):
        read, write, output, _ = make_io([])
        play(read=read, write=write)

        assert output[0] == "Lunar Lander"
        assert output[2] == format_status(LanderState())
