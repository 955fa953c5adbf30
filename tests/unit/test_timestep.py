from dataclasses import replace

import pytest

from butterfly_effect.config import DEFAULT_CONFIG
from butterfly_effect.utils.timestep import FixedTimestep


def test_accumulates_until_a_tick_is_due() -> None:
    clock = FixedTimestep(step_seconds=0.25)
    clock, ticks = clock.advance(0.125)
    assert ticks == 0
    clock, ticks = clock.advance(0.125)
    assert ticks == 1
    assert clock.accumulator == pytest.approx(0.0)


def test_long_frame_yields_several_ticks() -> None:
    clock, ticks = FixedTimestep(step_seconds=0.25).advance(1.0)
    assert ticks == 4
    assert clock.accumulator == pytest.approx(0.0)


def test_remainder_is_carried() -> None:
    clock, ticks = FixedTimestep(step_seconds=0.25).advance(0.375)
    assert ticks == 1
    assert clock.accumulator == pytest.approx(0.125)


def test_default_rate_handles_float_error() -> None:
    clock = FixedTimestep()
    total = 0
    for _ in range(10):
        clock, ticks = clock.advance(0.01)
        total += ticks
    assert total == 2


def test_negative_elapsed_rejected() -> None:
    with pytest.raises(ValueError):
        FixedTimestep().advance(-0.1)


def test_invalid_step_rejected() -> None:
    with pytest.raises(ValueError):
        FixedTimestep(step_seconds=0)


def test_configured_tick_rate() -> None:
    config = replace(DEFAULT_CONFIG, tick_seconds=0.1)
    clock, ticks = FixedTimestep.from_config(config).advance(0.25)
    assert ticks == 2
    assert clock.accumulator == pytest.approx(0.05)


def test_default_config_ticks_every_50ms() -> None:
    assert FixedTimestep.from_config(DEFAULT_CONFIG).step_seconds == pytest.approx(0.05)
