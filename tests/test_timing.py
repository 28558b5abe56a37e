"""Tests for pacing, timing profiles and elapsed-time formatting."""

import random

import pytest

from fakes import FakeJobBoard, SleepRecorder
from linkedin_autoapply import config
from linkedin_autoapply.utils.timing import Pacer, format_elapsed_time


@pytest.mark.asyncio
async def test_random_delay_sleeps_whole_seconds_within_range():
    sleeper = SleepRecorder()
    pacer = Pacer(rng=random.Random(7), sleep=sleeper)

    for _ in range(50):
        await pacer.random_delay(2, 5)

    assert all(isinstance(delay, int) for delay in sleeper.delays)
    assert all(2 <= delay <= 5 for delay in sleeper.delays)


@pytest.mark.asyncio
async def test_random_delay_equal_bounds():
    sleeper = SleepRecorder()
    pacer = Pacer(rng=random.Random(7), sleep=sleeper)

    assert await pacer.random_delay(3, 3) == 3
    assert sleeper.delays == [3]


@pytest.mark.asyncio
@pytest.mark.parametrize("low,high", [(5, 2), (-1, 3)])
async def test_random_delay_rejects_bad_range(low, high):
    pacer = Pacer(rng=random.Random(7), sleep=SleepRecorder())

    with pytest.raises(ValueError):
        await pacer.random_delay(low, high)


@pytest.mark.asyncio
async def test_named_delay_uses_profile(pacer, sleeper):
    await pacer.delay("cooldown")
    await pacer.delay("open_listing")

    assert sleeper.delays == [42, 0]


@pytest.mark.asyncio
async def test_scroll_randomly_stays_in_range(pacer):
    board = FakeJobBoard([])

    for _ in range(100):
        await pacer.scroll_randomly(board)

    assert len(board.scrolls) == 100
    assert all(100 <= amount < 500 for amount in board.scrolls)


def test_chance_respects_extremes(make_pacer):
    never = make_pacer(view_only=0.0)
    always = make_pacer(view_only=1.0)

    assert not any(never.chance("view_only_probability") for _ in range(20))
    assert all(always.chance("view_only_probability") for _ in range(20))


def test_default_behavior_probabilities():
    pacer = Pacer()

    assert pacer.behavior["view_only_probability"] == 0.2
    assert pacer.behavior["company_detour_probability"] == 0.3


def test_get_active_timing_profiles():
    assert config.get_active_timing()["cooldown"] == (10, 30)
    assert config.get_active_timing("dev_test")["cooldown"] == (3, 8)


def test_get_active_timing_unknown_mode_falls_back():
    assert config.get_active_timing("warp") == config.TIMING_PROFILES["default"]


def test_get_active_timing_invalid_profile_falls_back(monkeypatch):
    broken = dict(config.TIMING_PROFILES["default"])
    broken["cooldown"] = (30, 10)
    monkeypatch.setitem(config.TIMING_PROFILES, "broken", broken)

    assert config.get_active_timing("broken") == config.TIMING_PROFILES["default"]


def test_default_profile_is_valid():
    for low, high in config.TIMING_PROFILES["default"].values():
        assert 0 <= low <= high
    assert config.TIMING_PROFILES["dev_test"].keys() == config.TIMING_PROFILES["default"].keys()


@pytest.mark.parametrize(
    "seconds,expected",
    [(12.34, "12.3s"), (125, "2m 5s"), (3725, "1h 2m")],
)
def test_format_elapsed_time(seconds, expected):
    assert format_elapsed_time(seconds) == expected
