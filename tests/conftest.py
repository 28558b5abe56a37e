"""
Pytest fixtures for the Easy Apply bot test suite.
"""

import random

import pytest

from fakes import COOLDOWN_SECONDS, SleepRecorder
from linkedin_autoapply import config
from linkedin_autoapply.utils.timing import Pacer


@pytest.fixture
def timing():
    profile = {name: (0, 0) for name in config.TIMING_PROFILES["default"]}
    profile["cooldown"] = (COOLDOWN_SECONDS, COOLDOWN_SECONDS)
    return profile


@pytest.fixture
def sleeper():
    return SleepRecorder()


@pytest.fixture
def make_pacer(timing, sleeper):
    """Build a seeded Pacer; behavior probabilities default to never."""

    def _make(view_only=0.0, company_detour=0.0, seed=1234):
        return Pacer(
            rng=random.Random(seed),
            sleep=sleeper,
            timing=timing,
            behavior={
                "view_only_probability": view_only,
                "company_detour_probability": company_detour,
            },
        )

    return _make


@pytest.fixture
def pacer(make_pacer):
    return make_pacer()
