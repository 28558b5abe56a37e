"""Tests for listing selection."""

import random

import pytest

from linkedin_autoapply.runner import RunConfig
from linkedin_autoapply.selection.listings import select_listings
from linkedin_autoapply.utils.timing import Pacer


@pytest.mark.parametrize("listing_count", [0, 1, 2, 5, 6, 7, 25, 100])
@pytest.mark.parametrize("max_applications", [0, 1, 2, 5, 10])
def test_selection_size_and_uniqueness(listing_count, max_applications):
    pacer = Pacer(rng=random.Random(listing_count * 31 + max_applications))
    run_config = RunConfig("https://jobs.example/search", max_applications, log_file=None)

    selected = select_listings([object()] * listing_count, run_config, pacer)

    assert len(selected) == min(listing_count, 3 * max_applications)
    assert len(set(selected)) == len(selected)
    assert all(0 <= index < listing_count for index in selected)


def test_selection_is_deterministic_for_seed():
    run_config = RunConfig("https://jobs.example/search", 3, log_file=None)
    listings = list(range(40))

    first = select_listings(listings, run_config, Pacer(rng=random.Random(99)))
    second = select_listings(listings, run_config, Pacer(rng=random.Random(99)))

    assert first == second


def test_selection_does_not_modify_listings():
    run_config = RunConfig("https://jobs.example/search", 2, log_file=None)
    listings = ["a", "b", "c", "d"]

    select_listings(listings, run_config, Pacer(rng=random.Random(1)))

    assert listings == ["a", "b", "c", "d"]
