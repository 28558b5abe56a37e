"""Timing utilities"""

import asyncio
import random

from linkedin_autoapply import config


class Pacer:
    """
    Randomized, human-like pacing for a single run.

    The random source, the sleep coroutine, the timing profile and the behavior
    probabilities are all injectable so tests can run deterministically without
    waiting.
    """

    def __init__(self, rng=None, sleep=asyncio.sleep, timing=None, behavior=None):
        self.rng = rng if rng is not None else random.Random()
        self.sleep = sleep
        self.timing = timing if timing is not None else config.get_active_timing()
        self.behavior = dict(config.BEHAVIOR)
        if behavior:
            self.behavior.update(behavior)

    async def random_delay(self, min_secs, max_secs):
        """Wait a random whole number of seconds in [min_secs, max_secs]"""
        if min_secs < 0 or min_secs > max_secs:
            raise ValueError(f"Invalid delay range: {min_secs}..{max_secs}")
        delay = self.rng.randint(min_secs, max_secs)
        print(f"Waiting for {delay} seconds...")
        await self.sleep(delay)
        return delay

    async def delay(self, name):
        """Wait using a named range from the active timing profile"""
        min_secs, max_secs = self.timing[name]
        return await self.random_delay(min_secs, max_secs)

    async def scroll_randomly(self, session):
        """Scroll the page by a random amount to mimic reading"""
        low, high = config.SCROLL_RANGE
        amount = self.rng.randrange(low, high)
        await session.scroll_by(amount)
        print(f"Scrolled page by {amount} pixels")
        return amount

    def chance(self, name):
        """Roll against a named probability from the behavior settings"""
        return self.rng.random() < self.behavior[name]

    def choice(self, options):
        return self.rng.choice(options)

    def sample(self, population, k):
        return self.rng.sample(population, k)


def format_elapsed_time(seconds):
    """Format elapsed time in human-readable format"""
    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        mins = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{mins}m {secs}s"
    else:
        hours = int(seconds // 3600)
        mins = int((seconds % 3600) // 60)
        return f"{hours}h {mins}m"
