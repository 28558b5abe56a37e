"""Run controller: one pass over a job search results page"""

import time
from collections import Counter
from dataclasses import dataclass, field

from linkedin_autoapply import config
from linkedin_autoapply.browser.login import sign_in
from linkedin_autoapply.selection.listings import select_listings
from linkedin_autoapply.state.outcomes import OutcomeKind
from linkedin_autoapply.utils.logging import log_outcome
from linkedin_autoapply.utils.timing import format_elapsed_time
from linkedin_autoapply.workflow.apply import ApplicationWorkflow


@dataclass(frozen=True)
class RunConfig:
    """Parameters fixed for the whole run"""

    job_url: str
    max_applications: int = config.DEFAULT_MAX_APPLICATIONS
    log_file: str | None = config.LOG_FILE

    def __post_init__(self):
        if not self.job_url:
            raise ValueError("RunConfig.job_url cannot be empty")
        if self.max_applications < 0:
            raise ValueError("RunConfig.max_applications cannot be negative")

    @property
    def max_candidates(self):
        return self.max_applications * config.CANDIDATE_MULTIPLIER


@dataclass
class RunState:
    """Counters for the current run, updated after each listing's outcome"""

    applied: int = 0
    examined: int = 0
    outcomes: Counter = field(default_factory=Counter)
    started_at: float = field(default_factory=time.time)

    def record(self, outcome):
        self.examined += 1
        self.outcomes[outcome.kind] += 1
        if outcome.applied:
            self.applied += 1


class RunController:
    """
    Owns the browser session for one run.

    run() signs in if credentials are given, snapshots the listings, and feeds
    the selected indices through ApplicationWorkflow until the application cap
    is reached or the candidates run out. The session is closed on every exit
    path.
    """

    def __init__(self, session, run_config, pacer, credentials=None, workflow=None):
        self.session = session
        self.run_config = run_config
        self.pacer = pacer
        self.credentials = credentials
        self.workflow = workflow or ApplicationWorkflow(session, pacer)
        self.state = RunState()

    async def run(self):
        try:
            await self.open_results_page()
            listings = await self.session.find_all(config.SELECTORS["listing_title"])
            print(f"Found {len(listings)} job listings.")

            selected = select_listings(listings, self.run_config, self.pacer)
            print(f"Selected {len(selected)} jobs to process")
            await self.process_candidates(selected)
        finally:
            self.report()
            await self.session.close()
        return self.state

    async def open_results_page(self):
        print(f"Opening {self.run_config.job_url}...")
        await self.session.navigate(self.run_config.job_url)
        await self.pacer.delay("page_load")

        if self.credentials is not None:
            username, password = self.credentials
            await sign_in(self.session, self.pacer, username, password)

        # Scroll down a bit to load more content
        await self.pacer.scroll_randomly(self.session)
        await self.pacer.delay("results_settle")

    async def process_candidates(self, indices):
        max_applications = self.run_config.max_applications
        for index in indices:
            if self.state.applied >= max_applications:
                print(f"Reached maximum application limit of {max_applications}")
                break

            outcome = await self.workflow.process(index, self.state.applied)
            self.state.record(outcome)
            if outcome.applied:
                print(
                    f"Successfully applied to job! ({self.state.applied}/{max_applications})"
                )
            log_outcome(
                self.run_config.job_url, index, outcome, log_file=self.run_config.log_file
            )

    def report(self):
        elapsed = time.time() - self.state.started_at
        print("\n" + "=" * 60)
        print("RUN COMPLETE")
        print("=" * 60)
        for kind in OutcomeKind:
            if self.state.outcomes[kind] > 0:
                print(f"  {kind.name}: {self.state.outcomes[kind]}")
        print(f"⏱️  Total time: {format_elapsed_time(elapsed)}")
        print(
            f"Bot session complete! Applied to {self.state.applied} jobs out of "
            f"{self.run_config.max_applications} maximum "
            f"({self.state.examined} examined)."
        )
