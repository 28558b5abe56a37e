"""Easy Apply workflow for a single job listing"""

from dataclasses import replace

from linkedin_autoapply.config import SELECTORS
from linkedin_autoapply.errors import ElementNotFound, SessionError
from linkedin_autoapply.interaction.buttons import abandon_application, dismiss_modal
from linkedin_autoapply.state.detector import ModalKind, detect_modal_state
from linkedin_autoapply.state.outcomes import Outcome, OutcomeKind

NO_MODAL_CONTROL = "no submit or close control"


class ApplicationWorkflow:
    """
    Drive one listing from the results page to an Outcome.

    Steps, each of which may end the workflow:
        resolve -> view-only? -> open -> company detour -> find Easy Apply
        -> click it -> classify modal -> submit | abandon -> close leftovers

    Missing optional elements are branches, not failures. A SessionError ends
    the current listing with an ERROR outcome; it never escapes process().
    """

    def __init__(self, session, pacer):
        self.session = session
        self.pacer = pacer

    async def process(self, index, applied_so_far):
        """Run the workflow for the listing at ``index`` of a fresh snapshot"""
        title = ""
        try:
            listing = await self.resolve(index)
            if listing is None:
                print(f"Job index {index} is no longer valid, skipping")
                return Outcome(OutcomeKind.SKIPPED_STALE)

            title = await self.read_title(listing)
            print(f"Processing job: {title}")
            outcome = await self.handle_listing(listing, applied_so_far)
        except SessionError as e:
            print(f"  ⚠️ Browser error while processing job: {e}")
            outcome = Outcome.error(str(e))

        # Longer pause between listings
        await self.pacer.delay("cooldown")
        return replace(outcome, title=title)

    async def resolve(self, index):
        """Re-fetch the listings and return the one at ``index``, or None if it is gone"""
        listings = await self.session.find_all(SELECTORS["listing_title"])
        if index >= len(listings):
            return None
        return listings[index]

    async def read_title(self, listing):
        try:
            return await self.session.read_text(listing) or "Unknown job title"
        except SessionError:
            return "Unknown job title"

    async def handle_listing(self, listing, applied_so_far):
        # Never view-only before the first application
        if self.pacer.chance("view_only_probability") and applied_so_far > 0:
            await self.view_only(listing)
            return Outcome(OutcomeKind.VIEWED_ONLY)

        await self.open_listing(listing)
        await self.visit_company_profile()

        try:
            apply_button = await self.session.find_one(SELECTORS["apply_button"])
        except ElementNotFound:
            print("No 'Easy Apply' button found, skipping this job.")
            await self.pacer.delay("no_apply_button")
            return Outcome(OutcomeKind.SKIPPED_NO_APPLY_BUTTON)

        print("Found 'Easy Apply' button, clicking...")
        await self.session.click(apply_button)
        await self.pacer.delay("apply_modal")

        outcome = await self.complete_modal()

        # Close any popup left after applying; the outcome already happened
        try:
            await dismiss_modal(self.session, self.pacer)
        except SessionError as e:
            print(f"  ⚠️ Could not close modal after applying: {e}")
        return outcome

    async def view_only(self, listing):
        print("Just viewing this job without applying")
        await self.session.click(listing)
        await self.pacer.delay("view_only_read")
        await self.pacer.scroll_randomly(self.session)
        await self.pacer.delay("view_only_scroll")

    async def open_listing(self, listing):
        await self.session.click(listing)
        await self.pacer.delay("open_listing")
        await self.pacer.scroll_randomly(self.session)
        await self.pacer.delay("detail_scroll")

    async def visit_company_profile(self):
        """Sometimes look at the company page and come back

        Returns:
            bool: True if the detour was taken
        """
        if not self.pacer.chance("company_detour_probability"):
            return False

        try:
            company_link = await self.session.find_one(SELECTORS["company_link"])
        except ElementNotFound:
            print("  No company link on this listing")
            return False

        print("Checking company profile...")
        await self.session.click(company_link)
        await self.pacer.delay("company_read")
        await self.pacer.scroll_randomly(self.session)
        await self.pacer.delay("company_scroll")
        await self.session.go_back()
        await self.pacer.delay("company_back")
        return True

    async def complete_modal(self):
        """Submit a single-step application, abandon a multi-step one"""
        state = await detect_modal_state(self.session)

        if state.kind is ModalKind.NO_FOOTER_BUTTON:
            await dismiss_modal(self.session, self.pacer)
            return Outcome.error(NO_MODAL_CONTROL)

        if state.kind is ModalKind.MULTI_STEP:
            print("This is a multi-step application, skipping...")
            await abandon_application(self.session, self.pacer)
            await self.pacer.delay("multi_step_exit")
            return Outcome(OutcomeKind.SKIPPED_MULTI_STEP)

        print("This is a single-click application, submitting...")
        await self.session.click(state.submit_button)
        await self.pacer.delay("submitted")
        return Outcome(OutcomeKind.APPLIED)
