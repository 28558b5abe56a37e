"""Browser session management"""

import functools
import tempfile

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from linkedin_autoapply import config
from linkedin_autoapply.errors import ElementNotFound, SessionError, SessionSetupError


def _session_command(method):
    """Re-raise Playwright failures from a session command as SessionError"""

    @functools.wraps(method)
    async def wrapper(self, *args, **kwargs):
        try:
            return await method(self, *args, **kwargs)
        except PlaywrightError as e:
            raise SessionError(f"{method.__name__} failed: {e}") from e

    return wrapper


class BrowserSession:
    """
    Facade over one Playwright page.

    Every command is awaited on its own; the page is never driven by two
    commands at once. find_one() raises ElementNotFound for a missing element,
    find_all() returns an empty list. Anything else that goes wrong in the
    browser is raised as SessionError.
    """

    def __init__(self, playwright, context, page, browser=None, profile_dir=None):
        self._playwright = playwright
        self._context = context
        self._page = page
        self._browser = browser
        self._profile_dir = profile_dir
        self._closed = False

    @_session_command
    async def navigate(self, url):
        await self._page.goto(
            url, wait_until="domcontentloaded", timeout=config.NAVIGATION_TIMEOUT_MS
        )

    @_session_command
    async def find_one(self, selector):
        element = await self._page.query_selector(selector)
        if element is None:
            raise ElementNotFound(selector)
        return element

    @_session_command
    async def find_all(self, selector):
        return await self._page.query_selector_all(selector)

    @_session_command
    async def click(self, element):
        await element.click()

    @_session_command
    async def send_keys(self, element, text):
        await element.type(text)

    @_session_command
    async def press(self, element, key):
        await element.press(key)

    @_session_command
    async def read_text(self, element):
        return (await element.inner_text()).strip()

    @_session_command
    async def scroll_by(self, pixels):
        await self._page.evaluate("px => window.scrollBy(0, px)", pixels)

    @_session_command
    async def go_back(self):
        await self._page.go_back(wait_until="domcontentloaded")

    async def close(self):
        """Close the browser and remove the temporary profile. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        print("Closing browser...")
        try:
            await self._context.close()
            if self._browser is not None:
                await self._browser.close()
        except PlaywrightError as e:
            print(f"  ⚠️ Error while closing browser: {e}")
        finally:
            try:
                await self._playwright.stop()
            finally:
                if self._profile_dir is not None:
                    self._profile_dir.cleanup()


async def launch_session(user_agent, headless=True, cdp_endpoint=None):
    """
    Launch (or connect to) Chromium and return a BrowserSession.

    A fresh temporary profile directory is used for each local launch so runs
    never share cookies or lock each other's profile. With cdp_endpoint the
    session attaches to an already running browser instead.
    """
    print(f"Using user agent: {user_agent}")

    p = await async_playwright().start()
    profile_dir = None
    browser = None
    try:
        if cdp_endpoint:
            print(f"Connecting to browser at {cdp_endpoint}...")
            browser = await p.chromium.connect_over_cdp(cdp_endpoint)
            context = await browser.new_context(user_agent=user_agent)
        else:
            print("Launching browser...")
            profile_dir = tempfile.TemporaryDirectory(prefix="linkedin_autoapply_")
            context = await p.chromium.launch_persistent_context(
                user_data_dir=profile_dir.name,
                headless=headless,
                args=config.CHROMIUM_ARGS,
                user_agent=user_agent,
                viewport={"width": 1280, "height": 720},
                locale="en-US",
                ignore_default_args=["--enable-automation"],
            )

        page = context.pages[0] if context.pages else await context.new_page()
        await page.set_extra_http_headers({
            "Accept-Language": "en-US,en;q=0.9",
        })
    except PlaywrightError as e:
        if browser is not None:
            await browser.close()
        await p.stop()
        if profile_dir is not None:
            profile_dir.cleanup()
        raise SessionSetupError(f"Could not start browser session: {e}") from e

    print("✓ Browser session ready")
    return BrowserSession(p, context, page, browser=browser, profile_dir=profile_dir)
