"""Sign-in flow"""

from linkedin_autoapply.config import SELECTORS
from linkedin_autoapply.errors import ElementNotFound


async def sign_in(session, pacer, username, password):
    """
    Sign in through the login form if the page asks for it.

    An absent "Sign in" link or username field means the session is already
    authenticated, so both are optional.

    Returns:
        bool: True if credentials were submitted
    """
    try:
        login_button = await session.find_one(SELECTORS["sign_in_link"])
    except ElementNotFound as e:
        print(f"Sign-in button not found, may already be logged in: {e}")
    else:
        print("Found sign-in button, clicking...")
        await session.click(login_button)
        await pacer.delay("sign_in")

    try:
        username_field = await session.find_one(SELECTORS["username"])
    except ElementNotFound:
        print("Already logged in, continuing...")
        return False

    print("Logging in...")
    await session.send_keys(username_field, username)
    await pacer.delay("credential_entry")

    password_field = await session.find_one(SELECTORS["password"])
    await session.send_keys(password_field, password)
    await pacer.delay("credential_entry")

    await session.press(password_field, "Enter")
    print("Login credentials submitted, waiting for page load...")
    await pacer.delay("login_settle")
    return True
