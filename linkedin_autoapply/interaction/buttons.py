"""Modal button interactions"""

from linkedin_autoapply.config import SELECTORS
from linkedin_autoapply.errors import ElementNotFound


async def dismiss_modal(session, pacer, settle="modal_close"):
    """Click the modal's close (X) button if there is one

    Returns:
        bool: True if a close button was clicked
    """
    try:
        close_button = await session.find_one(SELECTORS["modal_dismiss"])
    except ElementNotFound:
        return False

    await session.click(close_button)
    print("  ✓ Closed modal")
    await pacer.delay(settle)
    return True


async def confirm_discard(session):
    """Confirm the "discard application?" dialog shown after closing a started application

    The dialog lists a cancel action first and the discard action second, so
    with two or more buttons the second one is clicked. A lone button is
    clicked as-is; no buttons means the modal closed without asking.

    Returns:
        int | None: index of the clicked button
    """
    discard_buttons = await session.find_all(SELECTORS["confirm_dialog_button"])

    if len(discard_buttons) > 1:
        index = 1
    elif len(discard_buttons) == 1:
        index = 0
    else:
        print("  No discard confirmation shown")
        return None

    await session.click(discard_buttons[index])
    print(f"  ✓ Confirmed discard (button {index + 1} of {len(discard_buttons)})")
    return index


async def abandon_application(session, pacer):
    """Close a multi-step application and discard the draft

    Returns:
        bool: True if a close button was found
    """
    if not await dismiss_modal(session, pacer, settle="dismiss_settle"):
        print("  ⚠️ No close button on multi-step modal")
        return False

    await confirm_discard(session)
    return True
