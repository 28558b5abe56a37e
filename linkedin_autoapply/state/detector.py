"""Easy Apply modal state detection"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from linkedin_autoapply.config import MULTI_STEP_MARKER, SELECTORS
from linkedin_autoapply.errors import ElementNotFound


class ModalKind(Enum):
    NO_FOOTER_BUTTON = "MODAL_NO_FOOTER_BUTTON"
    SINGLE_STEP = "MODAL_SINGLE_STEP"
    MULTI_STEP = "MODAL_MULTI_STEP"


@dataclass(frozen=True)
class ModalState:
    kind: ModalKind
    # Footer button to click when kind is SINGLE_STEP
    submit_button: Any = None


def classify_footer_text(text):
    """A footer button labelled "Next" means more pages follow; anything else submits"""
    if MULTI_STEP_MARKER in text:
        return ModalKind.MULTI_STEP
    return ModalKind.SINGLE_STEP


async def detect_modal_state(session):
    """Detect the state of the modal opened by Easy Apply - NO ACTIONS, only detection

    Only the footer action button is inspected:
    1. No footer button - modal is missing or in an unknown state
    2. Footer button text contains "Next" - multi-step application
    3. Any other footer button - single-step application, button submits
    """
    try:
        footer_button = await session.find_one(SELECTORS["modal_footer_button"])
    except ElementNotFound as e:
        print(f"Could not find submit button: {e}")
        return ModalState(ModalKind.NO_FOOTER_BUTTON)

    button_text = await session.read_text(footer_button)
    kind = classify_footer_text(button_text)
    print(f"  [State Detector] Footer button: '{button_text}' -> {kind.value}")

    if kind is ModalKind.SINGLE_STEP:
        return ModalState(kind, submit_button=footer_button)
    return ModalState(kind)
