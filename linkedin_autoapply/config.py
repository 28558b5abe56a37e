"""Configuration, timing profiles and selectors for the application run"""

import os

from dotenv import load_dotenv

from linkedin_autoapply.errors import SessionSetupError

# ========================================
# TIMING PROFILES
# ========================================
# All delays are in whole seconds, (min, max) inclusive.
# Each delay is randomized by Pacer.delay() for organic behavior.

TIMING_PROFILES = {
    "default": {
        # Page load and sign-in
        "page_load": (5, 10),
        "sign_in": (2, 5),
        "credential_entry": (1, 3),
        "login_settle": (7, 12),
        "results_settle": (2, 5),
        # View-only browsing
        "view_only_read": (5, 15),
        "view_only_scroll": (3, 8),
        # Listing details
        "open_listing": (3, 7),
        "detail_scroll": (2, 5),
        # Company profile detour
        "company_read": (5, 15),
        "company_scroll": (3, 7),
        "company_back": (3, 6),
        # Easy Apply modal
        "no_apply_button": (2, 4),
        "apply_modal": (4, 7),
        "dismiss_settle": (1, 3),
        "multi_step_exit": (2, 4),
        "submitted": (5, 10),
        "modal_close": (2, 4),
        # Between listings
        "cooldown": (10, 30),
    },
    "dev_test": {
        # Roughly 3x faster, only for supervised test runs
        "page_load": (2, 4),
        "sign_in": (1, 2),
        "credential_entry": (0, 1),
        "login_settle": (3, 5),
        "results_settle": (1, 2),
        "view_only_read": (2, 5),
        "view_only_scroll": (1, 3),
        "open_listing": (1, 3),
        "detail_scroll": (1, 2),
        "company_read": (2, 5),
        "company_scroll": (1, 3),
        "company_back": (1, 2),
        "no_apply_button": (1, 2),
        "apply_modal": (2, 3),  # modal needs time to render
        "dismiss_settle": (1, 1),
        "multi_step_exit": (1, 2),
        "submitted": (2, 4),
        "modal_close": (1, 2),
        "cooldown": (3, 8),
    },
}


def _profile_violations(profile):
    violations = []
    for key, (low, high) in profile.items():
        if low < 0:
            violations.append(f"{key}: min={low}s is negative")
        if low > high:
            violations.append(f"{key}: min={low}s > max={high}s")
    missing = set(TIMING_PROFILES["default"]) - set(profile)
    for key in sorted(missing):
        violations.append(f"{key}: missing from profile")
    return violations


def get_active_timing(mode="default"):
    """Get the timing profile for a speed mode, falling back to default if invalid"""
    profile = TIMING_PROFILES.get(mode)
    if profile is None:
        print(f"⚠️ Unknown timing profile '{mode}' - using default")
        return dict(TIMING_PROFILES["default"])

    violations = _profile_violations(profile)
    if violations:
        print("⚠️ TIMING PROFILE VIOLATIONS - Falling back to default profile:")
        for violation in violations:
            print(f"  - {violation}")
        return dict(TIMING_PROFILES["default"])

    return dict(profile)


# ========================================
# HUMAN-LIKE BEHAVIOR
# ========================================

BEHAVIOR = {
    # Chance of only viewing a listing (never before the first application)
    "view_only_probability": 0.2,
    # Chance of visiting the company profile before applying
    "company_detour_probability": 0.3,
}

# Pixel range for random scrolls, [min, max)
SCROLL_RANGE = (100, 500)

# ========================================
# SELECTORS
# ========================================
# Semantic role -> CSS selector. These track LinkedIn's markup and break first.

SELECTORS = {
    "listing_title": ".job-card-list__title",
    "company_link": ".jobs-unified-top-card__company-name",
    "apply_button": ".jobs-s-apply button",
    "modal_footer_button": "footer button",
    "modal_dismiss": ".artdeco-modal__dismiss",
    "confirm_dialog_button": ".artdeco-modal__confirm-dialog-btn",
    "sign_in_link": 'a:text-is("Sign in")',
    "username": "#username",
    "password": "#password",
}

# Footer text that marks a multi-step application
MULTI_STEP_MARKER = "Next"

# ========================================
# BROWSER
# ========================================

USER_AGENTS = [
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/100.0.4896.75 Safari/537.36",
    "Mozilla/5.0 (X11; Ubuntu; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/99.0.4844.51 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/101.0.4951.64 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/102.0.5005.61 Safari/537.36",
    "Mozilla/5.0 (X11; Fedora; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/100.0.4896.127 Safari/537.36",
]

CHROMIUM_ARGS = [
    "--disable-gpu",
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-blink-features=AutomationControlled",
]

NAVIGATION_TIMEOUT_MS = 60000

# ========================================
# RUN DEFAULTS
# ========================================

DEFAULT_MAX_APPLICATIONS = 5
# Candidates examined per application target, to absorb skips
CANDIDATE_MULTIPLIER = 3
LOG_FILE = "log.jsonl"


def load_credentials(env_file=None):
    """
    Load LinkedIn credentials from the environment (and a .env file if present).

    Returns:
        tuple: (username, password)

    Raises:
        SessionSetupError: if either variable is missing
    """
    load_dotenv(env_file)

    username = os.environ.get("LINKEDIN_ID")
    password = os.environ.get("LINKEDIN_KEY")
    missing = [
        name
        for name, value in (("LINKEDIN_ID", username), ("LINKEDIN_KEY", password))
        if not value
    ]
    if missing:
        raise SessionSetupError(f"Missing {', '.join(missing)}")

    return username, password
