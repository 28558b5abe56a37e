"""Exceptions raised by the session facade and run setup"""


class AutoApplyError(Exception):
    """Base class for errors raised by this package"""


class ElementNotFound(AutoApplyError):
    """An optional page element is absent. Callers usually treat this as a branch."""

    def __init__(self, selector):
        super().__init__(f"No element matches {selector!r}")
        self.selector = selector


class SessionError(AutoApplyError):
    """The browser session failed to carry out a command"""


class SessionSetupError(AutoApplyError):
    """The run cannot start: no browser session or no credentials"""
