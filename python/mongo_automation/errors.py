"""
mongo_automation/errors.py

Exception types raised by mongo_automation. Failures from a caller-supplied
AuthEnabler and pydantic serialization errors are not wrapped; they reach the
caller of `build()` as raised.
"""

from __future__ import annotations

from typing import Optional


class AutomationConfigError(Exception):
    """Root of the errors raised by this package."""


class BuilderConsumedError(AutomationConfigError, RuntimeError):
    """`build()` was called on a builder that already produced a document."""


class AuthEnablerError(AutomationConfigError):
    """A bundled AuthEnabler could not derive the requested authentication state.

    Attributes:
        message (str): Description of the misconfiguration.
        mechanism (Optional[str]): The auth mechanism being enabled, if known.
    """

    def __init__(self, message: str, mechanism: Optional[str] = None) -> None:
        super().__init__(message)
        self.mechanism = mechanism


class AutomationConfigLoadError(AutomationConfigError, ValueError):
    """A stored automation-config document could not be parsed or validated.

    Attributes:
        source (Optional[str]): The file the document was read from, if any.
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source


__all__ = [
    "AutomationConfigError",
    "BuilderConsumedError",
    "AuthEnablerError",
    "AutomationConfigLoadError",
]
