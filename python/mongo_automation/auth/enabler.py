"""
mongo_automation/auth/enabler.py

The AuthEnabler contract: turn the disabled baseline Auth into the Auth the
deployment should run with. The builder only ever sees this protocol.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mongo_automation.models.automation_config import Auth


@runtime_checkable
class AuthEnabler(Protocol):
    """Derives the desired Auth from a baseline.

    Implementations must be deterministic for the same baseline and external
    policy state, otherwise every build registers as a change. They may raise;
    the exception aborts the build.
    """

    def enable(self, auth: Auth) -> Auth: ...


class NoAuthEnabler:
    """Leaves authentication disabled."""

    def enable(self, auth: Auth) -> Auth:
        return auth


__all__ = ["AuthEnabler", "NoAuthEnabler"]
