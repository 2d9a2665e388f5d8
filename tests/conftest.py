# tests/conftest.py
"""
Shared fixtures for the mongo_automation tests.

- make_builder: a factory returning a fully-populated AutomationConfigBuilder
  (name/domain/FCV/version set, NoAuthEnabler by default)
- previous_v5: a three-member, TLS-off, auth-off document at version 5, as if
  read back from a running deployment

Fixtures do no I/O and hold no global state.
"""

from typing import Callable, Optional, Tuple

import pytest

from mongo_automation.auth.enabler import AuthEnabler, NoAuthEnabler
from mongo_automation.automation.builder import AutomationConfigBuilder
from mongo_automation.models.automation_config import (
    AutomationConfig,
    SSLMode,
    Topology,
)

BuilderFactory = Callable[..., AutomationConfigBuilder]


@pytest.fixture
def make_builder() -> BuilderFactory:
    def _make(
        *,
        members: int = 3,
        name: str = "rs0",
        domain: str = "svc.local",
        fcv: str = "4.4",
        mongodb_version: str = "4.4.0",
        enabler: Optional[AuthEnabler] = None,
        tls: Optional[Tuple[str, str, SSLMode]] = None,
        previous: Optional[AutomationConfig] = None,
    ) -> AutomationConfigBuilder:
        builder = (
            AutomationConfigBuilder()
            .set_enabler(enabler if enabler is not None else NoAuthEnabler())
            .set_topology(Topology.REPLICA_SET)
            .set_members(members)
            .set_name(name)
            .set_domain(domain)
            .set_fcv(fcv)
            .set_mongodb_version(mongodb_version)
        )
        if tls is not None:
            builder.set_tls(*tls)
        if previous is not None:
            builder.set_previous_automation_config(previous)
        return builder

    return _make


@pytest.fixture
def previous_v5(make_builder: BuilderFactory) -> AutomationConfig:
    """Three members, TLS disabled, auth disabled, version 5."""
    first = make_builder(members=3).build()
    return first.model_copy(update={"version": 5})
