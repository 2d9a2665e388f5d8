"""
mongo_automation/automation/factory.py

Maps ReplicaSetSettings onto a fresh AutomationConfigBuilder.
"""

from __future__ import annotations

from mongo_automation.auth.enabler import AuthEnabler
from mongo_automation.automation.builder import AutomationConfigBuilder
from mongo_automation.models.automation_config import AutomationConfig
from mongo_automation.settings import ReplicaSetSettings


def configure_builder(
    settings: ReplicaSetSettings,
    enabler: AuthEnabler,
    previous: AutomationConfig,
) -> AutomationConfigBuilder:
    """
    Create a builder populated from `settings`.

    Args:
        settings: Deployment parameters (env and/or YAML).
        enabler: The AuthEnabler the build delegates authentication to.
        previous: The automation config currently deployed, the diff baseline.

    Returns:
        A builder ready for `build()`.
    """
    builder = (
        AutomationConfigBuilder()
        .set_enabler(enabler)
        .set_topology(settings.topology)
        .set_members(settings.members)
        .set_domain(settings.domain)
        .set_name(settings.name)
        .set_fcv(settings.fcv)
        .set_mongodb_version(settings.version)
        .set_tls(settings.tls_ca_file, settings.tls_cert_key_file, settings.tls_mode)
        .set_previous_automation_config(previous)
    )
    for version in settings.versions:
        builder.add_version(version)
    return builder
