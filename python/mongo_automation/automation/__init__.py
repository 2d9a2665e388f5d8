"""
mongo_automation/automation/__init__.py

Exports the builder and the settings-driven factory.
"""

from mongo_automation.automation.builder import (
    AutomationConfigBuilder,
    DEFAULT_DOWNLOAD_BASE,
    REPLICA_SET_PROTOCOL_VERSION,
)
from mongo_automation.automation.factory import configure_builder

__all__ = [
    "AutomationConfigBuilder",
    "DEFAULT_DOWNLOAD_BASE",
    "REPLICA_SET_PROTOCOL_VERSION",
    "configure_builder",
]
