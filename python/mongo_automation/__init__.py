"""
mongo_automation

Builds the automation-config document that describes a MongoDB replica set to
the automation agent, with change-aware versioning.
"""

from mongo_automation.automation.builder import AutomationConfigBuilder
from mongo_automation.models.automation_config import AutomationConfig

__all__ = ["AutomationConfigBuilder", "AutomationConfig"]
