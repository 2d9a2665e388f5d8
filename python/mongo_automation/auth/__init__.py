"""
mongo_automation/auth/__init__.py

AuthEnabler implementations bundled with mongo_automation, plus
`enabler_from_settings` to pick one from ReplicaSetSettings.
"""

from mongo_automation.auth.enabler import AuthEnabler, NoAuthEnabler
from mongo_automation.auth.scram import (
    ScramCredentials,
    ScramEnabler,
    generate_scram_credentials,
)
from mongo_automation.settings import AuthMode, ReplicaSetSettings


def enabler_from_settings(settings: ReplicaSetSettings) -> AuthEnabler:
    if settings.auth_mode == AuthMode.SCRAM:
        return ScramEnabler(key=settings.scram_key, password=settings.scram_password)
    return NoAuthEnabler()


__all__ = [
    "AuthEnabler",
    "NoAuthEnabler",
    "ScramCredentials",
    "ScramEnabler",
    "generate_scram_credentials",
    "enabler_from_settings",
]
