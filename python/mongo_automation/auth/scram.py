"""
mongo_automation/auth/scram.py

SCRAM authentication for the automation agent:
 - ScramCredentials: the keyfile contents and agent password a deployment keeps
 - generate_scram_credentials(): random credentials for a new deployment
 - ScramEnabler: an AuthEnabler that switches the baseline Auth to SCRAM

The enabler never generates secrets itself. Callers create credentials once,
store them, and pass the same values on every build so repeated builds produce
identical documents.
"""

from __future__ import annotations

import base64
import logging
import secrets

from pydantic import BaseModel, Field

from mongo_automation.errors import AuthEnablerError
from mongo_automation.models.automation_config import Auth

logger = logging.getLogger(__name__)

SCRAM_SHA_256 = "SCRAM-SHA-256"
AUTOMATION_AGENT_NAME = "mms-automation"
AGENT_KEYFILE_PATH = "/var/lib/mongodb-mms-automation/authentication/keyfile"
AGENT_KEYFILE_PATH_WINDOWS = "%SystemDrive%\\MMSAutomation\\versions\\keyfile"

# mongod accepts keyfiles of 6 to 1024 base64 characters; 756 bytes encode to 1008.
_KEYFILE_RANDOM_BYTES = 756


class ScramCredentials(BaseModel):
    """
    Secrets backing SCRAM authentication for one deployment.

    Attributes:
        key: Shared keyfile contents used for intra-cluster authentication.
        password: Password of the automation agent user.
    """

    key: str = Field(..., description="Keyfile contents (base64 characters).")
    password: str = Field(..., description="Automation agent password.")


def generate_scram_credentials() -> ScramCredentials:
    """Create a fresh random keyfile and agent password."""
    key = base64.b64encode(secrets.token_bytes(_KEYFILE_RANDOM_BYTES)).decode("ascii")
    return ScramCredentials(key=key, password=secrets.token_urlsafe(32))


class ScramEnabler:
    """Enables SCRAM authentication with a fixed keyfile and agent password.

    Args:
        key: Keyfile contents shared by all members.
        password: Password for the automation agent user.
        auto_user: Name of the automation agent user.
        mechanism: Mechanism the agent authenticates with and the deployment allows.
    """

    def __init__(
        self,
        key: str,
        password: str,
        *,
        auto_user: str = AUTOMATION_AGENT_NAME,
        mechanism: str = SCRAM_SHA_256,
    ) -> None:
        self.key = key
        self.password = password
        self.auto_user = auto_user
        self.mechanism = mechanism

    @classmethod
    def from_credentials(cls, creds: ScramCredentials) -> ScramEnabler:
        return cls(key=creds.key, password=creds.password)

    def enable(self, auth: Auth) -> Auth:
        """
        Return a copy of `auth` with SCRAM turned on for the agent and deployment.

        Raises:
            AuthEnablerError: If the keyfile contents or the agent password is empty.
        """
        if not self.key:
            raise AuthEnablerError(
                "SCRAM requires keyfile contents, none were provided.",
                mechanism=self.mechanism,
            )
        if not self.password:
            raise AuthEnablerError(
                "SCRAM requires an automation agent password, none was provided.",
                mechanism=self.mechanism,
            )

        logger.debug(
            "Enabling %s for automation user %r", self.mechanism, self.auto_user
        )
        return auth.model_copy(
            update={
                "disabled": False,
                "authoritative_set": False,
                "auto_auth_mechanisms": [self.mechanism],
                "auto_auth_mechanism": self.mechanism,
                "deployment_auth_mechanisms": [self.mechanism],
                "auto_user": self.auto_user,
                "key": self.key,
                "keyfile": AGENT_KEYFILE_PATH,
                "keyfile_windows": AGENT_KEYFILE_PATH_WINDOWS,
                "auto_pwd": self.password,
            }
        )


__all__ = [
    "SCRAM_SHA_256",
    "ScramCredentials",
    "generate_scram_credentials",
    "ScramEnabler",
]
