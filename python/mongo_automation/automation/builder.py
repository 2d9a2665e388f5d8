"""
mongo_automation/automation/builder.py

AutomationConfigBuilder accumulates the parameters of a replica-set deployment
through chained setters and turns them into an AutomationConfig with a single
call to `build()`.

The version counter of the result is carried over from the previous document
and moves forward by one only when the canonical serialization of the new
document differs from the previous one. Comparing serialized bytes rather than
model equality keeps absent omit-when-empty fields equal to their empty
counterparts, so rebuilding from unchanged inputs never bumps the version.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from mongo_automation.auth.enabler import AuthEnabler
from mongo_automation.automation.process import (
    ProcessOption,
    new_process,
    new_replica_set_member,
    to_hostname,
    to_process_name,
    with_fcv,
    with_tls,
)
from mongo_automation.errors import AuthEnablerError, BuilderConsumedError
from mongo_automation.models.automation_config import (
    SSL,
    AutomationConfig,
    ClientCertificateMode,
    MongoDbVersionConfig,
    Options,
    Process,
    ReplicaSet,
    SSLMode,
    Topology,
    disabled_auth,
)

logger = logging.getLogger(__name__)

DEFAULT_DOWNLOAD_BASE = "/var/lib/mongodb-mms-automation"
REPLICA_SET_PROTOCOL_VERSION = "1"


class AutomationConfigBuilder:
    """Mutable parameter holder for one automation-config computation.

    Setters store their argument without validation and return the builder, so
    calls chain in any order. `build()` consumes the builder: a second call
    raises BuilderConsumedError.
    """

    def __init__(self) -> None:
        self._enabler: Optional[AuthEnabler] = None
        self._topology = Topology.REPLICA_SET
        self._members = 0
        self._domain = ""
        self._name = ""
        self._fcv = ""
        self._mongodb_version = ""
        self._previous_ac = AutomationConfig()
        self._tls_ca_file = ""
        self._tls_cert_and_key_file = ""
        self._tls_mode = SSLMode.DISABLED
        self._versions: List[MongoDbVersionConfig] = []
        self._consumed = False

    def set_enabler(self, enabler: AuthEnabler) -> AutomationConfigBuilder:
        self._enabler = enabler
        return self

    def set_topology(self, topology: Topology) -> AutomationConfigBuilder:
        self._topology = Topology(topology)
        return self

    def set_members(self, members: int) -> AutomationConfigBuilder:
        self._members = members
        return self

    def set_domain(self, domain: str) -> AutomationConfigBuilder:
        self._domain = domain
        return self

    def set_name(self, name: str) -> AutomationConfigBuilder:
        self._name = name
        return self

    def set_fcv(self, fcv: str) -> AutomationConfigBuilder:
        self._fcv = fcv
        return self

    def set_tls(
        self, ca_file: str, cert_and_key_file: str, mode: SSLMode
    ) -> AutomationConfigBuilder:
        """Set all three TLS facets at once; see `is_tls_enabled`."""
        self._tls_ca_file = ca_file
        self._tls_cert_and_key_file = cert_and_key_file
        self._tls_mode = mode
        return self

    def set_mongodb_version(self, version: str) -> AutomationConfigBuilder:
        self._mongodb_version = version
        return self

    def add_version(self, version: MongoDbVersionConfig) -> AutomationConfigBuilder:
        """
        Append an installable version to the catalog.

        Builds whose `modules` is unset get an empty list, so the catalog always
        serializes `"modules": []` and never `null`.
        """
        builds = [
            (
                build
                if build.modules is not None
                else build.model_copy(update={"modules": []})
            )
            for build in version.builds
        ]
        self._versions.append(version.model_copy(update={"builds": builds}))
        return self

    def set_previous_automation_config(
        self, previous_ac: AutomationConfig
    ) -> AutomationConfigBuilder:
        self._previous_ac = previous_ac
        return self

    def is_tls_enabled(self) -> bool:
        """
        TLS counts as enabled only with a CA file, a cert+key file and a mode other
        than disabled. Anything less is treated as TLS off.
        """
        return (
            self._tls_ca_file != ""
            and self._tls_cert_and_key_file != ""
            and self._tls_mode != SSLMode.DISABLED
        )

    def _process_options(self) -> List[ProcessOption]:
        # FCV first, TLS second.
        opts = [with_fcv(self._fcv)]
        if self.is_tls_enabled():
            opts.append(
                with_tls(self._tls_ca_file, self._tls_cert_and_key_file, self._tls_mode)
            )
        return opts

    def _build_processes(self) -> List[Process]:
        opts = self._process_options()
        return [
            new_process(
                to_process_name(self._name, i),
                to_hostname(self._name, i, self._domain),
                self._mongodb_version,
                self._name,
                *opts,
            )
            for i in range(self._members)
        ]

    def build(self) -> AutomationConfig:
        """
        Assemble the automation config and decide its version.

        Returns:
            The new AutomationConfig. Its version equals the previous version when
            nothing observable changed, and the previous version + 1 otherwise.

        Raises:
            BuilderConsumedError: If this builder already produced a document.
            AuthEnablerError: If no AuthEnabler was set.
            Exception: Whatever the AuthEnabler raises, unchanged.
            pydantic_core.PydanticSerializationError: If a document cannot be
                serialized for comparison.
        """
        if self._consumed:
            raise BuilderConsumedError(
                "This builder already produced an automation config; create a new one."
            )
        if self._enabler is None:
            raise AuthEnablerError("No AuthEnabler configured on the builder.")

        processes = self._build_processes()
        members = [new_replica_set_member(p, i) for i, p in enumerate(processes)]
        logger.debug(
            "Derived %d processes for %s %r: %s",
            len(processes),
            self._topology.value,
            self._name,
            [p.hostname for p in processes],
        )

        try:
            auth = self._enabler.enable(disabled_auth())
        except Exception as exc:
            logger.error("AuthEnabler failed for %r: %s", self._name, exc)
            raise

        ssl = SSL(client_certificate_mode=ClientCertificateMode.OPTIONAL)
        # The agent has to trust the certificate the servers present.
        if self.is_tls_enabled():
            ssl = ssl.model_copy(update={"ca_file_path": self._tls_ca_file})

        current_ac = AutomationConfig(
            version=self._previous_ac.version,
            processes=processes,
            replica_sets=[
                ReplicaSet(
                    id=self._name,
                    members=members,
                    protocol_version=REPLICA_SET_PROTOCOL_VERSION,
                )
            ],
            versions=list(self._versions),
            options=Options(download_base=DEFAULT_DOWNLOAD_BASE),
            auth=auth,
            ssl=ssl,
        )

        if self._previous_ac.canonical_bytes() != current_ac.canonical_bytes():
            current_ac = current_ac.model_copy(
                update={"version": current_ac.version + 1}
            )
            logger.info(
                "Automation config for %r changed, version %d -> %d",
                self._name,
                self._previous_ac.version,
                current_ac.version,
            )
        else:
            logger.info(
                "Automation config for %r unchanged at version %d",
                self._name,
                current_ac.version,
            )

        self._consumed = True
        return current_ac


__all__ = [
    "AutomationConfigBuilder",
    "DEFAULT_DOWNLOAD_BASE",
    "REPLICA_SET_PROTOCOL_VERSION",
]
