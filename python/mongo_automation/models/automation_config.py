"""
mongo_automation/models/automation_config.py

Pydantic models for the automation-config document consumed by the MongoDB
automation agent:
 - Process (+ Args26, Net, MongoDBSSL, Storage, Replication, SystemLog)
 - ReplicaSet / ReplicaSetMember
 - Auth / MongoDBUser
 - SSL, Options, MongoDbVersionConfig / BuildConfig
 - AutomationConfig (the root document)

Serialized keys follow the agent's JSON layout (camelCase aliases). Fields that
the agent expects to be *absent* when unset are listed per model in
`omit_empty_fields` and dropped from the output when empty, while every other
field (including deliberately empty lists such as `usersWanted`) is always
emitted. The canonical bytes produced here are what version diffing compares.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Tuple

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)

_EMPTY_VALUES: Tuple[Any, ...] = (None, "", [], {})


class AutomationModel(BaseModel):
    """Base for every automation-config model.

    Models are frozen once built, accept both field names and aliases on input,
    and drop the fields named in `omit_empty_fields` when they hold an empty value.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def serialize_omitting_empty(
        self, handler: SerializerFunctionWrapHandler
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = handler(self)
        fields = type(self).model_fields
        omitted = {
            key
            for field_name in self.omit_empty_fields
            for key in (field_name, fields[field_name].alias)
            if key is not None and key in data and data[key] in _EMPTY_VALUES
        }
        return {key: value for key, value in data.items() if key not in omitted}

    def canonical_bytes(self) -> bytes:
        """Compact JSON, declaration order, by alias, empty omit-fields dropped."""
        return self.model_dump_json(by_alias=True).encode("utf-8")


# ----------------------------------------------------------------------
# 1) Enums
# ----------------------------------------------------------------------


class Topology(str, Enum):
    """Deployment shapes the builder knows how to describe."""

    REPLICA_SET = "ReplicaSet"


class SSLMode(str, Enum):
    """net.ssl.mode values understood by mongod."""

    DISABLED = "disabled"
    ALLOW_SSL = "allowSSL"
    PREFER_SSL = "preferSSL"
    REQUIRE_SSL = "requireSSL"


class ClientCertificateMode(str, Enum):
    """Whether the automation agent must present a client certificate."""

    OPTIONAL = "OPTIONAL"
    REQUIRE = "REQUIRE"


class ProcessType(str, Enum):
    """Kind of process the agent manages; only mongod is produced."""

    MONGOD = "mongod"


# ----------------------------------------------------------------------
# 2) Process and its mongod arguments
# ----------------------------------------------------------------------


class MongoDBSSL(AutomationModel):
    """TLS block of a mongod process (`args2_6.net.ssl`).

    Attributes:
        mode: The net.ssl.mode the process runs with.
        ca_file: Path to the CA bundle used to verify peers.
        pem_key_file: Path to the combined certificate + private key file.
        allow_connections_without_certificates: Accept clients that present no
            certificate. Kept true so new members stay reachable while certificates
            roll out.
    """

    mode: SSLMode
    ca_file: str = Field("", alias="CAFile")
    pem_key_file: str = Field("", alias="PEMKeyFile")
    allow_connections_without_certificates: bool = Field(
        False, alias="allowConnectionsWithoutCertificates"
    )


class Net(AutomationModel):
    """Network options of a mongod (`args2_6.net`); `ssl` is absent unless TLS is on."""

    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset({"ssl"})

    port: int = 27017
    ssl: Optional[MongoDBSSL] = None


class EngineConfig(AutomationModel):
    """WiredTiger engine tuning (cache size in GB)."""

    cache_size_gb: float = Field(1.0, alias="cacheSizeGB")


class WiredTiger(AutomationModel):
    engine_config: EngineConfig = Field(
        default_factory=EngineConfig, alias="engineConfig"
    )


class Storage(AutomationModel):
    db_path: str = Field("/data", alias="dbPath")
    wired_tiger: WiredTiger = Field(default_factory=WiredTiger, alias="wiredTiger")


class Replication(AutomationModel):
    """Replication options; names the replica set the process joins."""

    repl_set_name: str = Field("", alias="replSetName")


class Args26(AutomationModel):
    """The `args2_6` section: mongod startup options grouped as in mongod.conf."""

    net: Net = Field(default_factory=Net)
    storage: Storage = Field(default_factory=Storage)
    replication: Replication = Field(default_factory=Replication)


class SystemLog(AutomationModel):
    destination: str = "file"
    path: str = "/var/log/mongodb-mms-automation/mongodb.log"


class Process(AutomationModel):
    """One mongod instance managed by the agent.

    Attributes:
        name: Process name, `<name>-<index>`.
        hostname: Fully-qualified hostname, `<name>-<index>.<domain>`.
        args2_6: mongod startup arguments (network, storage, replication).
        feature_compatibility_version: FCV the agent sets on the process.
        process_type: Always mongod for replica-set members.
        version: MongoDB engine version to run.
        auth_schema_version: Authentication schema version (5 for SCRAM-era servers).
        system_log: Where mongod writes its log.
    """

    name: str
    hostname: str
    args2_6: Args26 = Field(default_factory=Args26)
    feature_compatibility_version: str = Field(
        "", alias="featureCompatibilityVersion"
    )
    process_type: ProcessType = Field(ProcessType.MONGOD, alias="processType")
    version: str = ""
    auth_schema_version: int = Field(5, alias="authSchemaVersion")
    system_log: SystemLog = Field(default_factory=SystemLog, alias="systemLog")


# ----------------------------------------------------------------------
# 3) Replica set
# ----------------------------------------------------------------------


class ReplicaSetMember(AutomationModel):
    """Membership record pairing a process (by name) with its member `_id`."""

    id: int = Field(alias="_id")
    host: str
    priority: int = 1
    arbiter_only: bool = Field(False, alias="arbiterOnly")
    votes: int = 1


class ReplicaSet(AutomationModel):
    """A replica set: its name (`_id`), members and protocol version."""

    id: str = Field(alias="_id")
    members: List[ReplicaSetMember] = Field(default_factory=list)
    protocol_version: str = Field("1", alias="protocolVersion")


# ----------------------------------------------------------------------
# 4) Authentication
# ----------------------------------------------------------------------


class Role(AutomationModel):
    """A role granted to a user on a database."""

    role: str
    db: str


class MongoDBUser(AutomationModel):
    """A database user the agent should create and keep in sync."""

    mechanisms: List[str] = Field(default_factory=list)
    roles: List[Role] = Field(default_factory=list)
    username: str = Field(alias="user")
    database: str = Field(alias="db")
    authentication_restrictions: List[str] = Field(
        default_factory=list, alias="authenticationRestrictions"
    )


class Auth(AutomationModel):
    """Deployment-wide authentication settings.

    `usersWanted` is always present (an empty list means "manage no users"); the
    remaining mechanism/credential fields are absent when unset, which the agent
    reads as "do not configure authentication".
    """

    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset(
        {
            "auto_auth_mechanisms",
            "auto_auth_mechanism",
            "deployment_auth_mechanisms",
            "auto_user",
            "key",
            "keyfile",
            "keyfile_windows",
            "auto_pwd",
        }
    )

    users: List[MongoDBUser] = Field(default_factory=list, alias="usersWanted")
    disabled: bool = False
    authoritative_set: bool = Field(False, alias="authoritativeSet")
    auto_auth_mechanisms: List[str] = Field(
        default_factory=list, alias="autoAuthMechanisms"
    )
    auto_auth_mechanism: str = Field("", alias="autoAuthMechanism")
    deployment_auth_mechanisms: List[str] = Field(
        default_factory=list, alias="deploymentAuthMechanisms"
    )
    auto_user: str = Field("", alias="autoUser")
    key: str = ""
    keyfile: str = ""
    keyfile_windows: str = Field("", alias="keyfileWindows")
    auto_pwd: str = Field("", alias="autoPwd")


def disabled_auth() -> Auth:
    """The baseline every build starts from: no users, authentication off."""
    return Auth(users=[], disabled=True, authoritative_set=False)


# ----------------------------------------------------------------------
# 5) Agent TLS, options and the version catalog
# ----------------------------------------------------------------------


class SSL(AutomationModel):
    """TLS settings for the automation agent's own connections."""

    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset({"ca_file_path"})

    ca_file_path: str = Field("", alias="CAFilePath")
    client_certificate_mode: ClientCertificateMode = Field(
        ClientCertificateMode.OPTIONAL, alias="clientCertificateMode"
    )


class Options(AutomationModel):
    """Global agent options."""

    download_base: str = Field("", alias="downloadBase")


class BuildConfig(AutomationModel):
    """One downloadable build of a MongoDB version.

    `modules` stays None until the build is added to a builder, which normalizes
    it to an empty list so it serializes as `[]` rather than `null`.
    """

    platform: str = ""
    url: str = ""
    git_version: str = Field("", alias="gitVersion")
    architecture: str = ""
    flavor: str = ""
    min_os_version: str = Field("", alias="minOsVersion")
    max_os_version: str = Field("", alias="maxOsVersion")
    modules: Optional[List[str]] = None


class MongoDbVersionConfig(AutomationModel):
    """A MongoDB version in the catalog, with the builds the agent may download."""

    name: str
    builds: List[BuildConfig] = Field(default_factory=list)


# ----------------------------------------------------------------------
# 6) Root document
# ----------------------------------------------------------------------


class AutomationConfig(AutomationModel):
    """The automation-config document handed to the automation agent.

    Attributes:
        version: Change counter; the agent only acts on a document whose version
            moved forward.
        processes: One mongod per replica-set member, in member order.
        replica_sets: The replica sets formed by those processes.
        auth: Authentication settings produced by the configured AuthEnabler.
        ssl: TLS settings for the agent itself.
        versions: Catalog of installable MongoDB versions.
        options: Global agent options (download base directory).

    Only attribute assignment is frozen. The list fields are plain lists and must
    not be mutated in place; use `model_copy(update=...)` to derive a new document.
    """

    version: int = 0
    processes: List[Process] = Field(default_factory=list)
    replica_sets: List[ReplicaSet] = Field(default_factory=list, alias="replicaSets")
    auth: Auth = Field(default_factory=Auth)
    ssl: SSL = Field(default_factory=SSL)
    versions: List[MongoDbVersionConfig] = Field(
        default_factory=list, alias="mongoDbVersions"
    )
    options: Options = Field(default_factory=Options)

    def to_json(self, *, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, raw: str) -> AutomationConfig:
        return cls.model_validate_json(raw)

    def to_yaml(self) -> str:
        """
        Serialize to YAML with PyYAML, keeping the declaration order of fields.
        """
        return yaml.safe_dump(
            self.model_dump(mode="json", by_alias=True), sort_keys=False
        )

    @classmethod
    def from_yaml(cls, yaml_str: str) -> AutomationConfig:
        data = yaml.safe_load(yaml_str)
        return cls.model_validate(data if data is not None else {})


__all__ = [
    "AutomationModel",
    "Topology",
    "SSLMode",
    "ClientCertificateMode",
    "ProcessType",
    "MongoDBSSL",
    "Net",
    "EngineConfig",
    "WiredTiger",
    "Storage",
    "Replication",
    "Args26",
    "SystemLog",
    "Process",
    "ReplicaSetMember",
    "ReplicaSet",
    "Role",
    "MongoDBUser",
    "Auth",
    "disabled_auth",
    "SSL",
    "Options",
    "BuildConfig",
    "MongoDbVersionConfig",
    "AutomationConfig",
]
