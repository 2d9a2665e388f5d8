# mongo_automation/settings.py

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mongo_automation.models.automation_config import (
    MongoDbVersionConfig,
    SSLMode,
    Topology,
)


class AuthMode(str, Enum):
    NONE = "none"
    SCRAM = "scram"


class ReplicaSetSettings(BaseSettings):
    """
    Pydantic settings describing one replica-set deployment.
    By default, these fields map to environment variables prefixed with `MONGODB_`.
    For example, `MONGODB_NAME`, `MONGODB_MEMBERS`, `MONGODB_TLS_MODE`, etc.
    """

    name: str = "mongodb"
    members: int = 3
    domain: str = "mongodb-svc.default.svc.cluster.local"
    topology: Topology = Topology.REPLICA_SET
    fcv: str = "4.4"
    version: str = "4.4.0"

    tls_ca_file: str = ""
    tls_cert_key_file: str = ""
    tls_mode: SSLMode = SSLMode.DISABLED

    auth_mode: AuthMode = AuthMode.NONE
    scram_key: str = ""  # keyfile contents, only read when auth_mode=scram
    scram_password: str = ""

    # Installable versions appended to the catalog, usually supplied via YAML.
    versions: List[MongoDbVersionConfig] = Field(default_factory=list)

    log_level: str = "INFO"

    # YAML reads `fcv: 4.4` as a float.
    model_config = SettingsConfigDict(
        env_prefix="MONGODB_", coerce_numbers_to_str=True
    )

    @classmethod
    def from_yaml(cls, yaml_str: str) -> ReplicaSetSettings:
        """
        Build settings from a YAML mapping. Keys present in the YAML take precedence
        over `MONGODB_*` environment variables; everything else still comes from the
        environment or the defaults.
        """
        data: Dict[str, Any] = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Deployment YAML must be a mapping of setting names.")
        return cls(**data)


__all__ = ["AuthMode", "ReplicaSetSettings"]
