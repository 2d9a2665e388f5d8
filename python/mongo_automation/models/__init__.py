"""
models/__init__.py

Aggregate imports so the automation-config models can be accessed directly
from this package.
"""

from mongo_automation.models.automation_config import (
    SSL,
    Args26,
    Auth,
    AutomationConfig,
    BuildConfig,
    ClientCertificateMode,
    MongoDBSSL,
    MongoDBUser,
    MongoDbVersionConfig,
    Options,
    Process,
    ReplicaSet,
    ReplicaSetMember,
    SSLMode,
    Topology,
    disabled_auth,
)

__all__ = [
    "SSL",
    "Args26",
    "Auth",
    "AutomationConfig",
    "BuildConfig",
    "ClientCertificateMode",
    "MongoDBSSL",
    "MongoDBUser",
    "MongoDbVersionConfig",
    "Options",
    "Process",
    "ReplicaSet",
    "ReplicaSetMember",
    "SSLMode",
    "Topology",
    "disabled_auth",
]
