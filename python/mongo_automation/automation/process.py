"""
mongo_automation/automation/process.py

Constructors for the per-member entries of an automation config.

A Process is created with its fixed defaults and then passed through an ordered
sequence of option functions (`Process -> Process`). Each option returns a new
frozen Process via `model_copy`, so options compose without side effects.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable

from mongo_automation.models.automation_config import (
    Args26,
    MongoDBSSL,
    Process,
    ReplicaSetMember,
    Replication,
    SSLMode,
    SystemLog,
)

ProcessOption = Callable[[Process], Process]

DEFAULT_AGENT_LOG_PATH = "/var/log/mongodb-mms-automation"


def to_process_name(name: str, index: int) -> str:
    return f"{name}-{index}"


def to_hostname(name: str, index: int, domain: str) -> str:
    """Fully-qualified hostname of member `index`, e.g. `rs0-1.svc.local`."""
    return f"{to_process_name(name, index)}.{domain}"


def new_process(
    name: str,
    hostname: str,
    version: str,
    repl_set_name: str,
    *opts: ProcessOption,
) -> Process:
    """
    Build a mongod Process with default storage/network/log settings, then apply
    `opts` left to right.

    Args:
        name: Process name (`<name>-<index>`).
        hostname: Fully-qualified hostname of the process.
        version: MongoDB engine version.
        repl_set_name: Replica set the process joins.
        *opts: Option functions applied in the given order.

    Returns:
        The configured Process.
    """
    base = Process(
        name=name,
        hostname=hostname,
        version=version,
        args2_6=Args26(replication=Replication(repl_set_name=repl_set_name)),
        system_log=SystemLog(
            destination="file", path=f"{DEFAULT_AGENT_LOG_PATH}/mongodb.log"
        ),
    )
    return reduce(lambda process, opt: opt(process), opts, base)


def with_fcv(fcv: str) -> ProcessOption:
    """Set the process' featureCompatibilityVersion."""

    def apply(process: Process) -> Process:
        return process.model_copy(update={"feature_compatibility_version": fcv})

    return apply


def with_tls(ca_file: str, tls_key_file: str, mode: SSLMode) -> ProcessOption:
    """
    Enable TLS on the mongod process.

    Connections without a client certificate stay allowed so that members added
    before certificates are distributed can still join.
    """

    def apply(process: Process) -> Process:
        ssl = MongoDBSSL(
            mode=mode,
            ca_file=ca_file,
            pem_key_file=tls_key_file,
            allow_connections_without_certificates=True,
        )
        args = process.args2_6
        net = args.net.model_copy(update={"ssl": ssl})
        return process.model_copy(
            update={"args2_6": args.model_copy(update={"net": net})}
        )

    return apply


def new_replica_set_member(process: Process, member_id: int) -> ReplicaSetMember:
    return ReplicaSetMember(
        id=member_id,
        host=process.name,
        priority=1,
        arbiter_only=False,
        votes=1,
    )


__all__ = [
    "ProcessOption",
    "to_process_name",
    "to_hostname",
    "new_process",
    "with_fcv",
    "with_tls",
    "new_replica_set_member",
]
