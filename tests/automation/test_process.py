# tests/automation/test_process.py
"""Tests for the process constructors and option functions."""

from mongo_automation.automation.process import (
    new_process,
    new_replica_set_member,
    to_hostname,
    to_process_name,
    with_fcv,
    with_tls,
)
from mongo_automation.models.automation_config import ProcessType, SSLMode


def test_names():
    assert to_process_name("foo", 2) == "foo-2"
    assert to_hostname("foo", 2, "example.com") == "foo-2.example.com"


def test_new_process_defaults():
    p = new_process("rs0-0", "rs0-0.svc.local", "4.4.0", "rs0")

    assert p.name == "rs0-0"
    assert p.hostname == "rs0-0.svc.local"
    assert p.version == "4.4.0"
    assert p.process_type == ProcessType.MONGOD
    assert p.auth_schema_version == 5
    assert p.args2_6.net.port == 27017
    assert p.args2_6.net.ssl is None
    assert p.args2_6.storage.db_path == "/data"
    assert p.args2_6.replication.repl_set_name == "rs0"
    assert p.system_log.path == "/var/log/mongodb-mms-automation/mongodb.log"


def test_options_apply_in_order():
    p = new_process(
        "rs0-0",
        "rs0-0.svc.local",
        "4.4.0",
        "rs0",
        with_fcv("4.2"),
        with_fcv("4.4"),
    )
    assert p.feature_compatibility_version == "4.4"


def test_with_tls_returns_new_process():
    base = new_process("rs0-0", "rs0-0.svc.local", "4.4.0", "rs0", with_fcv("4.4"))

    tls = with_tls("/ca.pem", "/server.pem", SSLMode.PREFER_SSL)(base)

    assert base.args2_6.net.ssl is None
    assert tls.args2_6.net.ssl is not None
    assert tls.args2_6.net.ssl.mode == SSLMode.PREFER_SSL
    assert tls.args2_6.net.ssl.allow_connections_without_certificates is True
    assert tls.feature_compatibility_version == "4.4"
    assert tls.args2_6.replication == base.args2_6.replication


def test_replica_set_member():
    p = new_process("rs0-1", "rs0-1.svc.local", "4.4.0", "rs0")
    member = new_replica_set_member(p, 1)

    assert member.id == 1
    assert member.host == "rs0-1"
    assert member.priority == 1
    assert member.votes == 1
    assert member.arbiter_only is False
