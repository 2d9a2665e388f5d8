# tests/models/test_automation_config.py
"""
Serialization tests for the automation-config models.

The version diff compares canonical bytes, so these pin down the omit-vs-empty
rules: omit-when-empty fields vanish whether unset or explicitly empty, while
always-emitted collections stay as `[]`.
"""

import json

import pytest
from pydantic import ValidationError

from mongo_automation.models.automation_config import (
    SSL,
    Auth,
    AutomationConfig,
    BuildConfig,
    MongoDBSSL,
    MongoDBUser,
    Net,
    ReplicaSet,
    ReplicaSetMember,
    Role,
    SSLMode,
    disabled_auth,
)


def test_disabled_auth_serialization():
    assert json.loads(disabled_auth().canonical_bytes()) == {
        "usersWanted": [],
        "disabled": True,
        "authoritativeSet": False,
    }


def test_explicitly_empty_omit_fields_match_absent_ones():
    explicit = Auth(
        disabled=True,
        auto_auth_mechanisms=[],
        deployment_auth_mechanisms=[],
        auto_user="",
        key="",
    )
    assert explicit.canonical_bytes() == disabled_auth().canonical_bytes()


def test_set_omit_fields_are_emitted():
    auth = Auth(auto_auth_mechanisms=["SCRAM-SHA-256"], auto_user="mms-automation")
    doc = json.loads(auth.canonical_bytes())

    assert doc["autoAuthMechanisms"] == ["SCRAM-SHA-256"]
    assert doc["autoUser"] == "mms-automation"
    assert "key" not in doc


def test_ssl_ca_path_omitted_when_empty():
    assert json.loads(SSL().canonical_bytes()) == {"clientCertificateMode": "OPTIONAL"}
    assert json.loads(SSL(ca_file_path="/ca.pem").canonical_bytes()) == {
        "CAFilePath": "/ca.pem",
        "clientCertificateMode": "OPTIONAL",
    }


def test_net_ssl_omitted_when_unset():
    assert json.loads(Net().canonical_bytes()) == {"port": 27017}

    net = Net(ssl=MongoDBSSL(mode=SSLMode.REQUIRE_SSL, ca_file="/ca.pem"))
    assert json.loads(net.canonical_bytes())["ssl"] == {
        "mode": "requireSSL",
        "CAFile": "/ca.pem",
        "PEMKeyFile": "",
        "allowConnectionsWithoutCertificates": False,
    }


def test_unset_modules_serialize_as_null_and_empty_as_list():
    assert json.loads(BuildConfig().canonical_bytes())["modules"] is None
    assert json.loads(BuildConfig(modules=[]).canonical_bytes())["modules"] == []


def test_member_id_alias():
    member = ReplicaSetMember(id=0, host="rs0-0")
    assert json.loads(member.canonical_bytes()) == {
        "_id": 0,
        "host": "rs0-0",
        "priority": 1,
        "arbiterOnly": False,
        "votes": 1,
    }


def test_user_aliases():
    user = MongoDBUser(
        username="app",
        database="admin",
        mechanisms=["SCRAM-SHA-256"],
        roles=[Role(role="readWrite", db="app")],
    )
    doc = json.loads(user.canonical_bytes())
    assert doc["user"] == "app"
    assert doc["db"] == "admin"
    assert doc["roles"] == [{"role": "readWrite", "db": "app"}]


def test_root_document_key_order():
    doc = json.loads(AutomationConfig().to_json())
    assert list(doc) == [
        "version",
        "processes",
        "replicaSets",
        "auth",
        "ssl",
        "mongoDbVersions",
        "options",
    ]


def test_parse_agent_document_by_alias():
    raw = json.dumps(
        {
            "version": 3,
            "processes": [
                {
                    "name": "rs0-0",
                    "hostname": "rs0-0.svc.local",
                    "args2_6": {
                        "net": {"port": 27017},
                        "replication": {"replSetName": "rs0"},
                    },
                    "featureCompatibilityVersion": "4.4",
                    "processType": "mongod",
                    "version": "4.4.0",
                }
            ],
            "replicaSets": [
                {
                    "_id": "rs0",
                    "members": [{"_id": 0, "host": "rs0-0"}],
                    "protocolVersion": "1",
                }
            ],
            "auth": {"usersWanted": [], "disabled": True, "authoritativeSet": False},
            "ssl": {"clientCertificateMode": "OPTIONAL"},
            "mongoDbVersions": [],
            "options": {"downloadBase": "/var/lib/mongodb-mms-automation"},
        }
    )
    ac = AutomationConfig.from_json(raw)

    assert ac.version == 3
    assert ac.processes[0].args2_6.replication.repl_set_name == "rs0"
    assert ac.replica_sets[0].members[0].id == 0
    assert ac.options.download_base == "/var/lib/mongodb-mms-automation"


def test_json_and_yaml_reload_keep_canonical_bytes():
    ac = AutomationConfig(
        version=2,
        ssl=SSL(ca_file_path="/ca.pem"),
        auth=disabled_auth(),
    )
    assert AutomationConfig.from_json(ac.to_json()).canonical_bytes() == (
        ac.canonical_bytes()
    )
    assert AutomationConfig.from_yaml(ac.to_yaml()).canonical_bytes() == (
        ac.canonical_bytes()
    )


def test_documents_are_frozen():
    ac = AutomationConfig()
    with pytest.raises(ValidationError):
        ac.version = 3


def test_model_copy_derives_new_lists_without_touching_original():
    ac = AutomationConfig(replica_sets=[ReplicaSet(id="rs0")])

    grown = ac.model_copy(
        update={"replica_sets": ac.replica_sets + [ReplicaSet(id="rs1")]}
    )

    assert [rs.id for rs in ac.replica_sets] == ["rs0"]
    assert [rs.id for rs in grown.replica_sets] == ["rs0", "rs1"]
