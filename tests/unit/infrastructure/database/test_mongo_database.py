from __future__ import annotations

from typing import Any, Dict, List

import pytest
from pymongo.errors import ConfigurationError

from healthboard.infrastructure.database.mongo_database import MongoDatabase


class _StubAdmin:
    def __init__(self) -> None:
        self.commands: List[str] = []

    def command(self, name: str) -> Dict[str, Any]:
        self.commands.append(name)
        return {"ok": 1.0}


class _StubDatabase:
    def __init__(self, name: str) -> None:
        self.name = name


class _StubMongoClient:
    created: List["_StubMongoClient"] = []

    def __init__(self, uri: str, **kwargs: Any) -> None:
        if ".invalid" in uri:
            raise ConfigurationError("The DNS query name does not exist")
        self.uri = uri
        self.kwargs = kwargs
        self.admin = _StubAdmin()
        self.closed = False
        _StubMongoClient.created.append(self)

    def __getitem__(self, name: str) -> _StubDatabase:
        return _StubDatabase(name)

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def patch_mongo_client(monkeypatch) -> None:
    _StubMongoClient.created = []
    monkeypatch.setattr(
        "healthboard.infrastructure.database.mongo_database.MongoClient",
        _StubMongoClient,
    )


def test_client_is_built_on_first_use() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "healthboard", 1500)

    assert database.name == "healthboard"
    assert _StubMongoClient.created == []

    assert database.client.kwargs["serverSelectionTimeoutMS"] == 1500
    assert database.client is _StubMongoClient.created[0]
    assert database.db.name == "healthboard"
    assert len(_StubMongoClient.created) == 1


def test_unresolvable_uri_fails_on_ping_not_construction() -> None:
    database = MongoDatabase("mongodb+srv://cluster0.nonexistent.invalid/app", "healthboard")

    with pytest.raises(ConfigurationError):
        database.ping()

    database.close()


def test_ping_runs_admin_command() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "healthboard")

    assert database.ping() == {"ok": 1.0}
    assert database.client.admin.commands == ["ping"]


def test_close_closes_client() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "healthboard")
    client = database.client

    database.close()

    assert client.closed is True


def test_close_without_client_is_noop() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "healthboard")
    database.close()
    assert _StubMongoClient.created == []
