"""Tests for key/value stores."""
import pytest
from sqlalchemy.orm import sessionmaker
from data.store import (
    InMemoryKeyValueStore,
    SqlKeyValueStore,
    add_follower,
    read_followers,
    remove_follower,
)
from models.kv import init_db, make_engine


@pytest.fixture
def session_factory(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'kv.db'}")
    init_db(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(params=["memory", "sql"])
def store_factory(request, session_factory):
    def _make(namespace):
        if request.param == "memory":
            return InMemoryKeyValueStore(namespace)
        return SqlKeyValueStore(namespace, session_factory)
    return _make


def test_get_absent_returns_none(store_factory):
    assert store_factory("webhooks").get("nobody") is None


def test_put_overwrites(store_factory):
    store = store_factory("webhooks")
    store.put("U", "https://one.test")
    store.put("U", "https://two.test")
    assert store.get("U") == "https://two.test"


def test_namespaces_are_independent(session_factory):
    followers = SqlKeyValueStore("followers", session_factory)
    webhooks = SqlKeyValueStore("webhooks", session_factory)
    followers.put("U", "[]")
    webhooks.put("U", "https://x.test")
    assert followers.get("U") == "[]"
    assert webhooks.get("U") == "https://x.test"


def test_follower_set_semantics(store_factory):
    store = store_factory("followers")
    assert read_followers(store, "T") == []
    add_follower(store, "T", "A")
    add_follower(store, "T", "B")
    add_follower(store, "T", "A")
    assert read_followers(store, "T") == ["A", "B"]
    remove_follower(store, "T", "A")
    remove_follower(store, "T", "Z")
    assert read_followers(store, "T") == ["B"]


def test_follower_set_stored_as_json_array(store_factory):
    store = store_factory("followers")
    add_follower(store, "T", "A")
    assert store.get("T") == '["A"]'
