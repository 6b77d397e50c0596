"""Namespaced key/value stores backing follower sets and webhook URLs."""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional
import json
import logging
from models.kv import KVEntry

logger = logging.getLogger(__name__)

FOLLOWERS_NAMESPACE = "followers"
WEBHOOKS_NAMESPACE = "webhooks"


class KeyValueStore(ABC):
    """Get/put store bound to one namespace. Last write wins."""

    def __init__(self, namespace: str):
        self.namespace = namespace

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if absent."""
        pass

    @abstractmethod
    def put(self, key: str, value: str):
        """Store value under key, replacing any previous value."""
        pass

    def get_json(self, key: str, default: Any = None) -> Any:
        raw = self.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    def put_json(self, key: str, value: Any):
        self.put(key, json.dumps(value))

    def update_json(self, key: str, update: Callable[[Any], Any], default: Any = None) -> Any:
        """
        Read, transform and write back a JSON value.

        No compare-and-swap: concurrent writers to the same key race and
        the last full write wins.
        """
        value = update(self.get_json(key, default))
        self.put_json(key, value)
        return value


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and local runs."""

    def __init__(self, namespace: str, initial: Dict[str, str] = None):
        super().__init__(namespace)
        self.data: Dict[str, str] = dict(initial or {})
        self.reads = 0
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        self.reads += 1
        return self.data.get(key)

    def put(self, key: str, value: str):
        self.writes += 1
        self.data[key] = value


class SqlKeyValueStore(KeyValueStore):
    """Store persisted in the kv_entries table."""

    def __init__(self, namespace: str, session_factory):
        super().__init__(namespace)
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        db = self.session_factory()
        try:
            entry = db.get(KVEntry, (self.namespace, key))
            return entry.value if entry else None
        finally:
            db.close()

    def put(self, key: str, value: str):
        db = self.session_factory()
        try:
            db.merge(KVEntry(namespace=self.namespace, key=key, value=value))
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def update_json(self, key: str, update: Callable[[Any], Any], default: Any = None) -> Any:
        # Read and write share one session so this process does not interleave them.
        db = self.session_factory()
        try:
            entry = db.get(KVEntry, (self.namespace, key))
            current = json.loads(entry.value) if entry else default
            value = update(current)
            db.merge(KVEntry(namespace=self.namespace, key=key, value=json.dumps(value)))
            db.commit()
            return value
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()


def read_followers(store: KeyValueStore, target_id: str) -> List[str]:
    """Follower ids for target_id; empty when the target has never been followed."""
    return list(store.get_json(target_id, default=[]) or [])


def add_follower(store: KeyValueStore, target_id: str, follower_id: str) -> List[str]:
    def _add(current):
        followers = list(dict.fromkeys(current or []))
        if follower_id not in followers:
            followers.append(follower_id)
        return followers

    followers = store.update_json(target_id, _add, default=[])
    logger.debug("%s now follows %s (%d followers)", follower_id, target_id, len(followers))
    return followers


def remove_follower(store: KeyValueStore, target_id: str, follower_id: str) -> List[str]:
    def _remove(current):
        return [f for f in dict.fromkeys(current or []) if f != follower_id]

    followers = store.update_json(target_id, _remove, default=[])
    logger.debug("%s unfollowed %s (%d followers)", follower_id, target_id, len(followers))
    return followers
