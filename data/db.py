"""Database initialization and utilities."""
from models.kv import init_db, SessionLocal
from data.store import SqlKeyValueStore, FOLLOWERS_NAMESPACE, WEBHOOKS_NAMESPACE


def initialize_database():
    """Initialize database tables."""
    init_db()


def get_follower_store(session_factory=SessionLocal) -> SqlKeyValueStore:
    return SqlKeyValueStore(FOLLOWERS_NAMESPACE, session_factory)


def get_webhook_store(session_factory=SessionLocal) -> SqlKeyValueStore:
    return SqlKeyValueStore(WEBHOOKS_NAMESPACE, session_factory)
