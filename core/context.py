"""Explicit application context passed to the dispatcher and handlers."""
from dataclasses import dataclass
import config
from data.store import KeyValueStore
from platforms.webhook import WebhookDelivery


@dataclass
class AppContext:
    """Everything a request needs that is not in the request itself."""
    public_key: str
    followers: KeyValueStore
    webhooks: KeyValueStore
    delivery: WebhookDelivery
    broadcast_concurrency: int = config.BROADCAST_CONCURRENCY


def build_default_context() -> AppContext:
    """Context backed by the configured database and public key."""
    from data.db import initialize_database, get_follower_store, get_webhook_store

    initialize_database()
    return AppContext(
        public_key=config.DISCORD_PUBLIC_KEY,
        followers=get_follower_store(),
        webhooks=get_webhook_store(),
        delivery=WebhookDelivery(),
    )
