"""Shared fixtures: in-memory stores, a signing key and a recording delivery transport."""
import json
import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from fastapi.testclient import TestClient
from app import create_app
from core.context import AppContext
from data.store import InMemoryKeyValueStore, FOLLOWERS_NAMESPACE, WEBHOOKS_NAMESPACE
from platforms.webhook import WebhookDelivery

TIMESTAMP = "1700000000"


class RecordingTransport(httpx.MockTransport):
    """Records outbound requests; status per URL defaults to 204."""

    def __init__(self):
        self.requests = []
        self.statuses = {}
        self.failing = set()
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url in self.failing:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(self.statuses.get(url, 204))

    def bodies(self):
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def private_key():
    return Ed25519PrivateKey.generate()


@pytest.fixture
def public_key_hex(private_key):
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw
    ).hex()


@pytest.fixture
def followers():
    return InMemoryKeyValueStore(FOLLOWERS_NAMESPACE)


@pytest.fixture
def webhooks():
    return InMemoryKeyValueStore(WEBHOOKS_NAMESPACE)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def ctx(public_key_hex, followers, webhooks, transport):
    return AppContext(
        public_key=public_key_hex,
        followers=followers,
        webhooks=webhooks,
        delivery=WebhookDelivery(timeout=5.0, transport=transport),
        broadcast_concurrency=4,
    )


@pytest.fixture
def client(ctx):
    with TestClient(create_app(ctx)) as c:
        yield c


@pytest.fixture
def sign(private_key):
    """Build (body, headers) for a signed interaction payload."""
    def _sign(payload, timestamp=TIMESTAMP):
        body = json.dumps(payload).encode()
        signature = private_key.sign(timestamp.encode() + body).hex()
        headers = {
            "X-Signature-Ed25519": signature,
            "X-Signature-Timestamp": timestamp,
            "Content-Type": "application/json",
        }
        return body, headers
    return _sign


def make_user(user_id="100", username="bee", discriminator="0042", avatar=None):
    return {"id": user_id, "username": username, "discriminator": discriminator, "avatar": avatar}


def user_command(name, user, target_id, in_guild=True):
    interaction = {
        "id": "1",
        "type": 2,
        "data": {"id": "9", "name": name, "type": 2, "target_id": target_id},
    }
    if in_guild:
        interaction["member"] = {"user": user}
    else:
        interaction["user"] = user
    return interaction


def chat_command(name, user, **options):
    return {
        "id": "1",
        "type": 2,
        "member": {"user": user},
        "data": {
            "id": "9",
            "name": name,
            "type": 1,
            "options": [{"name": k, "type": 3, "value": v} for k, v in options.items()],
        },
    }
