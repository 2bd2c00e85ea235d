import hashlib
import hmac
import json
import time

import pytest

from scoutcookies import create_app
from scoutcookies.config import TestingConfig
from scoutcookies.extensions import db
from scoutcookies.services.scout_service import create_scout


@pytest.fixture()
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def scout(app):
    with app.app_context():
        s = create_scout("Scout@Example.com", "s3cret-pass", "Daisy Scout")
        return {"id": str(s.id), "email": s.email, "name": s.name, "password": "s3cret-pass"}


@pytest.fixture()
def other_scout(app):
    with app.app_context():
        s = create_scout("other@example.com", "other-pass", "Brownie Scout")
        return {"id": str(s.id), "email": s.email, "name": s.name, "password": "other-pass"}


def login(client, email, password):
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return {"Authorization": f"Bearer {resp.get_json()['data']['token']}"}


@pytest.fixture()
def auth_headers(client, scout):
    return login(client, scout["email"], scout["password"])


@pytest.fixture()
def other_headers(client, other_scout):
    return login(client, other_scout["email"], other_scout["password"])


def create_order(client, headers, items):
    resp = client.post("/api/orders", json={"items": items}, headers=headers)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()["data"]["order"]


def signed_webhook(payload: dict, secret: str = TestingConfig.STRIPE_WEBHOOK_SECRET):
    """Body and Stripe-Signature header the way Stripe signs webhook deliveries."""
    body = json.dumps(payload)
    ts = int(time.time())
    sig = hmac.new(secret.encode(), f"{ts}.{body}".encode(), hashlib.sha256).hexdigest()
    return body, {"Stripe-Signature": f"t={ts},v1={sig}", "Content-Type": "application/json"}


def intent_event(event_type: str, intent_id: str) -> dict:
    return {
        "id": "evt_test_1",
        "object": "event",
        "type": event_type,
        "data": {"object": {"id": intent_id, "object": "payment_intent"}},
    }
