import pytest
import stripe

from scoutcookies.extensions import db
from scoutcookies.model import Order, as_uuid

from conftest import create_order


class FakeIntent:
    id = "pi_test_123"
    client_secret = "pi_test_123_secret_abc"


@pytest.fixture()
def stripe_calls(monkeypatch):
    calls = []

    def fake_create(**kwargs):
        calls.append(kwargs)
        return FakeIntent()

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)
    return calls


def test_checkout_creates_intent_and_stores_reference(app, client, auth_headers, scout, stripe_calls):
    order = create_order(client, auth_headers, [
        {"cookie_type": "Thin Mints", "quantity": 2, "price": "5.00"},
        {"cookie_type": "Lemon-Ups", "quantity": 1, "price": "4.99"},
    ])

    resp = client.post(f"/api/orders/{order['id']}/checkout", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["client_secret"] == "pi_test_123_secret_abc"
    assert data["payment_intent_id"] == "pi_test_123"

    (call,) = stripe_calls
    assert call["amount"] == 1499
    assert call["currency"] == "usd"
    assert call["metadata"] == {
        "orderId": order["id"],
        "scoutId": scout["id"],
        "scoutEmail": "scout@example.com",
    }
    assert call["description"] == f"Girl Scout Cookie Order #{order['id'][:8]}"
    assert call["api_key"] == "sk_test_dummy"

    with app.app_context():
        assert db.session.get(Order, as_uuid(order["id"])).stripe_payment_intent_id == "pi_test_123"


def test_checkout_refused_once_paid(app, client, auth_headers, stripe_calls):
    order = create_order(client, auth_headers, [{"cookie_type": "Thin Mints", "quantity": 1, "price": 5}])
    with app.app_context():
        db.session.get(Order, as_uuid(order["id"])).status = "paid"
        db.session.commit()

    resp = client.post(f"/api/orders/{order['id']}/checkout", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Order not found or already paid"
    assert stripe_calls == []


def test_checkout_of_someone_elses_order(client, auth_headers, other_headers, stripe_calls):
    order = create_order(client, other_headers, [{"cookie_type": "Thin Mints", "quantity": 1, "price": 5}])
    assert client.post(f"/api/orders/{order['id']}/checkout", headers=auth_headers).status_code == 404
    assert stripe_calls == []


def test_checkout_requires_auth(client):
    assert client.post("/api/orders/whatever/checkout").status_code == 401


def test_processor_error_is_a_generic_500(app, client, auth_headers, monkeypatch):
    def failing_create(**kwargs):
        raise stripe.StripeError("card network unreachable")

    monkeypatch.setattr(stripe.PaymentIntent, "create", failing_create)
    order = create_order(client, auth_headers, [{"cookie_type": "Thin Mints", "quantity": 1, "price": 5}])

    resp = client.post(f"/api/orders/{order['id']}/checkout", headers=auth_headers)
    assert resp.status_code == 500
    assert resp.get_json()["message"] == "Internal server error"
    with app.app_context():
        assert db.session.get(Order, as_uuid(order["id"])).stripe_payment_intent_id is None
