"""Tests for payment routes."""
import pytest
import respx
from sqlalchemy.exc import SQLAlchemyError

from doctors_portal.core.config import settings


@pytest.mark.asyncio
class TestPaymentRoutes:
    """Tests for /create-payment-intent and /payments."""

    async def test_payment_intent(self, client, monkeypatch):
        monkeypatch.setattr(settings, "stripe_secret_key", "sk_test_dummy")
        with respx.mock:
            respx.post(settings.stripe_api_url).respond(200, json={"client_secret": "pi_9_secret"})

            response = await client.post("/create-payment-intent", json={"price": 69})

        assert response.status_code == 200
        assert response.json() == {"client_secret": "pi_9_secret"}

    async def test_payment_intent_gateway_failure(self, client, monkeypatch):
        monkeypatch.setattr(settings, "stripe_secret_key", "sk_test_dummy")
        with respx.mock:
            respx.post(settings.stripe_api_url).respond(500)

            response = await client.post("/create-payment-intent", json={"price": 69})

        assert response.status_code == 502

    async def test_payment_intent_rejects_non_positive_price(self, client):
        response = await client.post("/create-payment-intent", json={"price": 0})
        assert response.status_code == 422

    async def test_record_payment(self, client, repos, make_booking):
        booking = await repos.bookings.insert(make_booking())

        response = await client.post(
            "/payments", json={"booking_id": booking.id, "transaction_id": "pi_42", "price": 45.5}
        )
        assert response.status_code == 200
        assert response.json()["booking_updated"] is True

        fetched = (await client.get(f"/bookings/{booking.id}")).json()
        assert fetched["paid"] is True
        assert fetched["transaction_id"] == "pi_42"

    async def test_record_payment_unknown_booking(self, client):
        response = await client.post("/payments", json={"booking_id": 77, "transaction_id": "pi_77"})
        assert response.status_code == 200
        assert response.json()["booking_updated"] is False

    async def test_partial_failure_is_reported(
        self, client, repos, make_booking, monkeypatch, stored_payments
    ):
        booking = await repos.bookings.insert(make_booking())

        async def broken_mark_paid(booking_id, transaction_id):
            raise SQLAlchemyError("connection lost")

        monkeypatch.setattr(repos.bookings, "mark_paid", broken_mark_paid)

        response = await client.post("/payments", json={"booking_id": booking.id, "transaction_id": "pi_1"})
        assert response.status_code == 500
        data = response.json()
        assert data["booking_id"] == booking.id
        stored = await stored_payments(booking.id)
        assert data["payment_id"] == stored[0].id
