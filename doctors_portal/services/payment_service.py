import logging

import httpx
from sqlalchemy.exc import SQLAlchemyError

from doctors_portal.core.config import settings
from doctors_portal.models.payment import PaymentCreate, PaymentReceipt
from doctors_portal.repositories.bookings import BookingRepository
from doctors_portal.repositories.payments import PaymentRepository

logger = logging.getLogger(__name__)


class PaymentReconciliationError(Exception):
    """The payment was stored but its booking could not be marked as paid."""

    def __init__(self, payment_id: int, booking_id: int) -> None:
        super().__init__(f"Payment {payment_id} recorded but booking {booking_id} was not updated")
        self.payment_id = payment_id
        self.booking_id = booking_id


def amount_in_cents(price: float) -> int:
    return int(round(price * 100))


async def create_payment_intent(price: float) -> str | None:
    """Create a card payment intent at the gateway and return its client secret."""
    if not settings.payments_enabled:
        logger.warning("Payment gateway not configured (STRIPE_SECRET_KEY empty)")
        return None
    async with httpx.AsyncClient() as client:
        resp = await client.post(
            settings.stripe_api_url,
            data={
                "amount": str(amount_in_cents(price)),
                "currency": settings.payment_currency,
                "payment_method_types[]": "card",
            },
            auth=(settings.stripe_secret_key, ""),
        )
        if resp.status_code != 200:
            logger.warning(
                "Payment intent creation failed: status=%s body=%s",
                resp.status_code,
                resp.text[:500],
            )
            return None
        return resp.json().get("client_secret")


async def record_payment(
    payments: PaymentRepository, bookings: BookingRepository, data: PaymentCreate
) -> PaymentReceipt:
    """Store the payment, then mark its booking paid.

    The two writes are not atomic and the payment is never rolled back. When the
    booking update fails the error names both ids so the caller can reconcile.
    """
    payment = await payments.insert(data)
    try:
        updated = await bookings.mark_paid(data.booking_id, data.transaction_id)
    except SQLAlchemyError as e:
        logger.exception("Payment %s stored but booking %s update failed", payment.id, data.booking_id)
        raise PaymentReconciliationError(payment.id, data.booking_id) from e
    if not updated:
        logger.warning("Payment %s references unknown booking %s", payment.id, data.booking_id)
    else:
        logger.info("Booking %s marked paid (transaction %s)", data.booking_id, data.transaction_id)
    return PaymentReceipt(payment_id=payment.id, booking_id=data.booking_id, booking_updated=updated)
