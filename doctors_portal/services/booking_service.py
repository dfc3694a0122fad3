import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError

from doctors_portal.models.booking import Booking, BookingCreate
from doctors_portal.repositories.bookings import BookingRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingAdmission:
    accepted: bool
    booking: Booking | None = None
    reason: str | None = None


def _already_booked(appointment_date: str) -> BookingAdmission:
    return BookingAdmission(accepted=False, reason=f"You already have a booking on {appointment_date}")


async def submit_booking(bookings: BookingRepository, data: BookingCreate) -> BookingAdmission:
    """Accept a booking unless the patient already holds one for this treatment and date.

    The lookup and the insert are separate store operations. A concurrent duplicate
    that passes the lookup is stopped by the table's unique constraint and gets the
    same rejection. Slot capacity is not checked.
    """
    existing = await bookings.find_conflicts(data.appointment_date, data.treatment, data.patient_email)
    if existing:
        logger.info(
            "Booking rejected: %s already booked %s on %s",
            data.patient_email, data.treatment, data.appointment_date,
        )
        return _already_booked(data.appointment_date)

    holders = await bookings.find_slot_holders(data.appointment_date, data.treatment, data.slot)
    if holders:
        logger.info(
            "Slot %s for %s on %s is already held by %d booking(s); admitting anyway",
            data.slot, data.treatment, data.appointment_date, len(holders),
        )

    try:
        booking = await bookings.insert(data)
    except IntegrityError:
        logger.warning(
            "Booking rejected by unique constraint: %s, %s, %s",
            data.patient_email, data.treatment, data.appointment_date,
        )
        return _already_booked(data.appointment_date)
    logger.info("Booking %s accepted for %s (%s %s)", booking.id, data.patient_email, data.treatment, data.slot)
    return BookingAdmission(accepted=True, booking=booking)
