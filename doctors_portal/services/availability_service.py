from collections.abc import Iterable, Sequence

from doctors_portal.models.booking import Booking
from doctors_portal.models.treatment import TreatmentOptionPublic
from doctors_portal.repositories.bookings import BookingRepository
from doctors_portal.repositories.catalog import CatalogRepository


def remaining_slots(slots: Sequence[str], treatment: str, bookings: Iterable[Booking]) -> list[str]:
    """Slots of `treatment` not taken by any of `bookings`, in their original order."""
    booked = {b.slot for b in bookings if b.treatment == treatment}
    return [s for s in slots if s not in booked]


async def resolve_availability(
    catalog: CatalogRepository, bookings: BookingRepository, appointment_date: str | None
) -> list[TreatmentOptionPublic]:
    """Client-side join: read the catalog and the day's bookings, subtract in Python.

    The date is matched verbatim. Without a date only bookings stored without one
    would match, so every catalog slot comes back as open.
    """
    options = await catalog.list_options()
    already_booked = await bookings.list_for_date(appointment_date)
    return [
        TreatmentOptionPublic(
            name=option.name,
            price=option.price,
            slots=remaining_slots(option.slots, option.name, already_booked),
        )
        for option in options
    ]


async def resolve_availability_aggregated(
    catalog: CatalogRepository, appointment_date: str | None
) -> list[TreatmentOptionPublic]:
    """Same result as resolve_availability, computed by the store in one query."""
    return await catalog.available_slots(appointment_date)
