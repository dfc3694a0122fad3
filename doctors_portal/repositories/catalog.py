from sqlalchemy import and_, select

from doctors_portal.models.booking import Booking
from doctors_portal.models.treatment import TreatmentOption, TreatmentOptionPublic, TreatmentSlot
from doctors_portal.repositories.base import Repository


def booking_date_matches(appointment_date: str | None):
    """Exact match on the date key. No date matches only bookings stored without one."""
    if appointment_date is None:
        return Booking.appointment_date.is_(None)
    return Booking.appointment_date == appointment_date


class CatalogRepository(Repository):
    async def list_options(self) -> list[TreatmentOptionPublic]:
        """All treatment options in catalog order, each with its full slot list."""
        async with self._session_maker() as session:
            options = (
                await session.execute(select(TreatmentOption).order_by(TreatmentOption.id))
            ).scalars().all()
            slot_rows = (
                await session.execute(
                    select(TreatmentSlot.option_id, TreatmentSlot.label).order_by(
                        TreatmentSlot.option_id, TreatmentSlot.position
                    )
                )
            ).all()
        slots_by_option: dict[int, list[str]] = {}
        for option_id, label in slot_rows:
            slots_by_option.setdefault(option_id, []).append(label)
        return [
            TreatmentOptionPublic(name=o.name, price=o.price, slots=slots_by_option.get(o.id, []))
            for o in options
        ]

    async def list_names(self) -> list[str]:
        async with self._session_maker() as session:
            result = await session.execute(
                select(TreatmentOption.name).distinct().order_by(TreatmentOption.name)
            )
            return list(result.scalars().all())

    async def add_option(self, name: str, price: float, slots: list[str]) -> TreatmentOptionPublic:
        async with self._session_maker() as session:
            option = TreatmentOption(name=name, price=price)
            session.add(option)
            await session.flush()
            for position, label in enumerate(slots):
                session.add(TreatmentSlot(option_id=option.id, position=position, label=label))
            await session.commit()
        return TreatmentOptionPublic(name=name, price=price, slots=list(slots))

    async def available_slots(self, appointment_date: str | None) -> list[TreatmentOptionPublic]:
        """Remaining slots per option for a date, computed by a single SQL statement.

        Each option is left-joined to those of its slots for which no booking with the
        same treatment, slot label and date exists, so an option whose slots are all
        taken still yields one row with a NULL label.
        """
        booked = (
            select(Booking.id)
            .where(
                Booking.treatment == TreatmentOption.name,
                Booking.slot == TreatmentSlot.label,
                booking_date_matches(appointment_date),
            )
            .correlate(TreatmentOption, TreatmentSlot)
            .exists()
        )
        stmt = (
            select(TreatmentOption.id, TreatmentOption.name, TreatmentOption.price, TreatmentSlot.label)
            .select_from(TreatmentOption)
            .outerjoin(TreatmentSlot, and_(TreatmentSlot.option_id == TreatmentOption.id, ~booked))
            .order_by(TreatmentOption.id, TreatmentSlot.position)
        )
        async with self._session_maker() as session:
            rows = (await session.execute(stmt)).all()
        options: dict[int, TreatmentOptionPublic] = {}
        for option_id, name, price, label in rows:
            option = options.setdefault(option_id, TreatmentOptionPublic(name=name, price=price, slots=[]))
            if label is not None:
                option.slots.append(label)
        return list(options.values())
