from sqlalchemy import select

from doctors_portal.models.booking import Booking, BookingCreate
from doctors_portal.repositories.base import Repository
from doctors_portal.repositories.catalog import booking_date_matches


class BookingRepository(Repository):
    async def list_for_date(self, appointment_date: str | None) -> list[Booking]:
        async with self._session_maker() as session:
            result = await session.execute(
                select(Booking).where(booking_date_matches(appointment_date)).order_by(Booking.id)
            )
            return list(result.scalars().all())

    async def find_conflicts(self, appointment_date: str, treatment: str, patient_email: str) -> list[Booking]:
        async with self._session_maker() as session:
            result = await session.execute(
                select(Booking).where(
                    Booking.appointment_date == appointment_date,
                    Booking.treatment == treatment,
                    Booking.patient_email == patient_email,
                )
            )
            return list(result.scalars().all())

    async def find_slot_holders(self, appointment_date: str, treatment: str, slot: str) -> list[Booking]:
        async with self._session_maker() as session:
            result = await session.execute(
                select(Booking).where(
                    Booking.appointment_date == appointment_date,
                    Booking.treatment == treatment,
                    Booking.slot == slot,
                )
            )
            return list(result.scalars().all())

    async def insert(self, data: BookingCreate) -> Booking:
        """Store a new unpaid booking. Raises IntegrityError on a duplicate patient/treatment/date."""
        booking = Booking(**data.model_dump(), paid=False)
        async with self._session_maker() as session:
            session.add(booking)
            await session.commit()
        return booking

    async def get(self, booking_id: int) -> Booking | None:
        async with self._session_maker() as session:
            return await session.get(Booking, booking_id)

    async def list_for_email(self, patient_email: str) -> list[Booking]:
        async with self._session_maker() as session:
            result = await session.execute(
                select(Booking).where(Booking.patient_email == patient_email).order_by(Booking.id)
            )
            return list(result.scalars().all())

    async def mark_paid(self, booking_id: int, transaction_id: str) -> bool:
        """Set paid and transaction_id. Returns False when no booking has this id."""
        async with self._session_maker() as session:
            booking = await session.get(Booking, booking_id)
            if not booking:
                return False
            booking.paid = True
            booking.transaction_id = transaction_id
            session.add(booking)
            await session.commit()
            return True
