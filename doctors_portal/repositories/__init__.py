from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from doctors_portal.repositories.bookings import BookingRepository
from doctors_portal.repositories.catalog import CatalogRepository
from doctors_portal.repositories.doctors import DoctorRepository
from doctors_portal.repositories.payments import PaymentRepository
from doctors_portal.repositories.users import UserRepository


@dataclass(frozen=True)
class Repositories:
    catalog: CatalogRepository
    bookings: BookingRepository
    users: UserRepository
    doctors: DoctorRepository
    payments: PaymentRepository

    @classmethod
    def from_session_maker(cls, session_maker: async_sessionmaker[AsyncSession]) -> "Repositories":
        return cls(
            catalog=CatalogRepository(session_maker),
            bookings=BookingRepository(session_maker),
            users=UserRepository(session_maker),
            doctors=DoctorRepository(session_maker),
            payments=PaymentRepository(session_maker),
        )


__all__ = [
    "BookingRepository",
    "CatalogRepository",
    "DoctorRepository",
    "PaymentRepository",
    "Repositories",
    "UserRepository",
]
