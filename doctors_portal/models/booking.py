from datetime import UTC, datetime

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


def _utc_now() -> datetime:
    return datetime.now(UTC)


class Booking(SQLModel, table=True):
    __tablename__ = "bookings"
    # one booking per patient, treatment and date
    __table_args__ = (
        UniqueConstraint(
            "treatment", "appointment_date", "patient_email",
            name="uq_booking_patient_treatment_date",
        ),
    )
    id: int | None = Field(default=None, primary_key=True)
    patient_email: str = Field(index=True)
    patient_name: str | None = None
    phone: str | None = None
    treatment: str = Field(index=True)
    appointment_date: str = Field(index=True)
    slot: str
    price: float | None = None
    paid: bool = False
    transaction_id: str | None = None
    created_at: datetime = Field(default_factory=_utc_now, sa_type=DateTime(timezone=True))


class BookingCreate(SQLModel):
    patient_email: str
    patient_name: str | None = None
    phone: str | None = None
    treatment: str
    appointment_date: str
    slot: str
    price: float | None = None


class BookingPublic(SQLModel):
    id: int
    patient_email: str
    patient_name: str | None = None
    phone: str | None = None
    treatment: str
    appointment_date: str
    slot: str
    price: float | None = None
    paid: bool
    transaction_id: str | None = None
    created_at: datetime
