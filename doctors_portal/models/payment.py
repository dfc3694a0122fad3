from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def _utc_now() -> datetime:
    return datetime.now(UTC)


class Payment(SQLModel, table=True):
    __tablename__ = "payments"
    id: int | None = Field(default=None, primary_key=True)
    # Not a foreign key: a payment is kept even when its booking is gone
    booking_id: int = Field(index=True)
    transaction_id: str = Field(index=True)
    price: float | None = None
    email: str | None = None
    created_at: datetime = Field(default_factory=_utc_now, sa_type=DateTime(timezone=True))


class PaymentCreate(SQLModel):
    booking_id: int
    transaction_id: str
    price: float | None = None
    email: str | None = None


class PaymentReceipt(SQLModel):
    payment_id: int
    booking_id: int
    booking_updated: bool
