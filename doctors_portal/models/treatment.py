from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class TreatmentOption(SQLModel, table=True):
    __tablename__ = "appointment_options"
    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)
    price: float = 0


class TreatmentSlot(SQLModel, table=True):
    """One bookable slot label of a treatment; position keeps the catalog order."""

    __tablename__ = "appointment_option_slots"
    __table_args__ = (UniqueConstraint("option_id", "position", name="uq_option_slot_position"),)
    id: int | None = Field(default=None, primary_key=True)
    option_id: int = Field(foreign_key="appointment_options.id", ondelete="CASCADE", index=True)
    position: int
    label: str


class TreatmentOptionPublic(SQLModel):
    name: str
    price: float
    slots: list[str]


class SpecialtyPublic(SQLModel):
    name: str
