from pydantic import BaseModel

from doctors_portal.models.booking import BookingPublic


class BookingAdmissionResponse(BaseModel):
    accepted: bool
    booking_id: int | None = None
    booking: BookingPublic | None = None
    message: str | None = None
