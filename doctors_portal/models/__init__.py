from doctors_portal.models.booking import Booking, BookingCreate, BookingPublic
from doctors_portal.models.doctor import Doctor, DoctorCreate, DoctorPublic
from doctors_portal.models.payment import Payment, PaymentCreate, PaymentReceipt
from doctors_portal.models.treatment import (
    SpecialtyPublic,
    TreatmentOption,
    TreatmentOptionPublic,
    TreatmentSlot,
)
from doctors_portal.models.user import User, UserCreate, UserPublic

__all__ = [
    "Booking",
    "BookingCreate",
    "BookingPublic",
    "Doctor",
    "DoctorCreate",
    "DoctorPublic",
    "Payment",
    "PaymentCreate",
    "PaymentReceipt",
    "SpecialtyPublic",
    "TreatmentOption",
    "TreatmentOptionPublic",
    "TreatmentSlot",
    "User",
    "UserCreate",
    "UserPublic",
]
