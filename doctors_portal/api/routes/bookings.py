from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from doctors_portal.api.authz import AuthContext, authorize, email_matches, token_present, token_valid
from doctors_portal.api.deps import get_auth_context, get_repositories
from doctors_portal.api.schemas.booking import BookingAdmissionResponse
from doctors_portal.models.booking import BookingCreate, BookingPublic
from doctors_portal.repositories import Repositories
from doctors_portal.services.booking_service import submit_booking

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("", response_model=list[BookingPublic])
async def list_bookings(
    email: str | None = Query(None),
    ctx: AuthContext = Depends(get_auth_context),
    repos: Repositories = Depends(get_repositories),
) -> list[BookingPublic]:
    """Bookings of one patient; the token must belong to that patient.

    Token checks run before the email is looked at, so a caller without a token
    gets 401 whether or not the query names a patient.
    """
    await authorize(ctx, token_present, token_valid, email_matches(email))
    bookings = await repos.bookings.list_for_email(email)
    return [BookingPublic.model_validate(b) for b in bookings]


@router.get("/{booking_id}", response_model=BookingPublic)
async def get_booking(
    booking_id: int,
    repos: Repositories = Depends(get_repositories),
) -> BookingPublic:
    booking = await repos.bookings.get(booking_id)
    if not booking:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found",
        )
    return BookingPublic.model_validate(booking)


@router.post("", response_model=BookingAdmissionResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    body: BookingCreate,
    response: Response,
    repos: Repositories = Depends(get_repositories),
) -> BookingAdmissionResponse:
    admission = await submit_booking(repos.bookings, body)
    if not admission.accepted:
        # A duplicate is an ordinary answer, not an error
        response.status_code = status.HTTP_200_OK
        return BookingAdmissionResponse(accepted=False, message=admission.reason)
    return BookingAdmissionResponse(
        accepted=True,
        booking_id=admission.booking.id,
        booking=BookingPublic.model_validate(admission.booking),
    )
