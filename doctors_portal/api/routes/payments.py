from fastapi import APIRouter, Depends, HTTPException, status

from doctors_portal.api.deps import get_repositories
from doctors_portal.api.schemas.payment import PaymentIntentRequest, PaymentIntentResponse
from doctors_portal.models.payment import PaymentCreate, PaymentReceipt
from doctors_portal.repositories import Repositories
from doctors_portal.services.payment_service import create_payment_intent, record_payment

router = APIRouter(tags=["payments"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def payment_intent(body: PaymentIntentRequest) -> PaymentIntentResponse:
    client_secret = await create_payment_intent(body.price)
    if not client_secret:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to create payment intent",
        )
    return PaymentIntentResponse(client_secret=client_secret)


@router.post("/payments", response_model=PaymentReceipt)
async def create_payment(
    body: PaymentCreate,
    repos: Repositories = Depends(get_repositories),
) -> PaymentReceipt:
    return await record_payment(repos.payments, repos.bookings, body)
