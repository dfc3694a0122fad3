from pydantic import BaseModel, Field


class PaymentIntentRequest(BaseModel):
    price: float = Field(gt=0)


class PaymentIntentResponse(BaseModel):
    client_secret: str
