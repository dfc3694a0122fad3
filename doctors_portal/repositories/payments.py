from doctors_portal.models.payment import Payment, PaymentCreate
from doctors_portal.repositories.base import Repository


class PaymentRepository(Repository):
    async def insert(self, data: PaymentCreate) -> Payment:
        payment = Payment.model_validate(data)
        async with self._session_maker() as session:
            session.add(payment)
            await session.commit()
        return payment
