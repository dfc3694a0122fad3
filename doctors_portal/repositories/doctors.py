from sqlalchemy import select

from doctors_portal.models.doctor import Doctor, DoctorCreate
from doctors_portal.repositories.base import Repository


class DoctorRepository(Repository):
    async def list_all(self) -> list[Doctor]:
        async with self._session_maker() as session:
            result = await session.execute(select(Doctor).order_by(Doctor.id))
            return list(result.scalars().all())

    async def create(self, data: DoctorCreate) -> Doctor:
        doctor = Doctor.model_validate(data)
        async with self._session_maker() as session:
            session.add(doctor)
            await session.commit()
        return doctor

    async def delete(self, doctor_id: int) -> bool:
        async with self._session_maker() as session:
            doctor = await session.get(Doctor, doctor_id)
            if not doctor:
                return False
            await session.delete(doctor)
            await session.commit()
            return True
