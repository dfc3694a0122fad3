from sqlalchemy import select

from doctors_portal.models.user import ADMIN_ROLE, User, UserCreate
from doctors_portal.repositories.base import Repository


class UserRepository(Repository):
    async def list_all(self) -> list[User]:
        async with self._session_maker() as session:
            result = await session.execute(select(User).order_by(User.id))
            return list(result.scalars().all())

    async def get_by_email(self, email: str) -> User | None:
        async with self._session_maker() as session:
            result = await session.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()

    async def create(self, data: UserCreate) -> User:
        user = User(email=data.email, name=data.name)
        async with self._session_maker() as session:
            session.add(user)
            await session.commit()
        return user

    async def make_admin(self, user_id: int) -> User | None:
        async with self._session_maker() as session:
            user = await session.get(User, user_id)
            if not user:
                return None
            user.role = ADMIN_ROLE
            session.add(user)
            await session.commit()
            return user
