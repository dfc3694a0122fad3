from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


class Repository:
    """Store handle built once at startup; every method runs in its own short session."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker
