"""Shared test fixtures."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENV", "test")

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import select  # noqa: E402

from doctors_portal.core.db import create_engine, create_session_maker, init_db  # noqa: E402
from doctors_portal.core.security import create_access_token  # noqa: E402
from doctors_portal.main import create_app  # noqa: E402
from doctors_portal.models.booking import BookingCreate  # noqa: E402
from doctors_portal.models.payment import Payment  # noqa: E402
from doctors_portal.models.user import UserCreate  # noqa: E402
from doctors_portal.repositories import Repositories  # noqa: E402

CATALOG = [
    ("Teeth Orthodontics", 69.0, ["08.00 AM - 08.30 AM", "08.30 AM - 09.00 AM", "09.00 AM - 09.30 AM"]),
    ("Cosmetic Dentistry", 99.0, ["10.05 AM - 10.30 AM", "10.30 AM - 11.00 AM"]),
    ("Teeth Cleaning", 45.5, ["9AM", "10AM", "11AM"]),
]


@pytest.fixture
async def engine(tmp_path):
    """Fresh file database per test; every session gets its own connection."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'portal.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def repos(engine) -> Repositories:
    return Repositories.from_session_maker(create_session_maker(engine))


@pytest.fixture
def stored_payments(engine):
    """Read the payments of a booking straight from the database."""
    async def _list(booking_id: int) -> list[Payment]:
        async with create_session_maker(engine)() as session:
            result = await session.execute(
                select(Payment).where(Payment.booking_id == booking_id).order_by(Payment.id)
            )
            return list(result.scalars().all())
    return _list


@pytest.fixture
async def catalog(repos):
    for name, price, slots in CATALOG:
        await repos.catalog.add_option(name, price, slots)
    return CATALOG


@pytest.fixture
async def client(repos):
    app = create_app(repositories=repos)
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def make_booking():
    def _create(email="patient@example.com", treatment="Teeth Cleaning", date="2024-01-01", slot="9AM", **extra):
        return BookingCreate(
            patient_email=email,
            treatment=treatment,
            appointment_date=date,
            slot=slot,
            **extra,
        )
    return _create


def _bearer(email: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(email)}"}


@pytest.fixture
def auth_headers():
    """Build an Authorization header carrying a token for an email."""
    return _bearer


@pytest.fixture
async def admin_headers(repos) -> dict[str, str]:
    """Headers of a registered user holding the admin role."""
    user = await repos.users.create(UserCreate(email="admin@example.com", name="Admin"))
    await repos.users.make_admin(user.id)
    return _bearer(user.email)


@pytest.fixture
async def patient_headers(repos) -> dict[str, str]:
    """Headers of a registered user without the admin role."""
    await repos.users.create(UserCreate(email="patient@example.com", name="Patient"))
    return _bearer("patient@example.com")
