from pydantic import EmailStr
from sqlmodel import Field, SQLModel

ADMIN_ROLE = "admin"


class UserBase(SQLModel):
    email: str = Field(unique=True, index=True)
    name: str | None = None


class User(UserBase, table=True):
    __tablename__ = "users"
    id: int | None = Field(default=None, primary_key=True)
    role: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


class UserCreate(SQLModel):
    email: EmailStr
    name: str | None = None


class UserPublic(SQLModel):
    id: int
    email: str
    name: str | None = None
    role: str | None = None
