from pydantic import BaseModel


class AdminStatus(BaseModel):
    is_admin: bool


class AccessToken(BaseModel):
    access_token: str
    token_type: str = "bearer"
