from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from doctors_portal.api.deps import get_repositories
from doctors_portal.api.schemas.user import AccessToken
from doctors_portal.core.security import create_access_token
from doctors_portal.repositories import Repositories

router = APIRouter(tags=["auth"])


@router.get("/jwt", response_model=AccessToken)
async def issue_token(
    email: str = Query(...),
    repos: Repositories = Depends(get_repositories),
):
    """Bearer token for a registered user; unknown emails get 403 and an empty token."""
    user = await repos.users.get_by_email(email)
    if not user:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=AccessToken(access_token="").model_dump(),
        )
    return AccessToken(access_token=create_access_token(user.email))
