from fastapi import APIRouter, Depends, HTTPException, status

from doctors_portal.api.deps import get_repositories, verify_admin
from doctors_portal.api.schemas.user import AdminStatus
from doctors_portal.models.user import UserCreate, UserPublic
from doctors_portal.repositories import Repositories

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserPublic])
async def list_users(repos: Repositories = Depends(get_repositories)) -> list[UserPublic]:
    users = await repos.users.list_all()
    return [UserPublic.model_validate(u) for u in users]


@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate,
    repos: Repositories = Depends(get_repositories),
) -> UserPublic:
    if await repos.users.get_by_email(body.email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An account with this email already exists",
        )
    user = await repos.users.create(body)
    return UserPublic.model_validate(user)


@router.get("/admin/{email}", response_model=AdminStatus)
async def check_admin(email: str, repos: Repositories = Depends(get_repositories)) -> AdminStatus:
    user = await repos.users.get_by_email(email)
    return AdminStatus(is_admin=bool(user and user.is_admin))


@router.put("/admin/{user_id}", response_model=UserPublic, dependencies=[Depends(verify_admin)])
async def grant_admin(
    user_id: int,
    repos: Repositories = Depends(get_repositories),
) -> UserPublic:
    user = await repos.users.make_admin(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return UserPublic.model_validate(user)
