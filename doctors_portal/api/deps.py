from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from doctors_portal.api.authz import AuthContext, authorize, is_admin, token_present, token_valid
from doctors_portal.repositories import Repositories

security = HTTPBearer(auto_error=False)


def get_repositories(request: Request) -> Repositories:
    """Repositories built once by create_app and kept on app.state."""
    return request.app.state.repositories


async def get_auth_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    repos: Repositories = Depends(get_repositories),
) -> AuthContext:
    return AuthContext(credentials=credentials, users=repos.users)


async def verify_admin(ctx: AuthContext = Depends(get_auth_context)) -> str:
    """Email of a caller holding a valid bearer token and the admin role."""
    return await authorize(ctx, token_present, token_valid, is_admin)
