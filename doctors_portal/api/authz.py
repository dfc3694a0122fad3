"""Composable authorization checks for bearer-token routes.

Each check looks at an AuthContext and returns a Decision. `authorize` runs the
checks in the order given and turns the first denial into an HTTPException.
"""
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from doctors_portal.core.security import decode_access_token
from doctors_portal.repositories.users import UserRepository


@dataclass(frozen=True)
class Decision:
    allowed: bool
    status_code: int = status.HTTP_200_OK
    reason: str = ""


ALLOW = Decision(allowed=True)


def deny(status_code: int, reason: str) -> Decision:
    return Decision(allowed=False, status_code=status_code, reason=reason)


@dataclass
class AuthContext:
    credentials: HTTPAuthorizationCredentials | None
    users: UserRepository
    email: str | None = None  # set by token_valid


Check = Callable[[AuthContext], Awaitable[Decision]]


async def token_present(ctx: AuthContext) -> Decision:
    if not ctx.credentials or ctx.credentials.scheme.lower() != "bearer":
        return deny(status.HTTP_401_UNAUTHORIZED, "Unauthorized access")
    return ALLOW


async def token_valid(ctx: AuthContext) -> Decision:
    email = decode_access_token(ctx.credentials.credentials) if ctx.credentials else None
    if not email:
        return deny(status.HTTP_403_FORBIDDEN, "Forbidden access")
    ctx.email = email
    return ALLOW


def email_matches(email: str | None) -> Check:
    async def check(ctx: AuthContext) -> Decision:
        if ctx.email != email:
            return deny(status.HTTP_403_FORBIDDEN, "Forbidden access")
        return ALLOW

    return check


async def is_admin(ctx: AuthContext) -> Decision:
    user = await ctx.users.get_by_email(ctx.email) if ctx.email else None
    if not user or not user.is_admin:
        return deny(status.HTTP_403_FORBIDDEN, "Forbidden access")
    return ALLOW


async def authorize(ctx: AuthContext, *checks: Check) -> str | None:
    """Run checks in order; return the caller's email once all of them allow."""
    for check in checks:
        decision = await check(ctx)
        if not decision.allowed:
            headers = {"WWW-Authenticate": "Bearer"} if decision.status_code == status.HTTP_401_UNAUTHORIZED else None
            raise HTTPException(status_code=decision.status_code, detail=decision.reason, headers=headers)
    return ctx.email
