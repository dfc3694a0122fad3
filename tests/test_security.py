"""Tests for bearer tokens and the authorization checks."""
from datetime import timedelta

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from doctors_portal.api.authz import (
    AuthContext,
    authorize,
    email_matches,
    is_admin,
    token_present,
    token_valid,
)
from doctors_portal.core.config import settings
from doctors_portal.core.security import create_access_token, decode_access_token
from doctors_portal.models.user import UserCreate


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_token_carries_email():
    token = create_access_token("e@x.com")
    assert decode_access_token(token) == "e@x.com"


def test_expired_token_is_rejected():
    token = create_access_token("e@x.com", expires_delta=timedelta(seconds=-5))
    assert decode_access_token(token) is None


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"email": "e@x.com", "type": "access"}, "not-the-secret", algorithm=settings.algorithm)
    assert decode_access_token(token) is None


def test_token_without_email_is_rejected():
    token = jwt.encode({"type": "access"}, settings.secret_key, algorithm=settings.algorithm)
    assert decode_access_token(token) is None


def test_garbage_token_is_rejected():
    assert decode_access_token("not.a.jwt") is None


@pytest.mark.asyncio
async def test_missing_token_is_401(repos):
    ctx = AuthContext(credentials=None, users=repos.users)

    with pytest.raises(HTTPException) as exc_info:
        await authorize(ctx, token_present, token_valid)

    assert exc_info.value.status_code == 401
    assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}


@pytest.mark.asyncio
async def test_invalid_token_is_403(repos):
    ctx = AuthContext(credentials=_credentials("bogus"), users=repos.users)

    with pytest.raises(HTTPException) as exc_info:
        await authorize(ctx, token_present, token_valid)

    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_checks_stop_at_first_denial(repos):
    calls = []

    async def recorder(ctx):
        calls.append(ctx.email)
        return await token_valid(ctx)

    ctx = AuthContext(credentials=None, users=repos.users)
    with pytest.raises(HTTPException):
        await authorize(ctx, token_present, recorder)
    assert calls == []


@pytest.mark.asyncio
async def test_email_match(repos):
    ctx = AuthContext(credentials=_credentials(create_access_token("e@x.com")), users=repos.users)
    assert await authorize(ctx, token_present, token_valid, email_matches("e@x.com")) == "e@x.com"

    with pytest.raises(HTTPException) as exc_info:
        await authorize(ctx, token_present, token_valid, email_matches("other@x.com"))
    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_admin_check(repos):
    user = await repos.users.create(UserCreate(email="boss@x.com"))
    ctx = AuthContext(credentials=_credentials(create_access_token("boss@x.com")), users=repos.users)

    decision = await is_admin(ctx)
    assert decision.allowed is False  # token_valid has not run yet

    await token_valid(ctx)
    assert (await is_admin(ctx)).allowed is False

    await repos.users.make_admin(user.id)
    assert (await is_admin(ctx)).allowed is True
