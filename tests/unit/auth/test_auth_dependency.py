"""Unit tests for authentication dependencies."""

from uuid import uuid4

import pytest

from api.dependencies.auth import get_current_user
from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.jwt_provider import JWTAuthProvider


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    return JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=30)


class TestGetCurrentUser:
    async def test_returns_user_with_valid_token(self, auth_provider: JWTAuthProvider):
        user_id = uuid4()
        token = auth_provider.create_token(user_id)

        result = await get_current_user(token, auth_provider)

        assert result.id == user_id

    async def test_raises_missing_credential_without_token(
        self, auth_provider: JWTAuthProvider
    ):
        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(None, auth_provider)

        assert exc_info.value.error_code == ErrorCode.MISSING_CREDENTIAL
        assert exc_info.value.status_code == 401

    async def test_raises_missing_credential_for_empty_header(
        self, auth_provider: JWTAuthProvider
    ):
        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user("", auth_provider)

        assert exc_info.value.error_code == ErrorCode.MISSING_CREDENTIAL

    async def test_raises_invalid_credential_for_garbage(self, auth_provider: JWTAuthProvider):
        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user("invalid.jwt.token", auth_provider)

        assert exc_info.value.error_code == ErrorCode.INVALID_CREDENTIAL
        assert exc_info.value.status_code == 401

    async def test_raises_invalid_credential_when_expired(self):
        provider = JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=-1)
        token = provider.create_token(uuid4())

        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(token, provider)

        assert exc_info.value.error_code == ErrorCode.INVALID_CREDENTIAL
