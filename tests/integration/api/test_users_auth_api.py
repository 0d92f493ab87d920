"""Integration tests for registration, login and the auth gate."""

from uuid import UUID

from httpx import AsyncClient

from infrastructure.auth.jwt_provider import JWTAuthProvider


class TestRegister:
    async def test_register_returns_token(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/users",
            json={"name": "Ann", "email": "a@x.com", "password": "secret1"},
        )

        assert response.status_code == 200
        assert isinstance(response.json()["token"], str)

    async def test_duplicate_email_is_rejected(self, client: AsyncClient, register) -> None:
        await register()

        response = await client.post(
            "/api/v1/users",
            json={"name": "Ann2", "email": "A@X.com", "password": "secret2"},
        )

        assert response.status_code == 400
        assert response.json()["details"] == [
            {"field": "email", "message": "User already exists"}
        ]

    async def test_invalid_body_lists_every_field(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/users",
            json={"name": "", "email": "not-an-email", "password": "123"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert [d["field"] for d in body["details"]] == ["name", "email", "password"]

    async def test_password_longer_than_bcrypt_limit_is_rejected(
        self, client: AsyncClient
    ) -> None:
        for password in ("p" * 100, "é" * 40):
            response = await client.post(
                "/api/v1/users",
                json={"name": "Ann", "email": "a@x.com", "password": password},
            )

            assert response.status_code == 400
            assert [d["field"] for d in response.json()["details"]] == ["password"]

    async def test_password_of_exactly_72_bytes_registers_and_logs_in(
        self, client: AsyncClient
    ) -> None:
        password = "p" * 72
        registered = await client.post(
            "/api/v1/users",
            json={"name": "Ann", "email": "a@x.com", "password": password},
        )
        login = await client.post(
            "/api/v1/auth", json={"email": "a@x.com", "password": password}
        )

        assert registered.status_code == 200
        assert login.status_code == 200


class TestLogin:
    async def test_login_returns_working_token(self, client: AsyncClient, register) -> None:
        await register()

        response = await client.post(
            "/api/v1/auth", json={"email": "a@x.com", "password": "secret1"}
        )
        assert response.status_code == 200

        me = await client.get(
            "/api/v1/auth", headers={"x-auth-token": response.json()["token"]}
        )
        assert me.status_code == 200
        assert me.json()["data"]["email"] == "a@x.com"

    async def test_wrong_password_and_unknown_email_look_the_same(
        self, client: AsyncClient, register
    ) -> None:
        await register()

        wrong = await client.post(
            "/api/v1/auth", json={"email": "a@x.com", "password": "wrong-pass"}
        )
        unknown = await client.post(
            "/api/v1/auth", json={"email": "z@x.com", "password": "secret1"}
        )

        assert wrong.status_code == unknown.status_code == 400
        assert wrong.json() == unknown.json()
        assert wrong.json()["message"] == "Invalid credentials."

    async def test_overlong_password_is_a_validation_error(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/auth", json={"email": "a@x.com", "password": "p" * 100}
        )

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "password"


class TestCurrentUser:
    async def test_returns_user_without_password(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await client.get("/api/v1/auth", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Ann"
        assert data["avatar"].startswith("//www.gravatar.com/avatar/")
        assert "password" not in data
        assert "password_hash" not in data

    async def test_missing_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/auth")

        assert response.status_code == 401
        assert response.json()["error_code"] == "MISSING_CREDENTIAL"

    async def test_garbage_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/auth", headers={"x-auth-token": "garbage"})

        assert response.status_code == 401
        assert response.json()["error_code"] == "INVALID_CREDENTIAL"

    async def test_expired_token(self, client: AsyncClient, register) -> None:
        headers = await register()
        me = await client.get("/api/v1/auth", headers=headers)
        user_id = me.json()["data"]["id"]

        expired = JWTAuthProvider(
            secret_key="test-secret-key", algorithm="HS256", expire_minutes=-1
        ).create_token(UUID(user_id))
        response = await client.get("/api/v1/auth", headers={"x-auth-token": expired})

        assert response.status_code == 401
        assert response.json()["error_code"] == "INVALID_CREDENTIAL"

    async def test_bearer_header_is_not_accepted(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        token = auth_headers["x-auth-token"]

        response = await client.get(
            "/api/v1/auth", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "MISSING_CREDENTIAL"
