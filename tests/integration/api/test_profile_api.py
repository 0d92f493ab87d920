"""Integration tests for Profile API endpoints."""

from uuid import uuid4

import httpx
from fastapi import FastAPI
from httpx import AsyncClient

from api.v1.dependencies import get_github_client
from infrastructure.github.client import GitHubClient

PROFILE = {"status": "Developer", "skills": "node, react , go"}
EXPERIENCE = {"title": "Dev", "company": "Acme", "from": "2020-01-01"}
EDUCATION = {
    "school": "MIT",
    "degree": "BSc",
    "fieldofstudy": "CS",
    "from": "2015-09-01",
    "to": "2019-06-01",
}


class TestUpsertProfile:
    async def test_creates_profile_with_trimmed_skills(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await client.post("/api/v1/profile", json=PROFILE, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "Developer"
        assert data["skills"] == ["node", "react", "go"]
        assert data["user"]["name"] == "Ann"
        assert data["experience"] == []

    async def test_requires_status_and_skills(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await client.post("/api/v1/profile", json={}, headers=auth_headers)

        assert response.status_code == 400
        fields = [d["field"] for d in response.json()["details"]]
        assert fields == ["status", "skills"]

    async def test_whitespace_only_status_and_skills_are_rejected(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await client.post(
            "/api/v1/profile", json={"status": "   ", "skills": " "}, headers=auth_headers
        )

        assert response.status_code == 400
        fields = [d["field"] for d in response.json()["details"]]
        assert fields == ["status", "skills"]

    async def test_requires_token(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/profile", json=PROFILE)

        assert response.status_code == 401

    async def test_second_upsert_merges(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        await client.post(
            "/api/v1/profile",
            json={**PROFILE, "company": "Acme", "twitter": "https://twitter.com/ann"},
            headers=auth_headers,
        )

        response = await client.post(
            "/api/v1/profile",
            json={"status": "Senior", "skills": "go", "youtube": "https://youtube.com/ann"},
            headers=auth_headers,
        )

        data = response.json()["data"]
        assert data["status"] == "Senior"
        assert data["company"] == "Acme"
        assert data["skills"] == ["go"]
        assert data["social"] == {
            "twitter": "https://twitter.com/ann",
            "youtube": "https://youtube.com/ann",
        }

        listed = (await client.get("/api/v1/profile")).json()["data"]
        assert len(listed) == 1


class TestReadProfile:
    async def test_own_profile_missing_is_400(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await client.get("/api/v1/profile/me", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error_code"] == "PROFILE_NOT_FOUND"

    async def test_own_profile(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        await client.post("/api/v1/profile", json=PROFILE, headers=auth_headers)

        response = await client.get("/api/v1/profile/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["skills"] == ["node", "react", "go"]

    async def test_public_list_and_lookup(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        created = await client.post("/api/v1/profile", json=PROFILE, headers=auth_headers)
        owner_id = created.json()["data"]["user"]["id"]

        listed = await client.get("/api/v1/profile")
        single = await client.get(f"/api/v1/profile/user/{owner_id}")

        assert listed.status_code == 200
        assert [p["user"]["id"] for p in listed.json()["data"]] == [owner_id]
        assert single.status_code == 200
        assert single.json()["data"]["status"] == "Developer"

    async def test_lookup_unknown_user_is_400(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/v1/profile/user/{uuid4()}")

        assert response.status_code == 400
        assert response.json()["error_code"] == "PROFILE_NOT_FOUND"

    async def test_lookup_malformed_id_is_400(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/profile/user/not-a-uuid")

        assert response.status_code == 400


class TestExperienceAndEducation:
    async def test_add_experience_without_profile_is_404(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await client.put(
            "/api/v1/profile/experience", json=EXPERIENCE, headers=auth_headers
        )

        assert response.status_code == 404

    async def test_experience_is_newest_first_and_removed_by_id(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        await client.post("/api/v1/profile", json=PROFILE, headers=auth_headers)
        await client.put("/api/v1/profile/experience", json=EXPERIENCE, headers=auth_headers)
        second = await client.put(
            "/api/v1/profile/experience",
            json={**EXPERIENCE, "title": "Lead", "current": True},
            headers=auth_headers,
        )

        entries = second.json()["data"]["experience"]
        assert [e["title"] for e in entries] == ["Lead", "Dev"]
        assert entries[0]["from"] == "2020-01-01"
        assert "from_date" not in entries[0]

        removed = await client.delete(
            f"/api/v1/profile/experience/{entries[1]['id']}", headers=auth_headers
        )

        assert removed.status_code == 200
        assert [e["title"] for e in removed.json()["data"]["experience"]] == ["Lead"]

    async def test_removing_unknown_entry_is_noop(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        await client.post("/api/v1/profile", json=PROFILE, headers=auth_headers)
        await client.put("/api/v1/profile/experience", json=EXPERIENCE, headers=auth_headers)

        response = await client.delete(
            f"/api/v1/profile/experience/{uuid4()}", headers=auth_headers
        )

        assert response.status_code == 200
        assert len(response.json()["data"]["experience"]) == 1

    async def test_experience_requires_fields(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        await client.post("/api/v1/profile", json=PROFILE, headers=auth_headers)

        response = await client.put(
            "/api/v1/profile/experience", json={"title": "Dev"}, headers=auth_headers
        )

        assert response.status_code == 400
        fields = [d["field"] for d in response.json()["details"]]
        assert fields == ["company", "from"]

    async def test_add_and_remove_education(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        await client.post("/api/v1/profile", json=PROFILE, headers=auth_headers)

        added = await client.put(
            "/api/v1/profile/education", json=EDUCATION, headers=auth_headers
        )

        assert added.status_code == 200
        entry = added.json()["data"]["education"][0]
        assert entry["fieldofstudy"] == "CS"
        assert entry["to"] == "2019-06-01"

        removed = await client.delete(
            f"/api/v1/profile/education/{entry['id']}", headers=auth_headers
        )
        assert removed.json()["data"]["education"] == []


class TestDeleteAccount:
    async def test_removes_profile_and_user_but_keeps_posts(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        await client.post("/api/v1/profile", json=PROFILE, headers=auth_headers)
        await client.post("/api/v1/posts", json={"text": "hello"}, headers=auth_headers)

        response = await client.delete("/api/v1/profile", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted"}
        assert (await client.get("/api/v1/profile")).json()["data"] == []
        assert (await client.get("/api/v1/auth", headers=auth_headers)).status_code == 404
        posts = (await client.get("/api/v1/posts", headers=other_headers)).json()["data"]
        assert [p["text"] for p in posts] == ["hello"]


class TestGithubRepos:
    async def test_lists_repos(self, app: FastAPI, client: AsyncClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"name": "dotfiles"}])

        app.dependency_overrides[get_github_client] = lambda: GitHubClient(
            base_url="https://api.github.test", transport=httpx.MockTransport(handler)
        )

        response = await client.get("/api/v1/profile/github/ann")

        assert response.status_code == 200
        assert response.json()["data"] == [{"name": "dotfiles"}]

    async def test_unknown_github_user_is_404(self, app: FastAPI, client: AsyncClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Not Found"})

        app.dependency_overrides[get_github_client] = lambda: GitHubClient(
            base_url="https://api.github.test", transport=httpx.MockTransport(handler)
        )

        response = await client.get("/api/v1/profile/github/nobody")

        assert response.status_code == 404
        assert response.json()["message"] == "No Github profile found"
