from __future__ import annotations

import pytest

from social_api.main import app
from social_api.models.identifiers import new_record_id
from social_api.repositories.exceptions import RepositoryError
from social_api.repositories.user import UserRepository
from social_api.services.subscription_service import SubscriptionService, get_subscription_service


async def _create_user(api_client, first_name: str) -> dict:
    response = await api_client.post(
        "/api/users",
        json={"firstName": first_name, "lastName": "Doe", "email": f"{first_name}@example.com"},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_user_lifecycle_over_http(api_client) -> None:
    user = await _create_user(api_client, "jane")
    assert user["subscribedToUserIds"] == []
    assert "id" in user

    get_resp = await api_client.get(f"/api/users/{user['id']}")
    assert get_resp.status_code == 200
    assert get_resp.json()["firstName"] == "jane"

    patch_resp = await api_client.patch(f"/api/users/{user['id']}", json={"lastName": "Roe"})
    assert patch_resp.status_code == 200
    assert patch_resp.json()["lastName"] == "Roe"

    delete_resp = await api_client.delete(f"/api/users/{user['id']}")
    assert delete_resp.status_code == 200
    assert delete_resp.json()["id"] == user["id"]

    missing = await api_client.get(f"/api/users/{user['id']}")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_delete_errors_map_to_status_codes(api_client) -> None:
    missing = await api_client.delete(f"/api/users/{new_record_id()}")
    assert missing.status_code == 404

    malformed = await api_client.delete("/api/users/not-a-uuid")
    assert malformed.status_code == 400


@pytest.mark.asyncio
async def test_subscription_endpoints(api_client) -> None:
    parent = await _create_user(api_client, "parent")
    child = await _create_user(api_client, "child")

    sub = await api_client.post(
        f"/api/users/{parent['id']}/subscribeTo", json={"userId": child["id"]}
    )
    assert sub.status_code == 200, sub.text
    assert sub.json()["subscribedToUserIds"] == [child["id"]]

    unsub = await api_client.post(
        f"/api/users/{parent['id']}/unsubscribeFrom", json={"userId": child["id"]}
    )
    assert unsub.status_code == 200, unsub.text
    assert unsub.json()["id"] == child["id"]
    assert unsub.json()["subscribedToUserIds"] == []

    missing = await api_client.post(
        f"/api/users/{parent['id']}/subscribeTo", json={"userId": new_record_id()}
    )
    assert missing.status_code == 404

    not_following = await api_client.post(
        f"/api/users/{child['id']}/unsubscribeFrom", json={"userId": parent["id"]}
    )
    assert not_following.status_code == 400


@pytest.mark.asyncio
async def test_profile_endpoints_enforce_guard(api_client) -> None:
    user = await _create_user(api_client, "profiled")
    body = {
        "avatar": "a.png",
        "sex": "f",
        "birthday": 0,
        "country": "DE",
        "street": "Unter den Linden",
        "city": "Berlin",
        "memberTypeId": "basic",
        "userId": user["id"],
    }

    created = await api_client.post("/api/profiles", json=body)
    assert created.status_code == 201, created.text
    profile = created.json()
    assert profile["userId"] == user["id"]

    duplicate = await api_client.post("/api/profiles", json=body)
    assert duplicate.status_code == 400

    other = await _create_user(api_client, "premium")
    premium = await api_client.post(
        "/api/profiles", json={**body, "userId": other["id"], "memberTypeId": "premium"}
    )
    assert premium.status_code == 400

    fetched = await api_client.get(f"/api/profiles/{profile['id']}")
    assert fetched.status_code == 200

    deleted = await api_client.delete(f"/api/profiles/{profile['id']}")
    assert deleted.status_code == 200
    again = await api_client.delete(f"/api/profiles/{profile['id']}")
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_post_endpoints(api_client) -> None:
    author = await _create_user(api_client, "author")

    created = await api_client.post(
        "/api/posts", json={"title": "Hello", "content": "World", "userId": author["id"]}
    )
    assert created.status_code == 201, created.text
    post = created.json()

    orphan = await api_client.post(
        "/api/posts", json={"title": "Lost", "content": "", "userId": new_record_id()}
    )
    assert orphan.status_code == 400

    patched = await api_client.patch(f"/api/posts/{post['id']}", json={"title": "Hi"})
    assert patched.status_code == 200
    assert patched.json()["title"] == "Hi"

    await api_client.delete(f"/api/users/{author['id']}")
    gone = await api_client.get(f"/api/posts/{post['id']}")
    assert gone.status_code == 404


@pytest.mark.asyncio
async def test_member_type_endpoints(api_client) -> None:
    listed = await api_client.get("/api/member-types")
    assert listed.status_code == 200
    assert {item["id"] for item in listed.json()} == {"basic", "business"}

    basic = await api_client.get("/api/member-types/basic")
    assert basic.status_code == 200
    assert basic.json()["monthPostsLimit"] == 20

    missing = await api_client.get("/api/member-types/premium")
    assert missing.status_code == 404

    patched = await api_client.patch("/api/member-types/business", json={"discount": 7.5})
    assert patched.status_code == 200
    assert patched.json()["discount"] == 7.5


@pytest.mark.asyncio
async def test_db_health(api_client) -> None:
    response = await api_client.get("/api/health/db")
    assert response.status_code == 200
    assert response.json()["mongo"] == "connected"


class UnavailableUserRepository(UserRepository):
    async def update(self, record_id, patch):
        raise RepositoryError("users: update failed", collection="users", action="update")


@pytest.mark.asyncio
async def test_store_failure_maps_to_bad_request(api_client, database) -> None:
    parent = await _create_user(api_client, "stalled")
    child = await _create_user(api_client, "target")
    app.dependency_overrides[get_subscription_service] = lambda: SubscriptionService(
        UnavailableUserRepository(database)
    )
    try:
        response = await api_client.post(
            f"/api/users/{parent['id']}/subscribeTo", json={"userId": child["id"]}
        )
    finally:
        app.dependency_overrides.pop(get_subscription_service, None)

    assert response.status_code == 400
    assert "update failed" in response.json()["detail"]
