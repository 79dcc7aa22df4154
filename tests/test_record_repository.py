from __future__ import annotations

import pytest
from pymongo.errors import DuplicateKeyError, OperationFailure

from social_api.db.collections import MEMBER_TYPES_COLLECTION
from social_api.db.mongo import seed_member_types
from social_api.repositories.base import store_errors
from social_api.repositories.exceptions import (
    DuplicateKeyRepositoryError,
    NotFoundRepositoryError,
    RepositoryError,
)
from social_api.repositories.member_type import MemberTypeRepository
from social_api.repositories.profile import ProfileRepository
from social_api.repositories.user import UserRepository


@pytest.mark.asyncio
async def test_user_repository_crud(database) -> None:
    repo = UserRepository(database)

    created = await repo.insert(
        {
            "firstName": "Alice",
            "lastName": "Liddell",
            "email": "alice@example.com",
            "subscribedToUserIds": [],
        }
    )
    assert created.first_name == "Alice"
    assert created.id

    fetched = await repo.get(created.id)
    assert fetched is not None
    assert fetched.email == "alice@example.com"

    updated = await repo.update(created.id, {"email": "alice@wonderland.example"})
    assert updated.email == "alice@wonderland.example"

    assert [user.id for user in await repo.scan()] == [created.id]

    removed = await repo.remove(created.id)
    assert removed.id == created.id
    assert await repo.get(created.id) is None


@pytest.mark.asyncio
async def test_update_and_remove_missing_record_raise_not_found(database) -> None:
    repo = UserRepository(database)

    with pytest.raises(NotFoundRepositoryError):
        await repo.update("00000000-0000-4000-8000-000000000000", {"email": "x"})
    with pytest.raises(NotFoundRepositoryError):
        await repo.remove("00000000-0000-4000-8000-000000000000")


@pytest.mark.asyncio
async def test_find_subscribers_matches_list_membership(database, make_user) -> None:
    target = await make_user("Target")
    follower = await make_user("Follower", subscribed_to=[target.id])
    await make_user("Loner")

    subscribers = await UserRepository(database).find_subscribers(target.id)

    assert [user.id for user in subscribers] == [follower.id]


@pytest.mark.asyncio
async def test_profile_user_id_is_unique(database, make_user) -> None:
    user = await make_user("Unique")
    repo = ProfileRepository(database)
    fields = {
        "avatar": "",
        "sex": "",
        "birthday": 0,
        "country": "",
        "street": "",
        "city": "",
        "memberTypeId": "basic",
        "userId": user.id,
    }
    await repo.insert(fields)

    with pytest.raises(DuplicateKeyRepositoryError):
        await repo.insert(fields)


@pytest.mark.asyncio
async def test_member_types_are_seeded_once(database) -> None:
    repo = MemberTypeRepository(database)
    basic = await repo.get("basic")
    business = await repo.get("business")
    assert basic is not None and business is not None
    assert basic.month_posts_limit == 20
    assert business.discount == 5

    await repo.update("basic", {"discount": 3})
    assert await seed_member_types(database, ("basic", "business")) == 0

    reseeded = await repo.get("basic")
    assert reseeded is not None
    assert reseeded.discount == 3
    assert await database[MEMBER_TYPES_COLLECTION].count_documents({}) == 2


def test_store_errors_translates_driver_failures() -> None:
    with pytest.raises(RepositoryError) as excinfo:
        with store_errors("scan", "users"):
            raise OperationFailure("node is recovering")
    assert not isinstance(excinfo.value, NotFoundRepositoryError)
    assert isinstance(excinfo.value.__cause__, OperationFailure)
    assert excinfo.value.collection == "users"
    assert excinfo.value.action == "scan"

    with pytest.raises(DuplicateKeyRepositoryError) as dup_info:
        with store_errors("insert", "profiles"):
            raise DuplicateKeyError("E11000 duplicate key")
    assert dup_info.value.collection == "profiles"


@pytest.mark.asyncio
async def test_not_found_names_collection_and_action(database) -> None:
    with pytest.raises(NotFoundRepositoryError) as excinfo:
        await UserRepository(database).remove("00000000-0000-4000-8000-000000000000")

    assert excinfo.value.collection == "users"
    assert excinfo.value.action == "remove"
