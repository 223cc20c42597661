# File: tests/test_user_repository.py

import logging
import uuid

from accounthub.models import UserAuthMethod, UserRole, UserStatus, UserSubscription


async def test_create_populates_generated_fields(user_repo):
    user = await user_repo.create({"auth_method": UserAuthMethod.EMAIL})

    assert user.serial is not None
    assert isinstance(user.id, uuid.UUID)
    assert user.status == UserStatus.ACTIVE
    assert user.auth_method == UserAuthMethod.EMAIL


async def test_create_treats_none_id_and_status_as_omitted(user_repo):
    user = await user_repo.create({"id": None, "status": None})

    assert user.id is not None
    assert user.status == UserStatus.ACTIVE


async def test_create_ignores_serial(user_repo):
    user = await user_repo.create({"serial": 999})

    assert user.serial != 999


async def test_lookup_by_id_and_serial(user_repo):
    created = await user_repo.create({"role": UserRole.USER})

    by_id = await user_repo.get_by_id(created.id)
    by_serial = await user_repo.get_by_serial(created.serial)

    assert by_id is created
    assert by_serial is created
    assert await user_repo.get_by_id(uuid.uuid4()) is None


async def test_update_never_touches_keys(user_repo):
    created = await user_repo.create({})
    original_id, original_serial = created.id, created.serial

    updated = await user_repo.update(
        original_id,
        {"id": uuid.uuid4(), "serial": 12345, "subscription": UserSubscription.PRO, "nickname": "ignored"},
    )

    assert updated.id == original_id
    assert updated.serial == original_serial
    assert updated.subscription == UserSubscription.PRO


async def test_update_missing_user_returns_none(user_repo):
    assert await user_repo.update(uuid.uuid4(), {"role": UserRole.ADMIN}) is None


async def test_list_users_filters_by_status(user_repo):
    active = await user_repo.create({})
    banned = await user_repo.create({"status": UserStatus.BANNED})

    assert [u.id for u in await user_repo.list_users()] == [active.id, banned.id]
    assert [u.id for u in await user_repo.list_users(status=UserStatus.BANNED)] == [banned.id]
    assert len(await user_repo.list_users(limit=1)) == 1


async def test_update_logs_only_applied_fields(user_repo, caplog):
    created = await user_repo.create({})

    with caplog.at_level(logging.DEBUG, logger="accounthub.repositories.user"):
        await user_repo.update(created.id, {"id": uuid.uuid4(), "role": UserRole.ADMIN, "nickname": "ignored"})

    messages = [r.getMessage() for r in caplog.records if r.name == "accounthub.repositories.user"]
    assert f"Updated user {created.id} fields: role" in messages
