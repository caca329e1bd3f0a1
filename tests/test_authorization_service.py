import pytest
from unittest.mock import patch
from sqlalchemy.exc import SQLAlchemyError

from marketplace.core.session import Principal
from marketplace.repositories.user_repository import UserRepository
from marketplace.services.authorization_service import (
    AuthorizationService,
    DecisionKind,
    NOT_A_MANAGER_TEXT,
    NOT_STORE_MANAGER_TEXT,
)
from marketplace.services.user_service import UserService


@pytest.mark.asyncio
async def test_elevated_access_by_role(session, marketplace_data, principal):
    auth = AuthorizationService(session)

    assert not await auth.has_elevated_access(principal(marketplace_data.customer))
    assert await auth.has_elevated_access(principal(marketplace_data.manager))
    assert await auth.has_elevated_access(principal(marketplace_data.admin))
    assert not await auth.has_elevated_access(None)


@pytest.mark.asyncio
async def test_exact_role_checks(session, marketplace_data, principal):
    auth = AuthorizationService(session)

    assert await auth.is_admin(principal(marketplace_data.admin))
    assert not await auth.is_admin(principal(marketplace_data.manager))
    assert await auth.is_manager(principal(marketplace_data.manager))
    assert not await auth.is_manager(principal(marketplace_data.admin))
    assert not await auth.is_manager(principal(marketplace_data.customer))


@pytest.mark.asyncio
async def test_owns_store_only_for_its_manager(session, marketplace_data, principal):
    auth = AuthorizationService(session)

    assert await auth.owns_store(principal(marketplace_data.manager), 1)
    assert not await auth.owns_store(principal(marketplace_data.manager), 2)
    assert not await auth.owns_store(principal(marketplace_data.other_manager), 1)
    # администратор проходит только через is_admin, а не через owns_store
    assert not await auth.owns_store(principal(marketplace_data.admin), 1)
    assert not await auth.owns_store(principal(marketplace_data.customer), 1)


@pytest.mark.asyncio
async def test_wrong_password_grants_nothing(session, marketplace_data):
    assert await UserService(session).login("root", "guess") is None

    auth = AuthorizationService(session)
    intruder = Principal("root", "guess")
    assert not await auth.has_elevated_access(intruder)
    assert not await auth.is_admin(intruder)
    assert not await auth.owns_store(intruder, 1)
    assert not await auth.check_store_access(intruder, 1)


@pytest.mark.asyncio
async def test_entry_gate_and_ownership_gate_are_separate(
    session, marketplace_data, principal
):
    auth = AuthorizationService(session)
    carol = principal(marketplace_data.other_manager)

    entry = await auth.check_elevated(carol)
    assert entry.allowed
    assert entry.user.id == marketplace_data.other_manager.id

    ownership = await auth.check_store_access(carol, 1)
    assert ownership.kind is DecisionKind.DENIED
    assert ownership.reason == NOT_STORE_MANAGER_TEXT


@pytest.mark.asyncio
async def test_store_access_policy(session, marketplace_data, principal):
    auth = AuthorizationService(session)

    assert await auth.check_store_access(principal(marketplace_data.manager), 1)
    assert await auth.check_store_access(principal(marketplace_data.admin), 1)
    assert await auth.check_store_access(principal(marketplace_data.admin), 2)

    denied = await auth.check_elevated(principal(marketplace_data.customer))
    assert not denied
    assert denied.reason == NOT_A_MANAGER_TEXT


@pytest.mark.asyncio
async def test_database_failure_is_denial_for_bool_checks(
    session, marketplace_data, principal
):
    auth = AuthorizationService(session)
    bob = principal(marketplace_data.manager)

    with patch.object(
        UserRepository, "get_by_credentials", side_effect=SQLAlchemyError("DB Error")
    ):
        assert not await auth.has_elevated_access(bob)
        assert not await auth.owns_store(bob, 1)

        decision = await auth.check_elevated(bob)
        assert decision.kind is DecisionKind.INFRASTRUCTURE_ERROR
        assert decision.is_error
        assert not decision

        decision = await auth.check_store_access(bob, 1)
        assert decision.is_error
