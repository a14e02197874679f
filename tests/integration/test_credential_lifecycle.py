"""
Integration tests for the credential lifecycle across use cases,
repository and bcrypt, backed by an in-memory users collection.
"""
import pytest

pytestmark = pytest.mark.integration

from social_accounts.core.exceptions import DuplicateEmailError, InvalidCredential
from social_accounts.application.dto.auth_dto import (
    PasswordChangeRequest,
    UserLoginRequest,
    UserRegistrationRequest,
)
from social_accounts.application.use_cases.auth.register_user import RegisterUserUseCase
from social_accounts.application.use_cases.auth.authenticate_user import AuthenticateUserUseCase
from social_accounts.application.use_cases.auth.change_password import ChangePasswordUseCase
from social_accounts.application.use_cases.user.follow_user import FollowUserUseCase
from social_accounts.application.use_cases.user.unfollow_user import UnfollowUserUseCase
from social_accounts.application.use_cases.user.delete_user import DeleteUserUseCase
from social_accounts.infrastructure.db.mongo_user_repository import MongoUserRepository


@pytest.fixture
def repository(user_collection, credential_manager):
    return MongoUserRepository(
        credential_manager=credential_manager,
        user_collection=user_collection,
        name_max_length=10,
    )


async def _register(repository, name="Ada", email="ada@example.com", password="secret123"):
    return await RegisterUserUseCase(repository).execute(
        UserRegistrationRequest(name=name, email=email, password=password)
    )


class TestCredentialLifecycle:

    @pytest.mark.asyncio
    async def test_register_then_authenticate(self, repository, user_collection, credential_manager):
        registered = await _register(repository)

        stored = next(iter(user_collection.documents.values()))
        assert stored["hashed_password"].startswith("$2b$04$")
        assert "secret123" not in repr(stored)

        authenticate = AuthenticateUserUseCase(repository, credential_manager)
        ok = await authenticate.execute(UserLoginRequest(email="ada@example.com", password="secret123"))
        bad = await authenticate.execute(UserLoginRequest(email="ada@example.com", password="secret124"))

        assert ok is not None
        assert ok.id == registered.id
        assert bad is None

    @pytest.mark.asyncio
    async def test_short_password_never_stored(self, repository, user_collection):
        with pytest.raises(InvalidCredential):
            await _register(repository, password="abc")
        assert user_collection.documents == {}

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, repository):
        await _register(repository)
        with pytest.raises(DuplicateEmailError):
            await _register(repository, name="Imposter")

    @pytest.mark.asyncio
    async def test_change_password(self, repository, credential_manager):
        registered = await _register(repository)
        before = (await repository.find_by_id(registered.id)).hashed_password

        await ChangePasswordUseCase(repository, credential_manager).execute(
            registered.id,
            PasswordChangeRequest(current_password="secret123", new_password="fresh-secret"),
        )

        after = await repository.find_by_id(registered.id)
        assert after.hashed_password != before
        assert await credential_manager.authenticate(after, "fresh-secret") is True
        assert await credential_manager.authenticate(after, "secret123") is False

    @pytest.mark.asyncio
    async def test_profile_save_keeps_hash(self, repository):
        registered = await _register(repository)
        user = await repository.find_by_id(registered.id)
        stored_hash = user.hashed_password

        user.about = "hello"
        result = await repository.save(user)

        assert result.password_updated is False
        reloaded = await repository.find_by_id(registered.id)
        assert reloaded.hashed_password == stored_hash
        assert reloaded.about == "hello"


class TestFollowGraph:

    @pytest.mark.asyncio
    async def test_follow_unfollow_and_delete(self, repository):
        ada = await _register(repository)
        bob = await _register(repository, name="Bob", email="bob@example.com")

        following = await FollowUserUseCase(repository).execute(ada.id, bob.id)
        assert following.following == [bob.id]
        # Following twice keeps one reference
        await FollowUserUseCase(repository).execute(ada.id, bob.id)
        assert (await repository.find_by_id(bob.id)).followers == [ada.id]

        # A profile save does not clobber the graph
        ada_user = await repository.find_by_id(ada.id)
        ada_user.following = []
        await repository.save(ada_user)
        assert (await repository.find_by_id(ada.id)).following == [bob.id]

        await UnfollowUserUseCase(repository).execute(ada.id, bob.id)
        assert (await repository.find_by_id(ada.id)).following == []
        assert (await repository.find_by_id(bob.id)).followers == []

        await FollowUserUseCase(repository).execute(bob.id, ada.id)
        await DeleteUserUseCase(repository).execute(bob.id)
        assert (await repository.find_by_id(ada.id)).followers == []
