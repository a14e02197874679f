"""
Shared pytest fixtures for social_accounts tests.
"""
import copy
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from social_accounts.domain.services.credential_manager import CredentialManager
from social_accounts.infrastructure.security.bcrypt_hashing_service import BcryptHashingService

# Lowest work factor bcrypt accepts; keeps the suite fast
FAST_ROUNDS = 4


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_social_accounts",
        "BCRYPT_ROUNDS": str(FAST_ROUNDS),
        "HASH_TIMEOUT_SECONDS": "5",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.bcrypt_rounds = FAST_ROUNDS
    mock.hash_timeout_seconds = 5.0
    mock.password_min_length = 6
    mock.name_max_length = 10
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("social_accounts.core.config.get_settings", return_value=mock), patch(
        "social_accounts.core.logging_config.get_settings", return_value=mock
    ), patch(
        "social_accounts.infrastructure.db.mongo_user_repository.get_settings", return_value=mock
    ), patch(
        "social_accounts.di.providers.security_provider.get_settings", return_value=mock
    ), patch(
        "social_accounts.di.providers.repository_provider.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def hashing_service():
    return BcryptHashingService(timeout_seconds=5.0)


@pytest.fixture
def credential_manager(hashing_service):
    return CredentialManager(hashing_service=hashing_service, rounds=FAST_ROUNDS)


@pytest.fixture
def mock_collection():
    """Motor collection double with async methods and write results."""
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1))
    collection.update_many = AsyncMock(return_value=MagicMock(modified_count=0))
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.create_index = AsyncMock(return_value="email_1")
    return collection


class InMemoryUserCollection:
    """
    Dict-backed stand-in for the users collection.

    Supports the subset of queries/updates MongoUserRepository issues:
    equality filters, $set, $addToSet, $pull and a unique email.
    """

    def __init__(self) -> None:
        self.documents = {}

    def _matches(self, document, query):
        return all(document.get(key) == value for key, value in query.items())

    def _first(self, query):
        for document in self.documents.values():
            if self._matches(document, query):
                return document
        return None

    def _check_unique_email(self, email, own_id=None):
        for doc_id, document in self.documents.items():
            if doc_id != own_id and document.get("email") == email:
                raise DuplicateKeyError("E11000 duplicate key error collection: users index: email_1")

    async def create_index(self, *args, **kwargs):
        return "email_1"

    async def find_one(self, query):
        document = self._first(query)
        return copy.deepcopy(document) if document is not None else None

    async def insert_one(self, document):
        self._check_unique_email(document.get("email"))
        doc_id = ObjectId()
        stored = copy.deepcopy(document)
        stored["_id"] = doc_id
        self.documents[doc_id] = stored
        return MagicMock(inserted_id=doc_id)

    async def update_one(self, query, update):
        document = self._first(query)
        if document is None:
            return MagicMock(matched_count=0)
        self._apply(document, update)
        return MagicMock(matched_count=1)

    async def update_many(self, query, update):
        matched = [doc for doc in self.documents.values() if self._matches(doc, query)]
        for document in matched:
            self._apply(document, update)
        return MagicMock(modified_count=len(matched))

    async def delete_one(self, query):
        document = self._first(query)
        if document is None:
            return MagicMock(deleted_count=0)
        del self.documents[document["_id"]]
        return MagicMock(deleted_count=1)

    def _apply(self, document, update):
        for key, value in update.get("$set", {}).items():
            if key == "email":
                self._check_unique_email(value, own_id=document["_id"])
            document[key] = copy.deepcopy(value)
        for key, value in update.get("$addToSet", {}).items():
            values = document.setdefault(key, [])
            if value not in values:
                values.append(value)
        for key, value in update.get("$pull", {}).items():
            document[key] = [item for item in document.get(key, []) if item != value]


@pytest.fixture
def user_collection():
    return InMemoryUserCollection()
