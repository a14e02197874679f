from .mongo_connection import get_database, get_user_collection, close_connection
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "close_connection",
    "MongoUserRepository",
]
