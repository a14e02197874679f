"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    EMAIL = "email"
    NAME = "name"
    ABOUT = "about"
    PHOTO = "photo"
    CREATED = "created"
    UPDATED = "updated"
    HASHED_PASSWORD = "hashed_password"
    FOLLOWING = "following"
    FOLLOWERS = "followers"

    # Virtual field; validated but never stored
    PASSWORD = "password"

    # Embedded photo document
    PHOTO_DATA = "data"
    PHOTO_CONTENT_TYPE = "contentType"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
