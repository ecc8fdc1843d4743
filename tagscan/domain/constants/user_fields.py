"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    FULL_NAME = "full_name"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    IS_VERIFIED = "is_verified"
    ROLE = "role"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class UserRoles:
    """Allowed values for the role field"""
    USER = "user"
    ADMIN = "admin"

    ALL = frozenset({USER, ADMIN})
