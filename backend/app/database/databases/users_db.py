"""
User directory database configuration.
Stores the user documents served by the CRUD endpoints.
"""


class Collections:
    """Collection names in the user directory database."""
    USERS = "users"


class Fields:
    """Document field names in the users collection."""
    ID = "_id"
    NAME = "name"
    EMAIL = "email"
    CREATED_AT = "createdAt"


# Fields that can never be changed through an update
IMMUTABLE_FIELDS = frozenset({"id", Fields.ID, Fields.CREATED_AT})
