class LodgeException(Exception):
    """Base exception for lodge manager"""

    pass


class ValidationException(LodgeException):
    """Raised for malformed input: bad ids, missing fields, wrong formats"""

    pass


class RoomReferenceException(ValidationException):
    """Raised when a tenant refers to a room that does not exist"""

    def __init__(self, message: str = "The specified room does not exist"):
        super().__init__(message)


class NotFoundException(LodgeException):
    """Raised when resource not found"""

    pass


class ConflictException(LodgeException):
    """Raised when a write collides with existing data (duplicate identity)"""

    pass


class RoomOccupiedException(ConflictException):
    """Raised when deleting a room that still has tenants"""

    def __init__(self, message: str = "Cannot delete room with active tenants"):
        super().__init__(message)


class StoreException(LodgeException):
    """Raised for persistence failures that are not a known constraint violation"""

    pass
