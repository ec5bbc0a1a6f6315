"""Classification of database constraint violations."""

from enum import Enum as PyEnum

from sqlalchemy.exc import IntegrityError

from lodge.core.exceptions import LodgeException, StoreException

# PostgreSQL SQLSTATE codes
_UNIQUE_VIOLATION = "23505"
_FOREIGN_KEY_VIOLATION = "23503"


class ConstraintViolation(str, PyEnum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    OTHER = "other"


def classify_integrity_error(exc: IntegrityError) -> ConstraintViolation:
    """
    Work out which kind of constraint an IntegrityError tripped.

    Uses the driver's SQLSTATE when it exposes one (psycopg) and falls back
    to the message text (SQLite).
    """
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == _UNIQUE_VIOLATION:
        return ConstraintViolation.UNIQUE
    if code == _FOREIGN_KEY_VIOLATION:
        return ConstraintViolation.FOREIGN_KEY

    message = str(orig).lower()
    if "unique" in message or "duplicate" in message:
        return ConstraintViolation.UNIQUE
    if "foreign key" in message:
        return ConstraintViolation.FOREIGN_KEY
    return ConstraintViolation.OTHER


def translate_integrity_error(
    exc: IntegrityError,
    *,
    unique: LodgeException,
    foreign_key: LodgeException,
) -> LodgeException:
    """
    Map an IntegrityError to the domain exception for its constraint kind.

    Violations of any other constraint become a StoreException.
    """
    kind = classify_integrity_error(exc)
    if kind is ConstraintViolation.UNIQUE:
        return unique
    if kind is ConstraintViolation.FOREIGN_KEY:
        return foreign_key
    return StoreException("Failed to save changes")
