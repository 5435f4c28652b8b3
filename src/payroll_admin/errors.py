"""Typed errors raised by the data-access layer."""

from __future__ import annotations

from sqlalchemy.exc import DBAPIError, SQLAlchemyError


class DataStoreError(Exception):
    """Raised when the datastore rejects or fails a query."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code
        super().__init__(message)

    @classmethod
    def from_exception(cls, exc: SQLAlchemyError) -> DataStoreError:
        """Wrap a SQLAlchemy error, keeping the driver's own message."""
        if isinstance(exc, DBAPIError) and exc.orig is not None:
            # Async adapters chain the driver's exception as __cause__
            cause = exc.orig.__cause__
            driver_error = cause if isinstance(cause, Exception) else exc.orig
            message = str(driver_error)
            code = (
                getattr(driver_error, "sqlstate", None)
                or getattr(exc.orig, "sqlstate", None)
                or exc.code
            )
        else:
            message = str(exc)
            code = getattr(exc, "code", None)
        return cls(message, code)


class RecordNotFoundError(DataStoreError):
    """Raised when a write targets a row that does not exist."""

    def __init__(self, table: str, record_id: int):
        self.table = table
        self.record_id = record_id
        super().__init__(f"No row in '{table}' with id {record_id}", "NO_ROWS")
