from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DateParseError(DomainError):
    """Raised when a cell value cannot be read as a calendar date."""


class FormatDetectionAmbiguous(DomainError):
    """Raised when a sheet matches neither the grid nor the list header shape."""


class DriverNotFound(DomainError):
    """Raised when a driver name or id has no roster match."""


class StorageFailure(DomainError):
    """Raised when the ledger could not be read or written."""


class SynchronizationFailure(DomainError):
    """Raised when the legacy workbook could not be updated."""


class ImportRejected(DomainError):
    """Raised when a spreadsheet import has row-level errors.

    Nothing is persisted when this is raised.
    """

    def __init__(self, errors: list[str], *, success_count: int = 0):
        super().__init__("Import failed")
        self.errors = list(errors)
        self.success_count = int(success_count)


class RecordNotFound(DomainError):
    """Raised when an attendance record id does not exist."""
