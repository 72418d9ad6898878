"""
Catalog Exceptions

Errors raised by the configuration, migration and seed components.
The entry point turns any of these into a fatal log line and a non-zero exit.
"""


class CatalogError(Exception):
    """Base class for recipe catalog errors."""


class DatabaseUnavailable(CatalogError):
    """Raised when the database cannot be reached or fails the liveness check."""


class MigrationError(CatalogError):
    """Raised when the schema cannot be brought up to date."""


class SeedError(CatalogError):
    """Raised when an insert fails and the seed transaction was rolled back."""

    def __init__(self, step, cause=None):
        self.step = step
        self.cause = cause
        message = f"Failed to create {step}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ValidationError(CatalogError, ValueError):
    """Raised when a value is rejected before it reaches the database."""

    def __init__(self, field, message):
        self.field = field
        super().__init__(f"{field}: {message}")
