"""Mailchimp sync exceptions module."""


class SyncError(Exception):
    """Base exception for all synchronization exceptions."""


class ConfigError(SyncError):
    """Exception raised when a required input is missing or unreadable."""


class InvalidBackendError(SyncError):
    """Exception raised when the sync backend is invalid."""


class DatabaseConnectionError(SyncError):
    """Exception raised when the data source cannot be reached."""


class QueryError(SyncError):
    """Exception raised when the query cannot be executed."""


class SchemaError(SyncError):
    """Exception raised when the query returns an unsupported number of columns."""


class RowReadError(SyncError):
    """Exception raised when a row cannot be decoded."""


class TransportError(SyncError):
    """Exception raised when the batch cannot be submitted to the provider."""
