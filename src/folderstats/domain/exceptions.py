"""Domain exceptions for the folder stats pipeline."""


class DomainException(Exception):
    """Base exception for all domain errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when configuration is invalid."""
    pass


class FolderNotFoundError(DomainException):
    """Raised when a folder cannot be resolved to text."""
    pass


class UnsupportedCommandError(DomainException):
    """Raised when no implementation exists for a stats command."""
    pass


class StorageError(DomainException):
    """Raised when stats records cannot be read or written."""
    pass
