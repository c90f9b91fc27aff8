from __future__ import annotations


class LocaleDataError(Exception):
    """Base class for locale data errors"""
    def __init__(self, message: str = "Locale data error") -> None:
        self.message = message
        super().__init__(self.message)


class InvalidLocaleError(LocaleDataError, ValueError):
    """Raised when a locale tag cannot be normalized"""
    def __init__(self, message: str = "Invalid locale tag") -> None:
        super().__init__(message)


class TableNotFoundError(LocaleDataError, LookupError):
    """Raised when no table of the requested kind exists for a locale"""
    def __init__(self, message: str = "Table not found") -> None:
        super().__init__(message)


class MalformedTableError(LocaleDataError):
    """Raised when a packaged table does not have the expected shape"""
    def __init__(self, message: str = "Malformed table") -> None:
        super().__init__(message)


class DuplicateKeyError(MalformedTableError):
    """Raised when the same key appears twice in one table"""
    def __init__(self, message: str = "Duplicate key in table") -> None:
        super().__init__(message)


class ResourcePackageError(LocaleDataError):
    """Raised when the configured resource package cannot be imported"""
    def __init__(self, message: str = "Resource package not found") -> None:
        super().__init__(message)
