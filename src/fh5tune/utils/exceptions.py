"""Custom exceptions for tune calculation."""


class TuneError(Exception):
    """Base exception for tune calculation errors."""


class ConfigurationError(TuneError):
    """Raised when tune style or weather configuration is invalid."""


class InvalidCarSpecError(TuneError):
    """Raised when a car specification is structurally invalid."""


class CatalogDataError(TuneError):
    """Raised when car catalog data cannot be read or parsed."""
