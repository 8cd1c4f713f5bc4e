"""Custom exceptions for clearer error handling across the package."""


class MarketPulseError(Exception):
    """Base exception for all package-specific errors."""


class InvalidInput(MarketPulseError, ValueError):
    """Raised when bars or indicator arguments violate the input contract."""


class ConfigError(MarketPulseError, ValueError):
    """Raised when runtime settings are invalid."""


class DataProviderError(MarketPulseError):
    """Raised when a bar source cannot produce bars for a symbol."""
