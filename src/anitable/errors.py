"""Exceptions raised by the Anissia client."""


class AnitableError(Exception):
    """Base class for client errors."""


class RequestError(AnitableError):
    """Transport failure (DNS, connection, timeout) or non-2xx response."""


class DecodeError(AnitableError):
    """Response body or a mandatory field could not be decoded."""


class ConfigError(AnitableError):
    """Configuration file is unreadable or invalid."""
