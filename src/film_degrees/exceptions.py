"""
Custom exceptions for film_degrees.
"""

class FilmDegreesException(Exception):
    """Base exception for the package."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class ProviderError(FilmDegreesException):
    """Raised when a single remote metadata lookup fails."""
    pass

class ProviderFatalError(ProviderError):
    """Raised when the provider cannot serve any request (missing or rejected credentials)."""
    pass

class InvalidOriginError(FilmDegreesException, ValueError):
    """Raised when a search origin is not a valid person reference."""
    pass
