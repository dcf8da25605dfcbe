"""
Custom exceptions for the Registrar package.
"""

from typing import Optional, Any, Dict


class RegistrarError(Exception):
    """Base exception for all Registrar-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(RegistrarError):
    """Raised when data validation fails."""
    pass


class SelectionError(ValidationError):
    """Raised when a positional selection is not a number or out of range."""
    pass


class ResourceNotFoundError(RegistrarError):
    """Raised when a requested resource is not found."""
    pass


class DuplicateEntityError(RegistrarError):
    """Raised when attempting to create a duplicate entity."""
    pass


class ConfigurationError(RegistrarError):
    """Raised when configuration is invalid."""
    pass
