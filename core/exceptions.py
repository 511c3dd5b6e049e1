#!/usr/bin/env python3
"""
Custom exceptions for the matching engine services.
"""


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class ValidationException(ServiceException):
    """Raised when a request is rejected before reaching storage."""
    pass


class InvalidFeedbackError(ValidationException):
    """Raised when match feedback is not one of the accepted values."""
    pass


class InvalidScoutRequestError(ValidationException):
    """Raised when a candidate scout request has no usable skills."""
    pass


class RepositoryException(ServiceException):
    """Raised when a storage operation fails."""
    pass
