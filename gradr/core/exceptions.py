"""
Custom exceptions for the Gradr platform.
"""

from typing import Optional, Any, Dict


class GradrException(Exception):
    """Base exception for all Gradr-related errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class InvalidGradeError(GradrException):
    """Raised when a score falls outside the 0-100 range."""

    def __init__(self, score: Any):
        super().__init__(
            f"Grade must be between 0 and 100, got {score}",
            error_code="INVALID_GRADE",
            details={"score": score},
        )
        self.score = score


class ValidationError(GradrException):
    """Raised when data validation fails."""
    pass


class StudentNotFoundError(GradrException):
    """Raised when a requested student is not registered."""

    def __init__(self, student_id: str):
        super().__init__(
            f"Student not found: {student_id}",
            error_code="STUDENT_NOT_FOUND",
            details={"student_id": student_id},
        )
        self.student_id = student_id


class ConfigurationError(GradrException):
    """Raised when configuration is invalid."""
    pass
