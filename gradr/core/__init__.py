"""
Core module containing the fundamental object model and base classes.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Subject",
    "Grade",
    "Student",

    # Interfaces
    "Gradable",
    "GradeCalculator",

    # Enums
    "EntityStatus",
    "SubjectCategory",
    "StudentType",
    "LetterBand",
    "HONORS_ELIGIBILITY_THRESHOLD",

    # Exceptions
    "GradrException",
    "InvalidGradeError",
    "ValidationError",
    "StudentNotFoundError",
    "ConfigurationError",
]
