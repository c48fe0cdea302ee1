"""
Enumerations and constants for the Gradr platform.
"""

from enum import Enum


HONORS_ELIGIBILITY_THRESHOLD = 85.0


class EntityStatus(Enum):
    """Status of an entity in the system."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class SubjectCategory(Enum):
    """Category a subject belongs to."""
    CORE = "Core"
    ELECTIVE = "Elective"

    @property
    def is_mandatory(self) -> bool:
        return self is SubjectCategory.CORE


class StudentType(Enum):
    """Types of students, each with its own passing grade."""
    REGULAR = "Regular"
    HONORS = "Honors"

    @property
    def passing_grade(self) -> float:
        if self is StudentType.HONORS:
            return 60.0
        return 50.0

    @classmethod
    def from_choice(cls, choice: int) -> "StudentType":
        """Map a menu choice (1 = Regular, anything else = Honors) to a type."""
        return cls.REGULAR if choice == 1 else cls.HONORS


class LetterBand(Enum):
    """Coarse letter bands used for the class grade distribution."""
    A = "90-100% (A)"
    B = "80-89%  (B)"
    C = "70-79%  (C)"
    D = "60-69%  (D)"
    F = "0-59%   (F)"
