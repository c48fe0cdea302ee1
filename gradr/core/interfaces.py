"""
Core interfaces and abstract base classes for the Gradr platform.
"""

from abc import ABC, abstractmethod


class Gradable(ABC):
    """Interface for objects that hold a bounded score."""

    @abstractmethod
    def validate_grade(self, score: float) -> bool:
        """Check a score against the allowed range."""
        pass

    @abstractmethod
    def record_grade(self, score: float) -> bool:
        """Validate and store a score."""
        pass


class GradeCalculator(ABC):
    """Interface for per-student grade aggregation."""

    @abstractmethod
    def calculate_core_average(self, student_id: str) -> float:
        """Average of the student's core subject scores."""
        pass

    @abstractmethod
    def calculate_elective_average(self, student_id: str) -> float:
        """Average of the student's elective subject scores."""
        pass

    @abstractmethod
    def calculate_overall_average(self, student_id: str) -> float:
        """Average of all of the student's scores."""
        pass

    @abstractmethod
    def get_enrolled_subjects_count(self, student_id: str) -> int:
        """Number of grade records held for the student."""
        pass
