"""
Services module containing the grade engine and its collaborators.
"""

from .grade_manager import GradeManager
from .gpa_calculator import GPACalculator
from .student_manager import StudentManager
from .student_factory import StudentFactory
from .statistics_service import StatisticsCalculator

__all__ = [
    "GradeManager",
    "GPACalculator",
    "StudentManager",
    "StudentFactory",
    "StatisticsCalculator",
]
