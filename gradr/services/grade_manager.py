"""
Grade collection and per-student aggregation.
"""

import logging
import threading
from typing import List, Tuple

from ..core.entities import Grade
from ..core.enums import SubjectCategory
from ..core.interfaces import GradeCalculator


logger = logging.getLogger(__name__)

HISTORY_RULE = "-" * 85
EMPTY_RULE = "_" * 47


def _mean(scores: List[float]) -> float:
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def _category_mean(grades: List[Grade], category: SubjectCategory) -> float:
    return _mean([grade.score for grade in grades if grade.subject.category is category])


class GradeManager(GradeCalculator):
    """Owns every recorded grade in insertion order.

    The collection is append-only: grades are never removed or reordered,
    and the same student/subject pair may appear more than once. All
    averages return 0.0 for an empty selection, so unknown student ids
    are not an error.
    """

    def __init__(self):
        self._grades: List[Grade] = []
        self._lock = threading.RLock()

    def add_grade(self, grade: Grade) -> None:
        """Append a grade. Grades validate their own score on construction."""
        with self._lock:
            self._grades.append(grade)
            logger.debug("Added grade for %s in %s (%.1f)",
                         grade.student_id, grade.subject.code, grade.score)

    def get_grade_count(self) -> int:
        with self._lock:
            return len(self._grades)

    def get_grades(self) -> Tuple[Grade, ...]:
        """Snapshot of all grades in insertion order."""
        with self._lock:
            return tuple(self._grades)

    def get_grades_by_student(self, student_id: str) -> List[Grade]:
        with self._lock:
            return [grade for grade in self._grades if grade.student_id == student_id]

    def calculate_core_average(self, student_id: str) -> float:
        return _category_mean(self.get_grades_by_student(student_id), SubjectCategory.CORE)

    def calculate_elective_average(self, student_id: str) -> float:
        return _category_mean(self.get_grades_by_student(student_id), SubjectCategory.ELECTIVE)

    def calculate_overall_average(self, student_id: str) -> float:
        """Flat mean of every grade the student holds, whatever the category."""
        return _mean([grade.score for grade in self.get_grades_by_student(student_id)])

    def get_enrolled_subjects_count(self, student_id: str) -> int:
        """Count of grade records for the student (repeat subjects count twice)."""
        return len(self.get_grades_by_student(student_id))

    def view_grades_by_student(self, student_id: str) -> str:
        """Render the grade history of one student as text."""
        student_grades = self.get_grades_by_student(student_id)

        if not student_grades:
            return (
                f"{EMPTY_RULE}\n"
                "No grades recorded for this student\n"
                f"{EMPTY_RULE}\n\n"
            )

        lines = [
            "GRADE HISTORY",
            HISTORY_RULE,
            "GRD ID    | DATE       | SUBJECT          | TYPE       | GRADE",
            HISTORY_RULE,
        ]
        for grade in student_grades:
            lines.append("%-9s | %-10s | %-16s | %-10s | %-5.1f%%" % (
                grade.grade_id,
                grade.date,
                grade.subject.name,
                grade.subject.category.value,
                grade.score,
            ))

        lines.extend([
            "",
            f"Total Grades: {len(student_grades)}",
            f"Core Subjects Average: {_category_mean(student_grades, SubjectCategory.CORE):.1f}%",
            f"Elective Subjects Average: {_category_mean(student_grades, SubjectCategory.ELECTIVE):.1f}%",
            f"Overall Average: {_mean([grade.score for grade in student_grades]):.1f}%",
        ])
        return "\n".join(lines) + "\n"
