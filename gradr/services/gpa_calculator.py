"""
Percentage to letter grade / 4.0 GPA conversion and GPA analytics.
"""

import logging
from typing import Optional, Sequence, Tuple

from ..core.entities import Student
from ..core.exceptions import ConfigurationError
from .grade_manager import GradeManager
from .student_manager import StudentManager


logger = logging.getLogger(__name__)

RULE = "_" * 47

# (inclusive lower bound, letter, GPA points), highest tier first
GPA_SCALE: Sequence[Tuple[float, str, float]] = (
    (93, "A", 4.0),
    (90, "A-", 3.7),
    (87, "B+", 3.3),
    (83, "B", 3.0),
    (80, "B-", 2.7),
    (77, "C+", 2.3),
    (73, "C", 2.0),
    (70, "C-", 1.7),
    (67, "D+", 1.3),
    (60, "D", 1.0),
)
FAILING_TIER: Tuple[str, float] = ("F", 0.0)


def _tier(percentage: float) -> Tuple[str, float]:
    for lower_bound, letter, points in GPA_SCALE:
        if percentage >= lower_bound:
            return letter, points
    return FAILING_TIER


class GPACalculator:
    """Converts percentages to letter grades and GPA points.

    The two conversions are pure and need no grade data. The cumulative
    GPA, rank and report methods read grades from the GradeManager given
    at construction.
    """

    def __init__(self, grade_manager: Optional[GradeManager] = None):
        self._grade_manager = grade_manager

    def get_letter_grade(self, percentage: float) -> str:
        return _tier(percentage)[0]

    def convert_percentage_to_gpa(self, percentage: float) -> float:
        return _tier(percentage)[1]

    def calculate_cumulative_gpa(self, student_id: str) -> float:
        """Mean GPA points over the student's grades; 0.0 with no grades."""
        grades = self._require_grade_manager().get_grades_by_student(student_id)
        if not grades:
            return 0.0
        points = [self.convert_percentage_to_gpa(grade.score) for grade in grades]
        return sum(points) / len(points)

    def calculate_class_rank(self, student_id: str, student_manager: StudentManager) -> int:
        """1 + the number of other students with a strictly higher cumulative GPA."""
        student_gpa = self.calculate_cumulative_gpa(student_id)
        rank = 1
        for other in student_manager.get_students():
            if other.student_id == student_id:
                continue
            if self.calculate_cumulative_gpa(other.student_id) > student_gpa:
                rank += 1
        return rank

    def calculate_class_average_gpa(self, student_manager: StudentManager) -> float:
        students = student_manager.get_students()
        if not students:
            return 0.0
        total = sum(self.calculate_cumulative_gpa(s.student_id) for s in students)
        return total / len(students)

    def generate_gpa_report(self, student: Student, student_manager: StudentManager) -> str:
        """Render a GPA breakdown for one student against the class."""
        student_id = student.student_id
        average = student.calculate_average_grade()

        lines = [
            RULE,
            "",
            f"Student: {student_id} - {student.name}",
            f"Type: {student.student_type.value} Student",
            f"Overall Average: {average:.2f}%",
            "",
            "GPA CALCULATION (4.0 Scale)",
            RULE,
            "%-15s | %-6s | %-11s" % ("Subject", "Grade", "GPA Points"),
            RULE,
        ]
        for grade in self._require_grade_manager().get_grades_by_student(student_id):
            lines.append("%-15s | %3.0f%% | %.1f (%s)" % (
                grade.subject.name,
                grade.score,
                self.convert_percentage_to_gpa(grade.score),
                self.get_letter_grade(grade.score),
            ))
        lines.extend([RULE, ""])

        cumulative_gpa = self.calculate_cumulative_gpa(student_id)
        rank = self.calculate_class_rank(student_id, student_manager)
        lines.extend([
            f"Cumulative GPA: {cumulative_gpa:.2f} / 4.0",
            f"Letter Grade: {self.get_letter_grade(average)}",
            f"Class Rank: {rank} of {student_manager.get_student_count()}",
            "",
            "Performance Analysis:",
        ])

        if cumulative_gpa >= 3.5:
            lines.append("Excellent performance (3.5+ GPA)")
        if student.is_passing(average):
            lines.append("Meeting grade requirements")
        class_average_gpa = self.calculate_class_average_gpa(student_manager)
        if cumulative_gpa >= class_average_gpa:
            lines.append(f"Above class average ({class_average_gpa:.2f} GPA)")

        return "\n".join(lines) + "\n"

    def _require_grade_manager(self) -> GradeManager:
        if self._grade_manager is None:
            raise ConfigurationError("GPACalculator needs a GradeManager for GPA analytics")
        return self._grade_manager
