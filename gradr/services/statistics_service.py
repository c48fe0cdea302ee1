"""
Class-wide statistics over recorded grades and registered students.
"""

import math
import statistics
from collections import Counter, OrderedDict
from typing import Dict, List, Optional, Tuple

from ..core.entities import Grade
from ..core.enums import LetterBand, StudentType, SubjectCategory
from .grade_manager import GradeManager
from .student_manager import StudentManager


RULE = "_" * 47
BAR_WIDTH = 25


def band_for(score: float) -> LetterBand:
    if score >= 90:
        return LetterBand.A
    elif score >= 80:
        return LetterBand.B
    elif score >= 70:
        return LetterBand.C
    elif score >= 60:
        return LetterBand.D
    return LetterBand.F


class StatisticsCalculator:
    """Computes distribution and summary statistics for the whole class."""

    def __init__(self, grade_manager: GradeManager, student_manager: StudentManager):
        self._grade_manager = grade_manager
        self._student_manager = student_manager

    def _scores(self) -> List[float]:
        return [grade.score for grade in self._grade_manager.get_grades()]

    def get_grade_distribution(self) -> Dict[LetterBand, int]:
        distribution = OrderedDict((band, 0) for band in LetterBand)
        for score in self._scores():
            distribution[band_for(score)] += 1
        return distribution

    def calculate_mean(self) -> float:
        scores = self._scores()
        return statistics.mean(scores) if scores else 0.0

    def calculate_median(self) -> float:
        scores = self._scores()
        return float(statistics.median(scores)) if scores else 0.0

    def calculate_mode(self) -> float:
        """Most frequent score rounded half-up to an integer; earliest wins ties."""
        scores = self._scores()
        if not scores:
            return 0.0
        rounded = Counter(int(math.floor(score + 0.5)) for score in scores)
        return float(rounded.most_common(1)[0][0])

    def calculate_standard_deviation(self) -> float:
        """Population standard deviation."""
        scores = self._scores()
        return statistics.pstdev(scores) if scores else 0.0

    def get_range(self) -> Tuple[float, float]:
        scores = self._scores()
        if not scores:
            return 0.0, 0.0
        return min(scores), max(scores)

    def get_highest_grade(self) -> Optional[Grade]:
        grades = self._grade_manager.get_grades()
        return max(grades, key=lambda grade: grade.score) if grades else None

    def get_lowest_grade(self) -> Optional[Grade]:
        grades = self._grade_manager.get_grades()
        return min(grades, key=lambda grade: grade.score) if grades else None

    def calculate_subject_average(self, subject_name: str) -> float:
        scores = [g.score for g in self._grade_manager.get_grades() if g.subject.name == subject_name]
        return sum(scores) / len(scores) if scores else 0.0

    def calculate_category_average(self, category: SubjectCategory) -> float:
        scores = [g.score for g in self._grade_manager.get_grades() if g.subject.category is category]
        return sum(scores) / len(scores) if scores else 0.0

    def compare_student_types(self) -> Dict[StudentType, Tuple[int, float]]:
        """Per student type: (student count, mean of their overall averages)."""
        averages: Dict[StudentType, List[float]] = {t: [] for t in StudentType}
        for student in self._student_manager.get_students():
            averages[student.student_type].append(student.calculate_average_grade())
        return {
            student_type: (len(values), sum(values) / len(values) if values else 0.0)
            for student_type, values in averages.items()
        }

    def generate_class_statistics(self) -> str:
        total_grades = self._grade_manager.get_grade_count()
        lines = [
            "CLASS STATISTICS",
            RULE,
            "",
            f"Total Students: {self._student_manager.get_student_count()}",
            f"Total Grades Recorded: {total_grades}",
            "",
        ]
        if total_grades == 0:
            lines.append("No grades recorded yet. Statistics unavailable.")
            return "\n".join(lines) + "\n"

        lines.extend(["GRADE DISTRIBUTION", RULE])
        for band, count in self.get_grade_distribution().items():
            percentage = count * 100.0 / total_grades
            bar = ("|" * int(percentage / 2)).ljust(BAR_WIDTH)
            lines.append("%-13s %s %.1f%% (%d grades)" % (band.value + ":", bar, percentage, count))

        low, high = self.get_range()
        lines.extend([
            "",
            "STATISTICAL ANALYSIS",
            RULE,
            f"Mean (Average):       {self.calculate_mean():.1f}%",
            f"Median:               {self.calculate_median():.1f}%",
            f"Mode:                 {self.calculate_mode():.1f}%",
            f"Standard Deviation:   {self.calculate_standard_deviation():.1f}%",
            f"Range:                {high - low:.1f}% ({low:.0f}% - {high:.0f}%)",
            "",
        ])

        highest = self.get_highest_grade()
        lowest = self.get_lowest_grade()
        lines.append(f"Highest Grade:        {highest.score:.0f}% ({highest.student_id} - {highest.subject.name})")
        lines.append(f"Lowest Grade:         {lowest.score:.0f}% ({lowest.student_id} - {lowest.subject.name})")

        lines.extend(["", "SUBJECT PERFORMANCE", RULE])
        for category in SubjectCategory:
            lines.append(f"{category.value} Subjects:".ljust(22)
                         + f"{self.calculate_category_average(category):.1f}% average")
            for name in self._subject_names(category):
                lines.append(f"  {name}:".ljust(22) + f"{self.calculate_subject_average(name):.1f}%")

        lines.extend(["", "STUDENT TYPE COMPARISON", RULE])
        for student_type, (count, average) in self.compare_student_types().items():
            lines.append(f"{student_type.value} Students:".ljust(22)
                         + f"{count} students, {average:.1f}% average")

        return "\n".join(lines) + "\n"

    def _subject_names(self, category: SubjectCategory) -> List[str]:
        names: List[str] = []
        for grade in self._grade_manager.get_grades():
            if grade.subject.category is category and grade.subject.name not in names:
                names.append(grade.subject.name)
        return names
