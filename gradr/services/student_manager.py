"""
In-memory student registry.
"""

import logging
import threading
from typing import List, Optional, Tuple

from ..core.entities import Student
from ..core.exceptions import StudentNotFoundError


logger = logging.getLogger(__name__)


class StudentManager:
    """Keeps registered students in the order they were added."""

    def __init__(self):
        self._students: List[Student] = []
        self._lock = threading.RLock()

    def add_student(self, student: Student) -> None:
        with self._lock:
            self._students.append(student)
            logger.info("Registered %s student %s (%s)",
                        student.student_type.value, student.student_id, student.name)

    def find_student(self, student_id: str) -> Optional[Student]:
        """Return the student with this id, or None."""
        with self._lock:
            for student in self._students:
                if student.student_id == student_id:
                    return student
        return None

    def get_student(self, student_id: str) -> Student:
        """Like find_student, but raise StudentNotFoundError for unknown ids."""
        student = self.find_student(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    def get_students(self) -> Tuple[Student, ...]:
        with self._lock:
            return tuple(self._students)

    def get_student_count(self) -> int:
        with self._lock:
            return len(self._students)

    def calculate_class_average(self) -> float:
        """Mean of every student's overall average; 0.0 with no students."""
        students = self.get_students()
        if not students:
            return 0.0
        return sum(student.calculate_average_grade() for student in students) / len(students)
