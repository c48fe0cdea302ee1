"""
Factory for creating validated students.
"""

from typing import Optional, Union

from ..core import validation
from ..core.entities import Student
from ..core.enums import StudentType
from ..core.exceptions import ValidationError
from ..core.interfaces import GradeCalculator


class StudentFactory:
    """Creates Student instances from a type tag, its name or a menu choice."""

    @staticmethod
    def resolve_type(student_type: Union[StudentType, str, int]) -> StudentType:
        if isinstance(student_type, StudentType):
            return student_type
        if isinstance(student_type, int):
            return StudentType.from_choice(student_type)
        try:
            return StudentType(student_type.strip().capitalize())
        except (AttributeError, ValueError):
            raise ValidationError(f"Unknown student type: {student_type!r}",
                                  error_code="UNKNOWN_STUDENT_TYPE")

    @classmethod
    def create_student(cls, student_type: Union[StudentType, str, int], name: str, age: int,
                       email: str, phone: str,
                       grade_calculator: Optional[GradeCalculator] = None) -> Student:
        """Validate contact details and build a student of the requested type."""
        resolved = cls.resolve_type(student_type)
        errors = {}
        if not validation.is_valid_name(name):
            errors['name'] = name
        if not validation.is_valid_email(email):
            errors['email'] = email
        if not validation.is_valid_phone(phone):
            errors['phone'] = phone
        if isinstance(age, bool) or not isinstance(age, int) or age <= 0:
            errors['age'] = age
        if errors:
            raise ValidationError(
                f"Invalid student data: {', '.join(sorted(errors))}",
                error_code="INVALID_STUDENT",
                details=errors,
            )
        return Student(name, age, email, phone, resolved, grade_calculator=grade_calculator)
