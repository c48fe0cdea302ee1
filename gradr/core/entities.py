"""
Core entities for the Gradr platform: subjects, grades and students.
"""

import itertools
import uuid
from abc import ABC
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .enums import EntityStatus, SubjectCategory, StudentType, HONORS_ELIGIBILITY_THRESHOLD
from .interfaces import Gradable, GradeCalculator
from .exceptions import InvalidGradeError, ValidationError


_grade_sequence = itertools.count(1)
_student_sequence = itertools.count(1)


def _coerce(enum_cls, value, label: str):
    """Return the enum member for ``value``, raising ValidationError if unknown."""
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"Unknown {label}: {value!r}",
                              error_code="UNKNOWN_" + label.upper().replace(" ", "_"),
                              details={"value": value})


class AbstractEntity(ABC):
    """Base abstract entity with universal ID, lifecycle, and versioning."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or str(uuid.uuid4())
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1
        self._status = EntityStatus.ACTIVE

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def version(self) -> int:
        return self._version

    @property
    def status(self) -> EntityStatus:
        return self._status

    def touch(self) -> None:
        """Record a modification."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
            'status': self._status.value,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, status={self._status.value})"


@dataclass(frozen=True)
class Subject:
    """Immutable subject shared by reference across grades."""
    name: str
    code: str
    category: SubjectCategory

    def __post_init__(self):
        # accept the category value ("Core"/"Elective") as well as the member
        object.__setattr__(self, "category", _coerce(SubjectCategory, self.category, "subject category"))

    @classmethod
    def core(cls, name: str, code: str) -> "Subject":
        return cls(name, code, SubjectCategory.CORE)

    @classmethod
    def elective(cls, name: str, code: str) -> "Subject":
        return cls(name, code, SubjectCategory.ELECTIVE)

    @property
    def is_mandatory(self) -> bool:
        return self.category.is_mandatory

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'code': self.code,
            'category': self.category.value,
            'mandatory': self.is_mandatory,
        }


class Grade(AbstractEntity, Gradable):
    """A single scored assessment for one student in one subject.

    The score is checked on construction, so a Grade that exists always
    holds a value in [0, 100]. ``record_grade`` can revise it under the
    same bounds.
    """

    MIN_SCORE = 0.0
    MAX_SCORE = 100.0

    def __init__(self, student_id: str, subject: Subject, score: float, **kwargs):
        super().__init__(**kwargs)
        self.validate_grade(score)
        self._student_id = student_id
        self._subject = subject
        self._score = float(score)
        self._grade_id: Optional[str] = None
        self._date = self._created_at.date().isoformat()

    @property
    def grade_id(self) -> str:
        """Sequence id, assigned on first access."""
        if self._grade_id is None:
            self._grade_id = f"GRD{next(_grade_sequence):03d}"
        return self._grade_id

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def subject(self) -> Subject:
        return self._subject

    @property
    def score(self) -> float:
        return self._score

    @property
    def date(self) -> str:
        return self._date

    def validate_grade(self, score: float) -> bool:
        """Return True if score is within bounds, else raise InvalidGradeError."""
        if not self.MIN_SCORE <= score <= self.MAX_SCORE:
            raise InvalidGradeError(score)
        return True

    def record_grade(self, score: float) -> bool:
        """Replace the stored score; the old value is kept if validation fails."""
        self.validate_grade(score)
        self._score = float(score)
        self.touch()
        return True

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'grade_id': self.grade_id,
            'student_id': self._student_id,
            'subject': self._subject.to_dict(),
            'score': self._score,
            'date': self._date,
        })
        return base_dict


class Student(AbstractEntity):
    """Student entity; the student type fixes the passing grade."""

    def __init__(self, name: str, age: int, email: str, phone: str,
                 student_type: StudentType = StudentType.REGULAR,
                 grade_calculator: Optional[GradeCalculator] = None, **kwargs):
        super().__init__(**kwargs)
        self._name = name
        self._age = age
        self._email = email
        self._phone = phone
        self._student_type = _coerce(StudentType, student_type, "student type")
        self._student_id = f"STU{next(_student_sequence):03d}"
        self._grade_calculator = grade_calculator

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    @property
    def email(self) -> str:
        return self._email

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def student_type(self) -> StudentType:
        return self._student_type

    @property
    def passing_grade(self) -> float:
        return self._student_type.passing_grade

    def set_grade_calculator(self, grade_calculator: GradeCalculator) -> None:
        """Attach the calculator used to look up this student's grades."""
        self._grade_calculator = grade_calculator
        self.touch()

    def calculate_average_grade(self) -> float:
        """Overall average across every recorded grade; 0.0 when detached."""
        if self._grade_calculator is None:
            return 0.0
        return self._grade_calculator.calculate_overall_average(self._student_id)

    def get_enrolled_subjects_count(self) -> int:
        if self._grade_calculator is None:
            return 0
        return self._grade_calculator.get_enrolled_subjects_count(self._student_id)

    def is_passing(self, average_grade: float) -> bool:
        return average_grade >= self.passing_grade

    def check_honors_eligibility(self) -> str:
        """Return "Yes" for honors students averaging at least 85.0, else "No"."""
        if self._student_type is not StudentType.HONORS:
            return "No"
        if self.calculate_average_grade() >= HONORS_ELIGIBILITY_THRESHOLD:
            return "Yes"
        return "No"

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'student_id': self._student_id,
            'name': self._name,
            'age': self._age,
            'email': self._email,
            'phone': self._phone,
            'student_type': self._student_type.value,
            'passing_grade': self.passing_grade,
        })
        return base_dict
