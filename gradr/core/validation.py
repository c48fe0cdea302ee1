"""
Precompiled patterns for validating student and subject data.
"""

import re
from typing import Pattern, Tuple


# STU followed by at least three digits, e.g. STU001, STU1000
STUDENT_ID: Pattern = re.compile(r"^STU\d{3,}$")

EMAIL: Pattern = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

PHONE_FORMATS: Tuple[Pattern, ...] = (
    re.compile(r"^\(\d{3}\) \d{3}-\d{4}$"),   # (123) 456-7890
    re.compile(r"^\d{3}-\d{3}-\d{4}$"),       # 123-456-7890
    re.compile(r"^\+1-\d{3}-\d{3}-\d{4}$"),   # +1-123-456-7890
    re.compile(r"^\d{10}$"),                  # 1234567890
)

# John Smith, Mary-Jane O'Connor, Jean-Pierre
NAME: Pattern = re.compile(r"^[a-zA-Z]+(['\s-][a-zA-Z]+)*$")

# MAT101, ENG203
COURSE_CODE: Pattern = re.compile(r"^[A-Z]{3}\d{3}$")


def is_valid_student_id(value: str) -> bool:
    return bool(STUDENT_ID.match(value or ""))


def is_valid_email(value: str) -> bool:
    return bool(EMAIL.match(value or ""))


def is_valid_phone(value: str) -> bool:
    """Accept any of the supported phone formats."""
    value = value or ""
    return any(pattern.match(value) for pattern in PHONE_FORMATS)


def is_valid_name(value: str) -> bool:
    return bool(NAME.match(value or ""))


def is_valid_course_code(value: str) -> bool:
    return bool(COURSE_CODE.match(value or ""))
