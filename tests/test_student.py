import re

import pytest

from gradr.core.entities import Grade, Student, Subject
from gradr.core.enums import StudentType, SubjectCategory
from gradr.core.exceptions import ValidationError


def test_passing_grade_follows_student_type(regular_student, honors_student):
    assert regular_student.passing_grade == 50.0
    assert honors_student.passing_grade == 60.0
    assert regular_student.student_type is StudentType.REGULAR
    assert honors_student.student_type is StudentType.HONORS


def test_student_ids_are_generated_and_unique(regular_student, honors_student):
    assert re.match(r"^STU\d{3,}$", regular_student.student_id)
    assert regular_student.student_id != honors_student.student_id


def test_contact_details(regular_student):
    assert regular_student.name == "John Doe"
    assert regular_student.age == 16
    assert regular_student.email == "john@test.com"
    assert regular_student.phone == "123-456-7890"
    assert regular_student.status.value == "Active"


def test_average_grade_without_grades(regular_student):
    assert regular_student.calculate_average_grade() == 0.0


def test_average_grade_without_calculator():
    student = Student("Lone Wolf", 18, "lone@test.com", "1234567890")
    assert student.calculate_average_grade() == 0.0
    assert student.get_enrolled_subjects_count() == 0


def test_average_grade_mixes_categories(grade_manager, regular_student, math, music):
    grade_manager.add_grade(Grade(regular_student.student_id, math, 85))
    grade_manager.add_grade(Grade(regular_student.student_id, music, 95))
    assert regular_student.calculate_average_grade() == pytest.approx(90.0)


def test_average_grade_with_decimals(grade_manager, regular_student, math, english, science):
    for subject, score in ((math, 85.5), (english, 92.3), (science, 78.7)):
        grade_manager.add_grade(Grade(regular_student.student_id, subject, score))
    assert regular_student.calculate_average_grade() == pytest.approx(85.5, abs=0.01)


def test_set_grade_calculator(grade_manager, math):
    student = Student("Late Joiner", 17, "late@test.com", "1234567890")
    grade_manager.add_grade(Grade(student.student_id, math, 70))
    student.set_grade_calculator(grade_manager)
    assert student.calculate_average_grade() == pytest.approx(70.0)
    assert student.get_enrolled_subjects_count() == 1


@pytest.mark.parametrize("average,expected", [(50.0, True), (75.0, True), (100.0, True),
                                              (49.999, False), (25.0, False), (0.0, False)])
def test_regular_is_passing(regular_student, average, expected):
    assert regular_student.is_passing(average) is expected


@pytest.mark.parametrize("average,expected", [(60.0, True), (85.0, True),
                                              (59.999, False), (50.0, False), (0.0, False)])
def test_honors_is_passing(honors_student, average, expected):
    assert honors_student.is_passing(average) is expected


def test_enrolled_subjects_count(grade_manager, regular_student, honors_student, math, english):
    grade_manager.add_grade(Grade(regular_student.student_id, math, 85))
    grade_manager.add_grade(Grade(regular_student.student_id, english, 90))
    grade_manager.add_grade(Grade(honors_student.student_id, math, 99))
    assert regular_student.get_enrolled_subjects_count() == 2
    assert honors_student.get_enrolled_subjects_count() == 1


@pytest.mark.parametrize("scores,expected", [
    ([90, 80], "Yes"),
    ([80, 84], "No"),
    ([85], "Yes"),
    ([84.99], "No"),
    ([100, 100, 55], "Yes"),
])
def test_honors_eligibility(grade_manager, honors_student, math, scores, expected):
    for score in scores:
        grade_manager.add_grade(Grade(honors_student.student_id, math, score))
    assert honors_student.check_honors_eligibility() == expected


def test_honors_eligibility_without_grades(honors_student):
    assert honors_student.check_honors_eligibility() == "No"


def test_regular_students_are_never_honors_eligible(grade_manager, regular_student, math):
    grade_manager.add_grade(Grade(regular_student.student_id, math, 99))
    assert regular_student.check_honors_eligibility() == "No"


def test_subject_categories():
    core = Subject.core("Mathematics", "MAT101")
    elective = Subject("Art", "ART101", SubjectCategory.ELECTIVE)
    assert core.category is SubjectCategory.CORE
    assert core.is_mandatory
    assert not elective.is_mandatory
    assert elective == Subject.elective("Art", "ART101")
    with pytest.raises(AttributeError):
        core.category = SubjectCategory.ELECTIVE


def test_student_type_accepts_its_value(grade_manager):
    student = Student("Tess Tag", 16, "tess@test.com", "1234567890", "Honors",
                      grade_calculator=grade_manager)
    assert student.student_type is StudentType.HONORS
    assert student.passing_grade == 60.0


def test_unknown_student_type_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Student("Tess Tag", 16, "tess@test.com", "1234567890", "Graduate")
    assert exc_info.value.error_code == "UNKNOWN_STUDENT_TYPE"


def test_subject_category_accepts_its_value(grade_manager):
    maths = Subject("Mathematics", "MAT101", "Core")
    drama = Subject("Drama", "DRA101", "Elective")
    assert maths.category is SubjectCategory.CORE
    assert drama.category is SubjectCategory.ELECTIVE

    grade_manager.add_grade(Grade("STU001", maths, 80))
    grade_manager.add_grade(Grade("STU001", drama, 70))
    assert grade_manager.calculate_core_average("STU001") == 80.0
    assert grade_manager.calculate_elective_average("STU001") == 70.0


def test_unknown_subject_category_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Subject("Mathematics", "MAT101", "Mandatory")
    assert exc_info.value.error_code == "UNKNOWN_SUBJECT_CATEGORY"
