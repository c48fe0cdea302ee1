import pytest

from gradr.core.entities import Student, Subject
from gradr.core.enums import StudentType
from gradr.services import GradeManager, GPACalculator, StudentManager


@pytest.fixture
def grade_manager():
    return GradeManager()


@pytest.fixture
def student_manager():
    return StudentManager()


@pytest.fixture
def gpa_calculator(grade_manager):
    return GPACalculator(grade_manager)


@pytest.fixture
def math():
    return Subject.core("Mathematics", "MAT101")


@pytest.fixture
def english():
    return Subject.core("English", "ENG101")


@pytest.fixture
def science():
    return Subject.core("Science", "SCI101")


@pytest.fixture
def music():
    return Subject.elective("Music", "MUS101")


@pytest.fixture
def art():
    return Subject.elective("Art", "ART101")


@pytest.fixture
def regular_student(grade_manager, student_manager):
    student = Student("John Doe", 16, "john@test.com", "123-456-7890",
                      StudentType.REGULAR, grade_calculator=grade_manager)
    student_manager.add_student(student)
    return student


@pytest.fixture
def honors_student(grade_manager, student_manager):
    student = Student("Jane Smith", 17, "jane@test.com", "098-765-4321",
                      StudentType.HONORS, grade_calculator=grade_manager)
    student_manager.add_student(student)
    return student
