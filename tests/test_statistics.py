import pytest

from gradr.core.entities import Grade
from gradr.core.enums import LetterBand, StudentType, SubjectCategory
from gradr.services import StatisticsCalculator


@pytest.fixture
def stats(grade_manager, student_manager):
    return StatisticsCalculator(grade_manager, student_manager)


@pytest.fixture
def populated(grade_manager, regular_student, honors_student, math, english, music):
    for student, subject, score in (
            (regular_student, math, 72),
            (regular_student, music, 58),
            (regular_student, english, 85),
            (honors_student, math, 95),
            (honors_student, english, 85),
            (honors_student, music, 90)):
        grade_manager.add_grade(Grade(student.student_id, subject, score))
    return grade_manager


def test_empty_statistics(stats):
    assert stats.calculate_mean() == 0.0
    assert stats.calculate_median() == 0.0
    assert stats.calculate_mode() == 0.0
    assert stats.calculate_standard_deviation() == 0.0
    assert stats.get_range() == (0.0, 0.0)
    assert stats.get_highest_grade() is None
    assert stats.get_lowest_grade() is None

    report = stats.generate_class_statistics()
    assert "CLASS STATISTICS" in report
    assert "Total Grades Recorded: 0" in report
    assert "No grades recorded yet. Statistics unavailable." in report


def test_grade_distribution(stats, populated):
    distribution = stats.get_grade_distribution()
    assert list(distribution) == list(LetterBand)
    assert distribution[LetterBand.A] == 2
    assert distribution[LetterBand.B] == 2
    assert distribution[LetterBand.C] == 1
    assert distribution[LetterBand.D] == 0
    assert distribution[LetterBand.F] == 1


def test_summary_statistics(stats, populated):
    assert stats.calculate_mean() == pytest.approx(80.833, abs=0.001)
    assert stats.calculate_median() == pytest.approx(85.0)
    assert stats.calculate_mode() == 85.0
    assert stats.calculate_standard_deviation() == pytest.approx(12.375, abs=0.01)
    assert stats.get_range() == (58.0, 95.0)


def test_mode_rounds_half_up_and_prefers_first_seen(grade_manager, stats, math):
    for score in (70.5, 80, 71, 80.4):
        grade_manager.add_grade(Grade("STU001", math, score))
    # 70.5 and 71 both round to 71; 80 and 80.4 both round to 80
    assert stats.calculate_mode() == 71.0


def test_highest_and_lowest(stats, populated, honors_student, regular_student):
    assert stats.get_highest_grade().score == 95.0
    assert stats.get_highest_grade().student_id == honors_student.student_id
    assert stats.get_lowest_grade().score == 58.0
    assert stats.get_lowest_grade().student_id == regular_student.student_id


def test_subject_and_category_averages(stats, populated):
    assert stats.calculate_subject_average("Mathematics") == pytest.approx(83.5)
    assert stats.calculate_subject_average("Drama") == 0.0
    assert stats.calculate_category_average(SubjectCategory.CORE) == pytest.approx(84.25)
    assert stats.calculate_category_average(SubjectCategory.ELECTIVE) == pytest.approx(74.0)


def test_student_type_comparison(stats, populated):
    comparison = stats.compare_student_types()
    count, average = comparison[StudentType.REGULAR]
    assert count == 1
    assert average == pytest.approx(71.667, abs=0.001)
    count, average = comparison[StudentType.HONORS]
    assert count == 1
    assert average == pytest.approx(90.0)


def test_class_statistics_report(stats, populated):
    report = stats.generate_class_statistics()
    for heading in ("CLASS STATISTICS", "GRADE DISTRIBUTION", "STATISTICAL ANALYSIS",
                    "SUBJECT PERFORMANCE", "STUDENT TYPE COMPARISON"):
        assert heading in report
    assert "Total Students: 2" in report
    assert "Total Grades Recorded: 6" in report
    assert "Median:               85.0%" in report
    assert "Range:                37.0% (58% - 95%)" in report
    assert "Highest Grade:        95%" in report
    assert "Core Subjects:        84.2% average" in report or "Core Subjects:        84.3% average" in report
    assert "  Music:" in report
    assert "Honors Students:      1 students, 90.0% average" in report
