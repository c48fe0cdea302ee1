"""
Gradr: academic record keeping for students, subjects and grades.

Tracks grades per student and derives core, elective and overall averages,
letter grades, 4.0-scale GPA, honors eligibility and class statistics.
"""

__version__ = "1.0.0"
__author__ = "Gradr Development Team"
__description__ = "Student grade tracking and GPA calculation"
