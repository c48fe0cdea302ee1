"""
REST API implementation for the Gradr platform using FastAPI.
"""

import logging
import threading
from typing import Dict, List
from datetime import datetime, timezone
from pydantic import BaseModel, Field

from fastapi import FastAPI, HTTPException, Query, status
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..core import validation
from ..core.entities import Grade, Student, Subject
from ..core.enums import SubjectCategory
from ..core.exceptions import InvalidGradeError, StudentNotFoundError, ValidationError
from ..services import GradeManager, GPACalculator, StudentManager, StudentFactory, StatisticsCalculator


logger = logging.getLogger(__name__)


# Pydantic models for API
class StudentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=1, le=120)
    email: str = Field(..., min_length=3, max_length=254)
    phone: str = Field(..., min_length=10, max_length=20)
    student_type: str = Field("Regular", pattern=r'^([Rr]egular|[Hh]onors)$')


class StudentResponse(BaseModel):
    id: str
    student_id: str
    name: str
    age: int
    email: str
    phone: str
    student_type: str
    passing_grade: float
    average_grade: float
    enrolled_subjects: int
    honors_eligible: str
    created_at: datetime
    status: str


class SubjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    code: str = Field(..., min_length=1, max_length=20)
    category: SubjectCategory


class SubjectResponse(BaseModel):
    name: str
    code: str
    category: SubjectCategory
    mandatory: bool


class GradeCreate(BaseModel):
    student_id: str = Field(..., min_length=1)
    subject_code: str = Field(..., min_length=1)
    score: float


class GradeResponse(BaseModel):
    grade_id: str
    student_id: str
    subject_code: str
    subject_name: str
    category: SubjectCategory
    score: float
    date: str


class GradeSummaryResponse(BaseModel):
    student_id: str
    core_average: float
    elective_average: float
    overall_average: float
    total_grades: int
    grades: List[GradeResponse] = []
    report: str


class GPAResponse(BaseModel):
    student_id: str
    cumulative_gpa: float
    letter_grade: str
    class_rank: int
    class_size: int
    honors_eligible: str
    passing: bool
    report: str


class ConversionResponse(BaseModel):
    percentage: float
    letter_grade: str
    gpa: float


class StatisticsResponse(BaseModel):
    total_students: int
    total_grades: int
    distribution: Dict[str, int]
    mean: float
    median: float
    mode: float
    standard_deviation: float
    class_average: float
    class_average_gpa: float
    report: str


class GradrRestAPI:
    """REST API implementation for the Gradr platform."""

    def __init__(self, grade_manager: GradeManager, student_manager: StudentManager,
                 gpa_calculator: GPACalculator, statistics_calculator: StatisticsCalculator):
        self._grade_manager = grade_manager
        self._student_manager = student_manager
        self._gpa_calculator = gpa_calculator
        self._statistics_calculator = statistics_calculator
        self._subjects: Dict[str, Subject] = {}

        self._lock = threading.RLock()

        # Create FastAPI app
        self.app = FastAPI(
            title="Gradr Academic Records API",
            description="Student grade tracking with averages, GPA conversion and class statistics",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_routes()

    def register_subject(self, subject: Subject) -> Subject:
        """Make a subject available for grade recording, keyed by its code."""
        with self._lock:
            if subject.code in self._subjects:
                raise ValidationError(f"Subject code already registered: {subject.code}",
                                      error_code="DUPLICATE_SUBJECT")
            self._subjects[subject.code] = subject
            return subject

    def _setup_routes(self):
        """Setup API routes."""

        @self.app.get("/", response_model=Dict[str, str])
        async def root():
            return {
                "message": "Gradr Academic Records API",
                "version": __version__,
                "docs": "/docs"
            }

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        # Student endpoints
        @self.app.post("/students", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
        async def create_student(student_data: StudentCreate):
            """Create a new student."""
            try:
                with self._lock:
                    student = StudentFactory.create_student(
                        student_data.student_type,
                        student_data.name,
                        student_data.age,
                        student_data.email,
                        student_data.phone,
                        grade_calculator=self._grade_manager,
                    )
                    self._student_manager.add_student(student)
                    return self._student_to_response(student)
            except ValidationError as e:
                raise HTTPException(status_code=400, detail=e.message)

        @self.app.get("/students/{student_id}", response_model=StudentResponse)
        async def get_student(student_id: str):
            with self._lock:
                return self._student_to_response(self._get_student(student_id))

        @self.app.get("/students", response_model=List[StudentResponse])
        async def list_students(skip: int = 0, limit: int = 100):
            with self._lock:
                students = self._student_manager.get_students()[skip:skip + limit]
                return [self._student_to_response(student) for student in students]

        # Subject endpoints
        @self.app.post("/subjects", response_model=SubjectResponse, status_code=status.HTTP_201_CREATED)
        async def create_subject(subject_data: SubjectCreate):
            if not validation.is_valid_course_code(subject_data.code):
                raise HTTPException(status_code=400,
                                    detail=f"Invalid course code: {subject_data.code}")
            try:
                subject = self.register_subject(
                    Subject(subject_data.name, subject_data.code, subject_data.category)
                )
                return SubjectResponse(**subject.to_dict())
            except ValidationError as e:
                raise HTTPException(status_code=400, detail=e.message)

        @self.app.get("/subjects", response_model=List[SubjectResponse])
        async def list_subjects():
            with self._lock:
                return [SubjectResponse(**subject.to_dict()) for subject in self._subjects.values()]

        # Grade endpoints
        @self.app.post("/grades", response_model=GradeResponse, status_code=status.HTTP_201_CREATED)
        async def record_grade(grade_data: GradeCreate):
            """Record a grade for a registered student and subject."""
            with self._lock:
                student = self._get_student(grade_data.student_id)
                subject = self._subjects.get(grade_data.subject_code)
                if subject is None:
                    raise HTTPException(status_code=404, detail="Subject not found")
                try:
                    grade = Grade(student.student_id, subject, grade_data.score)
                except InvalidGradeError as e:
                    logger.warning("Rejected grade for %s: %s", student.student_id, e.message)
                    raise HTTPException(status_code=400, detail=e.message)
                self._grade_manager.add_grade(grade)
                return self._grade_to_response(grade)

        @self.app.get("/students/{student_id}/grades", response_model=GradeSummaryResponse)
        async def get_student_grades(student_id: str):
            with self._lock:
                student = self._get_student(student_id)
                manager = self._grade_manager
                grades = manager.get_grades_by_student(student.student_id)
                return GradeSummaryResponse(
                    student_id=student.student_id,
                    core_average=manager.calculate_core_average(student.student_id),
                    elective_average=manager.calculate_elective_average(student.student_id),
                    overall_average=manager.calculate_overall_average(student.student_id),
                    total_grades=len(grades),
                    grades=[self._grade_to_response(grade) for grade in grades],
                    report=manager.view_grades_by_student(student.student_id),
                )

        @self.app.get("/students/{student_id}/gpa", response_model=GPAResponse)
        async def get_student_gpa(student_id: str):
            with self._lock:
                student = self._get_student(student_id)
                average = student.calculate_average_grade()
                return GPAResponse(
                    student_id=student.student_id,
                    cumulative_gpa=self._gpa_calculator.calculate_cumulative_gpa(student.student_id),
                    letter_grade=self._gpa_calculator.get_letter_grade(average),
                    class_rank=self._gpa_calculator.calculate_class_rank(student.student_id,
                                                                         self._student_manager),
                    class_size=self._student_manager.get_student_count(),
                    honors_eligible=student.check_honors_eligibility(),
                    passing=student.is_passing(average),
                    report=self._gpa_calculator.generate_gpa_report(student, self._student_manager),
                )

        @self.app.get("/gpa/convert", response_model=ConversionResponse)
        async def convert_percentage(percentage: float = Query(..., ge=0, le=100)):
            return ConversionResponse(
                percentage=percentage,
                letter_grade=self._gpa_calculator.get_letter_grade(percentage),
                gpa=self._gpa_calculator.convert_percentage_to_gpa(percentage),
            )

        # Statistics endpoints
        @self.app.get("/statistics", response_model=StatisticsResponse)
        async def get_statistics():
            with self._lock:
                stats = self._statistics_calculator
                return StatisticsResponse(
                    total_students=self._student_manager.get_student_count(),
                    total_grades=self._grade_manager.get_grade_count(),
                    distribution={band.name: count for band, count in stats.get_grade_distribution().items()},
                    mean=stats.calculate_mean(),
                    median=stats.calculate_median(),
                    mode=stats.calculate_mode(),
                    standard_deviation=stats.calculate_standard_deviation(),
                    class_average=self._student_manager.calculate_class_average(),
                    class_average_gpa=self._gpa_calculator.calculate_class_average_gpa(self._student_manager),
                    report=stats.generate_class_statistics(),
                )

    def _get_student(self, student_id: str) -> Student:
        if not validation.is_valid_student_id(student_id):
            raise HTTPException(status_code=400, detail=f"Invalid student id: {student_id}")
        try:
            return self._student_manager.get_student(student_id)
        except StudentNotFoundError:
            raise HTTPException(status_code=404, detail="Student not found")

    def _student_to_response(self, student: Student) -> StudentResponse:
        """Convert Student entity to response model."""
        return StudentResponse(
            id=student.id,
            student_id=student.student_id,
            name=student.name,
            age=student.age,
            email=student.email,
            phone=student.phone,
            student_type=student.student_type.value,
            passing_grade=student.passing_grade,
            average_grade=student.calculate_average_grade(),
            enrolled_subjects=student.get_enrolled_subjects_count(),
            honors_eligible=student.check_honors_eligibility(),
            created_at=student.created_at,
            status=student.status.value
        )

    def _grade_to_response(self, grade: Grade) -> GradeResponse:
        return GradeResponse(
            grade_id=grade.grade_id,
            student_id=grade.student_id,
            subject_code=grade.subject.code,
            subject_name=grade.subject.name,
            category=grade.subject.category,
            score=grade.score,
            date=grade.date,
        )
