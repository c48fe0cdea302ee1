"""
Main entry point for the Gradr platform.
"""

import json
import logging
from typing import Any, Dict, Optional

from .core.entities import Grade, Subject
from .core.enums import StudentType
from .core.exceptions import ConfigurationError
from .services import (
    GradeManager, GPACalculator, StudentManager, StudentFactory, StatisticsCalculator
)
from .api.rest_api import GradrRestAPI


logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'log_level': 'INFO',
    'rest_host': '0.0.0.0',
    'rest_port': 8000,
    'load_sample_data': False,
}

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def configure_logging(level: str = 'INFO') -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def load_config(path: str) -> Dict[str, Any]:
    """Read a JSON config file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read config file {path}: {e}")
    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return config


def build_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Merge overrides onto the defaults and check the result."""
    config = dict(DEFAULT_CONFIG)
    config.update(overrides or {})

    level = str(config['log_level']).upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {config['log_level']}",
                                 details={'log_level': config['log_level']})
    config['log_level'] = level

    port = config['rest_port']
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
        raise ConfigurationError(f"Invalid REST port: {port!r}", details={'rest_port': port})
    return config


class GradrPlatform:
    """Main platform class that wires the grade engine and its API."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self._config = build_config(config)

        self.grade_manager = GradeManager()
        self.student_manager = StudentManager()
        self.gpa_calculator = GPACalculator(self.grade_manager)
        self.statistics_calculator = StatisticsCalculator(self.grade_manager, self.student_manager)
        self.rest_api = GradrRestAPI(
            self.grade_manager,
            self.student_manager,
            self.gpa_calculator,
            self.statistics_calculator,
        )
        logger.info("Gradr platform initialized")

        if self._config['load_sample_data']:
            self.create_sample_data()

    @property
    def config(self) -> Dict[str, Any]:
        return dict(self._config)

    def start_rest_server(self, host: Optional[str] = None, port: Optional[int] = None):
        """Serve the REST API until interrupted."""
        import uvicorn

        host = host or self._config['rest_host']
        port = port or self._config['rest_port']
        logger.info("Starting REST server on %s:%s", host, port)
        uvicorn.run(self.rest_api.app, host=host, port=port, log_level=self._config['log_level'].lower())

    def create_sample_data(self):
        """Register a small class with core and elective grades."""
        logger.info("Creating sample data")

        subjects = [
            Subject.core("Mathematics", "MAT101"),
            Subject.core("English", "ENG101"),
            Subject.core("Science", "SCI101"),
            Subject.elective("Music", "MUS101"),
            Subject.elective("Art", "ART101"),
        ]
        for subject in subjects:
            self.rest_api.register_subject(subject)

        roster = [
            (StudentType.REGULAR, "Alice Johnson", 16, "alice.johnson@school.edu", "555-123-4567",
             [78, 85, 72, 90, 88]),
            (StudentType.HONORS, "Bob Smith", 17, "bob.smith@school.edu", "(555) 234-5678",
             [95, 91, 89, 93, 97]),
            (StudentType.REGULAR, "Carol Davis", 16, "carol.davis@school.edu", "5553456789",
             [55, 62, 48, 70, 66]),
            (StudentType.HONORS, "David Lee", 17, "david.lee@school.edu", "+1-555-456-7890",
             [82, 79, 85, 88, 80]),
        ]
        for student_type, name, age, email, phone, scores in roster:
            student = StudentFactory.create_student(
                student_type, name, age, email, phone, grade_calculator=self.grade_manager
            )
            self.student_manager.add_student(student)
            for subject, score in zip(subjects, scores):
                self.grade_manager.add_grade(Grade(student.student_id, subject, score))

    def run_demo(self):
        """Print grade histories, GPA reports and class statistics."""
        if self.student_manager.get_student_count() == 0:
            self.create_sample_data()

        for student in self.student_manager.get_students():
            print(f"\n=== {student.name} ({student.student_type.value}) ===")
            print(self.grade_manager.view_grades_by_student(student.student_id))
            print(self.gpa_calculator.generate_gpa_report(student, self.student_manager))
            print(f"Honors Eligible: {student.check_honors_eligibility()}")

        print("\n=== Class ===")
        print(self.statistics_calculator.generate_class_statistics())


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Gradr Student Grade Management")
    parser.add_argument("--host", type=str, help="REST server host")
    parser.add_argument("--port", type=int, help="REST server port")
    parser.add_argument("--demo", action="store_true", help="Print reports for sample data and exit")
    parser.add_argument("--config", type=str, help="Configuration file path")

    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else {}
    if args.host:
        config['rest_host'] = args.host
    if args.port:
        config['rest_port'] = args.port

    config = build_config(config)
    configure_logging(config['log_level'])
    platform = GradrPlatform(config)

    if args.demo:
        platform.run_demo()
        return

    try:
        platform.start_rest_server()
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
