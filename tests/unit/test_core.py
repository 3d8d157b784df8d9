"""
Unit tests for exceptions and logging setup
"""
import logging
from contextlib import contextmanager

from student_course_api.app.core.exceptions import (
    ConflictError,
    CourseFullError,
    NotFoundError,
    StudentCourseError,
    UnknownCollectionError,
    ValidationError,
)
from student_course_api.app.core.logging_config import setup_logging


def test_status_codes():
    assert ValidationError().status_code == 400
    assert ConflictError().status_code == 400
    assert CourseFullError().status_code == 400
    assert NotFoundError().status_code == 404
    assert UnknownCollectionError("teachers").status_code == 500


def test_default_and_custom_messages():
    assert CourseFullError().to_dict() == {"error": "Course is full"}
    assert NotFoundError("Student not found").to_dict() == {"error": "Student not found"}
    assert str(UnknownCollectionError("teachers")) == "Unknown collection: teachers"


def test_domain_errors_share_a_base():
    assert issubclass(CourseFullError, ConflictError)
    assert issubclass(ConflictError, StudentCourseError)


@contextmanager
def bare_root_logger():
    """Root logger with no handlers; restored in place afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_configures_once():
    with bare_root_logger() as root:
        assert setup_logging("debug") is True
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert setup_logging("error") is False
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG


def test_setup_logging_force_replaces_handlers():
    with bare_root_logger() as root:
        setup_logging("info")
        first = root.handlers[0]
        assert setup_logging("warning", force=True) is True
        assert root.handlers[0] is not first
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING


def test_setup_logging_routes_server_loggers_through_root():
    access = logging.getLogger("uvicorn.access")
    access.addHandler(logging.NullHandler())
    access.propagate = False
    with bare_root_logger():
        setup_logging("debug")
        assert access.handlers == []
        assert access.propagate is True
        assert access.level == logging.DEBUG


def test_setup_logging_with_file(tmp_path):
    logfile = tmp_path / "api.log"
    with bare_root_logger() as root:
        setup_logging("INFO", str(logfile))
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
        logging.getLogger("student_course_api.test").info("hello")
        root.handlers[-1].flush()
    assert "hello" in logfile.read_text(encoding="utf-8")
