"""
Top‑level package for the Student Course API.

This file makes ``student_course_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``student_course_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
