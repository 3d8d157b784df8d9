"""
Application package initializer.

Contains the FastAPI entrypoint and its submodules: ``core`` (settings,
logging, errors and the in‑memory store), ``schemas``, ``services`` and
the versioned routers under ``api``.
"""

from .main import app  # noqa: F401
