"""
Pydantic schema definitions for API payloads.

Students and courses each define their own request and response
models.  Shared envelopes (errors, enrollments) live in ``common``.
"""
