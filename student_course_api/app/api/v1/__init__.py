"""
Version 1 of the API.

Bundles the student and course endpoints.
"""
