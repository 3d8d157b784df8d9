"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on the
``InMemoryStore`` it is handed, so API handlers never touch storage
directly.
"""
