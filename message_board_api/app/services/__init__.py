"""
Service layer abstraction.

Business logic lives here rather than in the route handlers.  The
in-memory ``MessageStore`` can be replaced by another backend without
changing the API handlers.
"""
