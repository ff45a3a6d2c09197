"""
Application package initializer.

The service is split into ``core`` (configuration, logging, CORS and
error handling), ``schemas`` (request and response models),
``services`` (message storage and business rules) and ``api`` (HTTP
routes).
"""

from .main import app, create_app  # noqa: F401
