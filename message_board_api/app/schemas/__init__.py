"""
Pydantic schema definitions for API payloads.

Request schemas are kept separate from the stored ``Message`` record so
that what clients may send is decoupled from what the service returns.
"""
