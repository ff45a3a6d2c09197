"""
Top-level router for the ``/api`` prefix.

Domain routers are aggregated here and mounted by ``main.create_app``.
The health probe lives outside ``/api`` and is included separately.
"""

from fastapi import APIRouter

from .endpoints import messages

router = APIRouter()

# The messages router declares its paths as "" so the collection is
# served at ``/api/messages`` without a trailing slash.
router.include_router(messages.router, prefix="/messages", tags=["messages"])
