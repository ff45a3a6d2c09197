"""
Endpoint subpackage.

Each module defines an ``APIRouter`` for one concern.  Routers are
aggregated in ``api/router.py`` or mounted directly by ``main``.
"""
