"""
API package containing the HTTP routes.

``router`` aggregates everything served under ``/api``; endpoints that
live at the root (such as ``/health``) are included by ``main``.
"""
