"""
Top-level package for the Message Board API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``message_board_api.app.main:app``.
"""

__all__ = []
