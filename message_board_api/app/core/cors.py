"""
Cross-origin request admission.

Browsers calling the API from another origin are admitted according to
``OriginPolicy``:

* no ``Origin`` header, or the literal ``"null"`` (sandboxed pages,
  ``file://`` documents in some browsers, curl and mobile clients);
* local development servers on ``http://localhost`` and
  ``http://127.0.0.1``, any port;
* ``file://`` origins;
* any origin containing one of the trusted deployment-platform domains
  (``vercel.app`` by default, see ``Settings.trusted_origin_domains``).

Anything else is admitted outside production.  In production unknown
origins are logged and refused with ``403`` before the request reaches
a route.

``PolicyCORSMiddleware`` plugs the policy into Starlette's
``CORSMiddleware`` so the usual preflight handling and response headers
are reused unchanged.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

from .config import Settings
from .errors import OriginNotAllowedError, error_response

logger = logging.getLogger(__name__)

ALLOWED_METHODS: Sequence[str] = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
ALLOWED_HEADERS: Sequence[str] = ("Content-Type", "Authorization")
LOCAL_ORIGIN_PREFIXES: Sequence[str] = ("http://localhost", "http://127.0.0.1")
FILE_ORIGIN_PREFIX = "file://"


@dataclass
class OriginPolicy:
    """Decide whether a declared ``Origin`` may call the API."""

    trusted_domains: List[str] = field(default_factory=list)
    production: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "OriginPolicy":
        return cls(trusted_domains=list(settings.trusted_origin_domains), production=settings.is_production)

    def is_allowed(self, origin: Optional[str]) -> bool:
        if not origin or origin == "null":
            return True
        if origin.startswith(tuple(LOCAL_ORIGIN_PREFIXES)):
            return True
        if origin.startswith(FILE_ORIGIN_PREFIX):
            return True
        if any(domain in origin for domain in self.trusted_domains):
            return True
        if not self.production:
            return True
        logger.warning("CORS blocked origin: %s", origin)
        return False


class PolicyCORSMiddleware(CORSMiddleware):
    """Starlette ``CORSMiddleware`` whose origin check is an ``OriginPolicy``.

    Requests from refused origins are answered with ``403`` and an
    ``{"error": ...}`` body; they never reach the application.
    """

    def __init__(
        self,
        app: ASGIApp,
        policy: OriginPolicy,
        allow_methods: Iterable[str] = ALLOWED_METHODS,
        allow_headers: Iterable[str] = ALLOWED_HEADERS,
        allow_credentials: bool = True,
    ) -> None:
        super().__init__(
            app,
            allow_methods=allow_methods,
            allow_headers=allow_headers,
            allow_credentials=allow_credentials,
        )
        self.policy = policy

    def is_allowed_origin(self, origin: str) -> bool:
        return self.policy.is_allowed(origin)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            origin = Headers(scope=scope).get("origin")
            if origin is not None and not self.policy.is_allowed(origin):
                response = error_response(OriginNotAllowedError())
                await response(scope, receive, send)
                return
        await super().__call__(scope, receive, send)
