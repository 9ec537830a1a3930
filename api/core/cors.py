"""
CORS headers and method gating for the public endpoints.

Each feature router declares a `Resource` (path + supported methods). The app
installs one `MethodGateMiddleware` with all of them, which:
- adds the CORS headers to every response for a gated path
- answers OPTIONS with 200 and an empty body
- answers unsupported methods with 405, an `Allow` header and a text body
Paths that are not registered pass through untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

ALLOW_HEADERS = (
    "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
    "Content-MD5, Content-Type, Date, X-Api-Version"
)


def _normalize_path(path: str) -> str:
    return path.rstrip("/") or "/"


@dataclass(frozen=True)
class Resource:
    path: str
    methods: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _normalize_path(self.path))
        object.__setattr__(self, "methods", tuple(m.upper() for m in self.methods))

    def allows(self, method: str) -> bool:
        return method.upper() in self.methods

    @property
    def allow_header(self) -> str:
        return ", ".join(self.methods)

    def cors_headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Credentials": "true",
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": ",".join((*self.methods, "OPTIONS")),
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
        }


class MethodGateMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, resources: Iterable[Resource]) -> None:
        super().__init__(app)
        self._resources = {resource.path: resource for resource in resources}

    def resource_for(self, path: str) -> Resource | None:
        return self._resources.get(_normalize_path(path))

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        resource = self.resource_for(request.url.path)
        if resource is None:
            return await call_next(request)

        headers = resource.cors_headers()
        method = request.method.upper()
        if method == "OPTIONS":
            return Response(status_code=200, headers=headers)
        if not resource.allows(method):
            return PlainTextResponse(
                f"Method {method} Not Allowed",
                status_code=405,
                headers={**headers, "Allow": resource.allow_header},
            )

        response = await call_next(request)
        response.headers.update(headers)
        return response
