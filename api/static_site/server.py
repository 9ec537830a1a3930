"""
Static server for the prebuilt single-page front end.

Files that exist under the build directory are served with a one-day cache.
Every other GET or HEAD returns `index.html` uncached so client-side routing works.

Usage:
    python -m static_site.server      # FRONTEND_BUILD_DIR (default ./build), PORT (default 3000)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.responses import FileResponse, PlainTextResponse, Response

from core import settings
from core.logging import configure_logging

STATIC_CACHE_CONTROL = "public, max-age=86400"
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

logger = logging.getLogger(__name__)


def _static_file(build_dir: Path, request_path: str) -> Path | None:
    """
    Resolve `request_path` to a file inside `build_dir`, or None.
    """
    if not request_path:
        return None
    candidate = (build_dir / request_path).resolve()
    if not candidate.is_relative_to(build_dir) or not candidate.is_file():
        return None
    return candidate


def create_app(build_dir: Path) -> FastAPI:
    build_dir = build_dir.resolve()
    index_file = build_dir / "index.html"
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    @app.api_route("/{full_path:path}", methods=["GET", "HEAD"])
    async def serve(full_path: str) -> Response:
        asset = _static_file(build_dir, full_path)
        if asset is not None and asset != index_file:
            return FileResponse(asset, headers={"Cache-Control": STATIC_CACHE_CONTROL})

        logger.info(
            "[%s] Serving request for: /%s",
            datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            full_path,
        )
        if not index_file.is_file():
            logger.error("Error serving index.html: %s not found", index_file)
            return PlainTextResponse("Internal Server Error", status_code=500)
        return FileResponse(index_file, headers=NO_CACHE_HEADERS)

    return app


def main() -> None:
    configure_logging()
    build_dir = settings.frontend_build_dir()
    port = settings.frontend_port()
    logger.info("Frontend server running on port %s", port)
    logger.info("Serving static files from: %s", build_dir.resolve())
    logger.info("Environment: %s", settings.app_env())
    uvicorn.run(create_app(build_dir), host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
