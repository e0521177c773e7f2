"""
Sikkim Tourism Backend — Static Site Serving
==============================================

What:  Serves the prebuilt frontend from PUBLIC_DIR with a single-page-app
       fallback to the entry document (index.html by default).
How:   Starlette's StaticFiles resolves paths to files. When it raises 404
       for a GET/HEAD, SPAStaticFiles answers with the entry document
       instead, if that document exists.
Who:   Mounted at "/" by create_app() after all API routers, so API routes
       always win.

Resolution order for GET /some/path:
    1. /api/... route matched           → API handler
    2. <public_dir>/some/path is a file  → that file
    3. <public_dir>/some/path/index.html → that file (html=True)
    4. path under api/                   → JSON 404 (never the SPA shell)
    5. <public_dir>/<entry_document>     → the SPA shell
    6. otherwise                         → JSON 404
"""

from pathlib import Path
from typing import Optional

from starlette.exceptions import HTTPException
from starlette.responses import FileResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

API_PREFIX = "api"


class SPAStaticFiles(StaticFiles):
    """StaticFiles that falls back to an entry document for unmatched paths."""

    def __init__(self, *, directory: str, entry_document: str = "index.html"):
        super().__init__(directory=directory, html=True)
        self.entry_document = entry_document

    @property
    def entry_path(self) -> Path:
        return Path(self.directory) / self.entry_document

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404 or is_api_path(path):
                raise
            if not self.entry_path.is_file():
                raise
            return FileResponse(self.entry_path)


def is_api_path(path: str) -> bool:
    """True for 'api' and anything below 'api/' (path has no leading slash)."""
    normalized = path.replace("\\", "/").lstrip("/")
    return normalized == API_PREFIX or normalized.startswith(API_PREFIX + "/")


def build_static_app(public_dir: str, entry_document: str) -> Optional[SPAStaticFiles]:
    """
    Create the static app if `public_dir` exists, else None.

    The check happens once, at application construction; the lifespan logs
    the outcome once logging is configured.
    """
    root = Path(public_dir)
    if not root.is_dir():
        return None
    return SPAStaticFiles(directory=str(root), entry_document=entry_document)
