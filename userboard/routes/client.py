"""
UserBoard Backend — Browser Client Route
==========================================

What:  Serves the single-page client on the root path.
How:   index.html is returned as-is; its script and assets are served by the
       StaticFiles mount at /static (registered in main.py).
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter(tags=["Client"])


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    return FileResponse(
        path=STATIC_DIR / "index.html",
        media_type="text/html; charset=utf-8",
    )
