"""
Run the UserBoard server with uvicorn.

Host and port come from BACKEND_HOST / BACKEND_PORT (see config.py).

Usage:
    python -m userboard
"""

import uvicorn

from userboard.config import settings


def main() -> None:
    uvicorn.run(
        "userboard.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
