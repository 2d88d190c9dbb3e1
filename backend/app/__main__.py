"""
QuickNotes Backend — Process Entry Point
==========================================

Runs the API under uvicorn on the configured host and port:

    python -m app
    quicknotes
"""

import uvicorn

from app.config import settings


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
