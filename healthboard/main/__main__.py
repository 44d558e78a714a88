"""
Main module entry point.

This allows running the API as: python -m healthboard.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "healthboard.main.app:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_level=settings.logging.level.value.lower(),
    )


if __name__ == "__main__":
    main()
