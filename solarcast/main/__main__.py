"""
Main module entry point.

Serves the API with uvicorn: python -m solarcast.main
"""

import uvicorn

from solarcast.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "solarcast.main.app:app",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
