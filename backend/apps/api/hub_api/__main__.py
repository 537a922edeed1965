"""
Development server entry point.

Run with ``python -m hub_api`` or the ``hub-api`` console script.
"""

import uvicorn

from .config import settings


def main() -> None:
    """Serve the API with uvicorn using the HUB_* settings."""
    uvicorn.run(
        "hub_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
