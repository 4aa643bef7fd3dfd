from __future__ import annotations

import uvicorn

from app.core.logging import LOG_LEVEL
from app.core.settings import get_settings


def main() -> None:
    """Start the uvicorn ASGI server (default: http://0.0.0.0:3000)."""
    settings = get_settings()
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=LOG_LEVEL.lower(),
        # Keep the JSON logging configured by app.main.
        log_config=None,
    )


if __name__ == "__main__":
    main()
