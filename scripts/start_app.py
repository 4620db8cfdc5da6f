#!/usr/bin/env python3
"""Start the API server with Logfire configured before the app is built."""

import sys

import logfire
import uvicorn

from article.config import Settings
from article.util.logging import setup_logging
from article.util.observability import configure_logfire


def main() -> int:
    """Run uvicorn on the app factory."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early so app construction is traced
    configure_logfire(settings)

    logfire.info("Starting API server", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            "article.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
