"""Entry point for running clinic-management with uvicorn."""

import uvicorn

from .app import create_app
from .config.logging_config import setup_logging
from .config.settings import get_settings


def main() -> None:
    """Configure logging and serve the API."""
    settings = get_settings()
    setup_logging(log_level=settings.log_level, log_format=settings.log_format)
    
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
