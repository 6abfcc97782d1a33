"""Main application entry point."""

import logging

from event_overview.config.environment import IS_PRODUCTION_ENVIRONMENT
from event_overview.config.settings import Config
from event_overview.api import create_application
from event_overview.utils.logging_config import setup_logging

setup_logging(logging.DEBUG if Config.DEBUG else logging.INFO)

app = create_application()

if __name__ == "__main__":
    import uvicorn

    if not IS_PRODUCTION_ENVIRONMENT:
        # Development mode - use direct app instance for easier debugging
        uvicorn.run(
            app,
            host="127.0.0.1",
            port=8000,
            log_level="debug" if Config.DEBUG else "info"
        )
    else:
        # Production mode - a single worker, since the event store lives in process memory
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=8000,
            reload=False,
            workers=1,
            log_level="info",
            proxy_headers=True,
            forwarded_allow_ips="*"
        )
