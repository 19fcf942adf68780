"""
Main application entry point.
"""

from account_service.api.app import create_app
from account_service.config.logging import get_logger
from account_service.config.settings import settings

logger = get_logger(__name__)

app = create_app()


def run() -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    logger.info("Starting account address book service", port=settings.API_PORT)

    uvicorn.run(
        "account_service.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
