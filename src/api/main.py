"""
Entry point for running the task broker
"""

import logging

import uvicorn

from .settings import get_settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    uvicorn.run(
        "api.app:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
