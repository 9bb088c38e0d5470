"""Serve the cascade API with uvicorn."""

import uvicorn

from .app import create_app
from .config.logging_config import setup_logging
from .config.settings import get_settings


def main() -> None:
    setup_logging()
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
