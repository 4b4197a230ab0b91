import uvicorn

from src.file_relay.config import settings
from src.file_relay.main import app, logger


def main():
    logger.info("Server running on port %d", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
