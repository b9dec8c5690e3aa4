import logging

import uvicorn

from blogreader.settings import settings

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info(f"Serving blog from {settings.CONTENT_BASE_URL}")
    uvicorn.run(
        "blogreader.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
