import logging
import sys

from loguru import logger

from healthcare_api.core.config import settings


def setup_logging(level: str = None) -> None:
    """Configure loguru and the stdlib root logger at the same level"""
    level = (level or settings.LOG_LEVEL).upper()

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {message}",
    )

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
    )
    logging.getLogger("healthcare_api").setLevel(level)
