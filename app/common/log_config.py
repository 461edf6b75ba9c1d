import logging

from app.config.settings import settings


def setup_logging(level: str | None = None) -> None:
    """루트 로거에 핸들러가 없을 때만 기본 설정"""
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level or settings.LOG_LEVEL,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
