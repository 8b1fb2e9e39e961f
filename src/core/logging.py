"""
Logging setup: 표준 logging 모듈 설정.

각 모듈은 logger = logging.getLogger(__name__)만 사용하고,
핸들러/포맷 설정은 여기서 한 번만 한다.
"""

import logging

from src.core.config import Settings
from src.domain.constants import DEFAULT_LOG_DATEFMT
from src.domain.errors import ErrorCodes, FileHostError


def resolve_level(level_name: str) -> int:
    """
    로그 레벨 이름 → 숫자.

    Raises:
        FileHostError: 알 수 없는 레벨 (CONFIG_INVALID)
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise FileHostError(
            ErrorCodes.CONFIG_INVALID, key="logging.level", value=level_name
        )
    return level


def setup_logging(settings: Settings) -> None:
    """루트 로거 설정. 이미 핸들러가 있으면 레벨만 맞춘다."""
    level = resolve_level(settings.logging.level)
    logging.basicConfig(
        level=level,
        format=settings.logging.format,
        datefmt=DEFAULT_LOG_DATEFMT,
    )
    logging.getLogger().setLevel(level)
