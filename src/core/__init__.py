"""
Core layer: 설정, 로깅, 파일 목록.

라우트/템플릿과 무관하게 단독으로 테스트 가능해야 함.
"""

from .catalog import FileCatalog
from .config import Settings, load_config, load_settings
from .logging import setup_logging

__all__ = [
    # config
    "Settings",
    "load_config",
    "load_settings",
    # logging
    "setup_logging",
    # catalog
    "FileCatalog",
]
