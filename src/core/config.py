"""
Config: default.yaml 로드 및 타입 변환.

모든 키는 기본값이 있으므로 설정 파일이 없어도 앱은 뜬다.
형식이 틀린 값은 시작 시점에 FileHostError(CONFIG_INVALID)로 중단.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_HOST,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_TITLE,
)
from src.domain.errors import ErrorCodes, FileHostError
from src.domain.schemas import PageVariant

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent

MIN_PORT = 0
MAX_PORT = 65535


# =============================================================================
# Settings
# =============================================================================

@dataclass(frozen=True)
class FilesSettings:
    """호스팅 파일 목록 설정."""
    names: tuple[str, ...] = ()
    directory: Path | None = None


@dataclass(frozen=True)
class LoggingSettings:
    """로깅 설정."""
    level: str = DEFAULT_LOG_LEVEL
    format: str = DEFAULT_LOG_FORMAT


@dataclass(frozen=True)
class ServerSettings:
    """uvicorn 실행 설정."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class Settings:
    """앱 전체 설정 (프로세스 수명 동안 불변)."""
    title: str = DEFAULT_TITLE
    variant: PageVariant = PageVariant.CONDITIONAL
    files: FilesSettings = field(default_factory=FilesSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    server: ServerSettings = field(default_factory=ServerSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "Settings":
        """
        설정 dict → Settings.

        Args:
            data: yaml.safe_load 결과
            base_dir: files.directory 상대경로 기준 (기본: 프로젝트 루트)

        Returns:
            Settings

        Raises:
            FileHostError: 형식 오류 (CONFIG_INVALID)
        """
        if not isinstance(data, dict):
            raise FileHostError(
                ErrorCodes.CONFIG_INVALID, key="<root>", value=type(data).__name__
            )

        app_section = _section(data, "app")
        page_section = _section(data, "page")
        files_section = _section(data, "files")
        logging_section = _section(data, "logging")
        server_section = _section(data, "server")

        title = _require_str(app_section.get("title", DEFAULT_TITLE), "app.title")

        variant_raw = page_section.get("variant", PageVariant.CONDITIONAL.value)
        try:
            variant = PageVariant(variant_raw)
        except ValueError as e:
            raise FileHostError(
                ErrorCodes.CONFIG_INVALID, key="page.variant", value=variant_raw
            ) from e

        names_raw = files_section.get("names") or []
        if not isinstance(names_raw, list):
            raise FileHostError(
                ErrorCodes.CONFIG_INVALID, key="files.names", value=names_raw
            )
        names = tuple(_require_str(name, "files.names") for name in names_raw)

        directory: Path | None = None
        directory_raw = files_section.get("directory")
        if directory_raw is not None:
            directory_str = _require_str(directory_raw, "files.directory")
            if not directory_str:
                raise FileHostError(
                    ErrorCodes.CONFIG_INVALID, key="files.directory", value=directory_raw
                )
            directory = Path(directory_str)
            if not directory.is_absolute():
                directory = (base_dir or PROJECT_ROOT) / directory

        port_raw = server_section.get("port", DEFAULT_PORT)
        if (
            isinstance(port_raw, bool)
            or not isinstance(port_raw, int)
            or not MIN_PORT <= port_raw <= MAX_PORT
        ):
            raise FileHostError(
                ErrorCodes.CONFIG_INVALID, key="server.port", value=port_raw
            )

        return cls(
            title=title,
            variant=variant,
            files=FilesSettings(names=names, directory=directory),
            logging=LoggingSettings(
                level=_require_str(
                    logging_section.get("level", DEFAULT_LOG_LEVEL), "logging.level"
                ).upper(),
                format=_require_str(
                    logging_section.get("format", DEFAULT_LOG_FORMAT), "logging.format"
                ),
            ),
            server=ServerSettings(
                host=_require_str(server_section.get("host", DEFAULT_HOST), "server.host"),
                port=port_raw,
            ),
        )


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    """최상위 섹션 조회 (없으면 빈 dict)."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise FileHostError(ErrorCodes.CONFIG_INVALID, key=key, value=value)
    return value


def _require_str(value: Any, key: str) -> str:
    """문자열 값만 허용 (null, 숫자, 목록은 CONFIG_INVALID)."""
    if not isinstance(value, str):
        raise FileHostError(ErrorCodes.CONFIG_INVALID, key=key, value=value)
    return value


# =============================================================================
# Loading
# =============================================================================

def resolve_config_path(config_path: Path | None = None) -> tuple[Path, bool]:
    """
    설정 파일 경로 결정.

    우선순위: 인자 → 환경변수 FILEHOST_CONFIG → 프로젝트 루트의 default.yaml

    Returns:
        (경로, 명시 여부) - 인자/환경변수로 지정했으면 명시
    """
    if config_path is not None:
        return config_path, True
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path), True
    return PROJECT_ROOT / DEFAULT_CONFIG_FILENAME, False


def default_config_path() -> Path:
    """환경변수 FILEHOST_CONFIG 또는 프로젝트 루트의 default.yaml."""
    return resolve_config_path()[0]


def _read_config(config_path: Path, explicit: bool) -> dict[str, Any]:
    """
    YAML 읽기.

    Raises:
        FileHostError: 명시한 파일 없음 (CONFIG_NOT_FOUND), YAML 오류 (CONFIG_INVALID)
    """
    if not config_path.exists():
        if explicit:
            raise FileHostError(ErrorCodes.CONFIG_NOT_FOUND, path=str(config_path))
        logger.info(f"Config file not found, using defaults: {config_path}")
        return {}

    with open(config_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise FileHostError(
                ErrorCodes.CONFIG_INVALID, path=str(config_path), cause=str(e)
            ) from e

    # 빈 파일은 None
    return data if data is not None else {}


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    설정 파일 로드.

    기본 default.yaml이 없으면 빈 dict (모든 값 기본값).
    인자나 FILEHOST_CONFIG로 지정한 파일이 없으면 CONFIG_NOT_FOUND.
    """
    path, explicit = resolve_config_path(config_path)
    return _read_config(path, explicit)


def load_settings(config_path: Path | None = None) -> Settings:
    """설정 파일 → Settings. 상대경로는 설정 파일 위치 기준."""
    path, explicit = resolve_config_path(config_path)
    return Settings.from_dict(_read_config(path, explicit), base_dir=path.parent)
