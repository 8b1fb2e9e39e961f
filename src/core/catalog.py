"""
File catalog: 홈 화면에 보여줄 파일명 목록.

읽기 전용. 업로드/삭제는 이 앱의 범위가 아니다.

목록 출처 (우선순위):
1. files.directory - 디렉터리의 일반 파일 (숨김 파일 제외, 이름순)
2. files.names - 설정에 적힌 순서 그대로
"""

import logging
from pathlib import Path

from src.core.config import FilesSettings
from src.domain.errors import ErrorCodes, FileHostError

logger = logging.getLogger(__name__)


class FileCatalog:
    """호스팅 파일명 목록."""

    def __init__(
        self,
        names: list[str] | tuple[str, ...] | None = None,
        directory: Path | None = None,
    ) -> None:
        self.names = tuple(names or ())
        self.directory = directory

    @classmethod
    def from_settings(cls, settings: FilesSettings) -> "FileCatalog":
        return cls(names=settings.names, directory=settings.directory)

    def list_files(self) -> list[str]:
        """
        파일명 목록.

        Returns:
            파일명 목록 (directory 사용 시 이름순, 아니면 설정 순서)

        Raises:
            FileHostError: 디렉터리 읽기 실패 (FILES_DIR_UNREADABLE)
        """
        if self.directory is None:
            return list(self.names)

        if not self.directory.exists():
            logger.warning(f"Files directory does not exist: {self.directory}")
            return []

        try:
            entries = list(self.directory.iterdir())
        except OSError as e:
            raise FileHostError(
                ErrorCodes.FILES_DIR_UNREADABLE,
                directory=str(self.directory),
                cause=str(e),
            ) from e

        return sorted(
            entry.name
            for entry in entries
            if entry.is_file() and not entry.name.startswith(".")
        )
