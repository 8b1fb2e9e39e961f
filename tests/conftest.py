"""
Pytest fixtures for the file hosting tests.

구성:
- 경로/설정 fixture
- Settings 팩토리, 임시 파일 디렉터리
- TestClient 팩토리 (설정별로 새 앱)
"""

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import yaml
from fastapi.testclient import TestClient

from src.app.main import create_app
from src.core.config import Settings

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Files Fixtures
# =============================================================================

@pytest.fixture
def files_dir(tmp_path: Path) -> Path:
    """
    파일 3개가 있는 업로드 디렉터리.

    포함:
    - b_report.pdf, a_notes.txt, c_photo.jpg (이름순 정렬 확인용)
    - .hidden (목록에서 제외)
    - nested/ (디렉터리, 목록에서 제외)
    """
    directory = tmp_path / "uploads"
    directory.mkdir()
    (directory / "b_report.pdf").write_bytes(b"%PDF fake")
    (directory / "a_notes.txt").write_text("notes", encoding="utf-8")
    (directory / "c_photo.jpg").write_bytes(b"fake jpg")
    (directory / ".hidden").write_text("secret", encoding="utf-8")
    (directory / "nested").mkdir()
    return directory


@pytest.fixture
def empty_files_dir(tmp_path: Path) -> Path:
    """빈 업로드 디렉터리."""
    directory = tmp_path / "empty_uploads"
    directory.mkdir()
    return directory


# =============================================================================
# Settings / Client Fixtures
# =============================================================================

@pytest.fixture
def make_settings(tmp_path: Path) -> Callable[..., Settings]:
    """dict 설정 → Settings 팩토리 (상대경로는 tmp_path 기준)."""

    def _make(data: dict[str, Any] | None = None) -> Settings:
        return Settings.from_dict(data or {}, base_dir=tmp_path)

    return _make


@pytest.fixture
def make_client(
    make_settings: Callable[..., Settings],
) -> Generator[Callable[..., TestClient], None, None]:
    """설정별 앱을 만들어 TestClient 반환."""
    clients: list[TestClient] = []

    def _make(data: dict[str, Any] | None = None) -> TestClient:
        client = TestClient(create_app(make_settings(data)))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
