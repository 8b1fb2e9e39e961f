"""
Foundation: 프로세스 전체에서 공유하는 앱 상태.

create_app()에서 한 번 만들어 app.state.foundation에 보관.
핸들러는 읽기만 한다.
"""

from dataclasses import dataclass
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from src.core.catalog import FileCatalog
from src.core.config import Settings
from src.domain.errors import ErrorCodes, FileHostError

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"


@dataclass(frozen=True)
class Foundation:
    """
    앱 상태.

    - settings: 로드된 설정
    - catalog: 홈 화면 파일 목록 출처 (읽기 전용)
    - templates: Jinja2 환경
    """
    settings: Settings
    catalog: FileCatalog
    templates: Jinja2Templates


def build_foundation(
    settings: Settings,
    templates_dir: Path = TEMPLATES_DIR,
) -> Foundation:
    """Settings → Foundation."""
    return Foundation(
        settings=settings,
        catalog=FileCatalog.from_settings(settings.files),
        templates=Jinja2Templates(directory=templates_dir),
    )


def get_foundation(request: Request) -> Foundation:
    """
    Request에서 Foundation 가져오기.

    Raises:
        FileHostError: create_app()을 거치지 않은 앱 (FOUNDATION_MISSING)
    """
    foundation = getattr(request.app.state, "foundation", None)
    if foundation is None:
        raise FileHostError(ErrorCodes.FOUNDATION_MISSING, path=request.url.path)
    return foundation
