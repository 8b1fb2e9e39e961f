"""
Data schemas for the file hosting app.

규칙:
- 뷰 모델은 불변 (frozen dataclass)
- 템플릿 컨텍스트 키는 to_context()에서만 정의
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .constants import NO_FILES_MESSAGE

# =============================================================================
# Page Variant
# =============================================================================

class PageVariant(str, Enum):
    """
    홈 화면 변형.

    같은 페이지를 단계별로 보여주기 위한 구분:
    정적 목록 → 반복문 → 반복문 + 조건문.
    """
    STATIC = "static"            # 템플릿에 직접 쓴 3개 파일명
    LOOP = "loop"                # 카탈로그를 순회해서 생성
    CONDITIONAL = "conditional"  # 순회 + 빈 목록 안내 문구


# =============================================================================
# View Models
# =============================================================================

@dataclass(frozen=True)
class HomePage:
    """홈 화면 뷰 모델."""
    title: str
    files: tuple[str, ...] = field(default_factory=tuple)
    variant: PageVariant = PageVariant.CONDITIONAL

    def to_context(self) -> dict[str, Any]:
        """Jinja2 컨텍스트용."""
        return {
            "title": self.title,
            "files": list(self.files),
            "variant": self.variant.value,
            "no_files_message": NO_FILES_MESSAGE,
        }


# =============================================================================
# Routing
# =============================================================================

@dataclass(frozen=True)
class RouteSpec:
    """
    라우트 테이블의 한 행.

    handler는 함수 객체가 아니라 이름으로 적는다.
    등록 시점에 src.app.routes.pages에서 찾는다.
    response_class가 없으면 FastAPI 기본값 (JSONResponse).
    """
    method: str
    path: str
    handler: str
    name: str | None = None
    response_class: type | None = None

    @property
    def key(self) -> tuple[str, str]:
        """중복 검사용 (method, path)."""
        return (self.method.upper(), self.path)
