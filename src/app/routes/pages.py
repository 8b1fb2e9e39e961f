"""
Page handlers.

라우트 테이블(src/app/routes/__init__.py)에서 이름으로 참조된다.
__all__에 있는 함수만 핸들러로 등록 가능.
"""

import logging

from fastapi import Request
from fastapi.responses import HTMLResponse

from src.app.foundation import get_foundation
from src.app.widgets import Widget, render_page
from src.domain.constants import HOME_TEMPLATE
from src.domain.schemas import HomePage

__all__ = ["home", "health"]

logger = logging.getLogger(__name__)

HOME_CSS = "ul.files { list-style: square; padding-left: 1.5rem; }"


async def home(request: Request) -> HTMLResponse:
    """
    홈 화면.

    설정된 제목과 파일 목록을 보여준다.
    목록이 비면 안내 문구 (conditional 변형).
    """
    foundation = get_foundation(request)
    settings = foundation.settings

    page = HomePage(
        title=settings.title,
        files=tuple(foundation.catalog.list_files()),
        variant=settings.variant,
    )
    logger.debug(f"Rendering home: variant={page.variant.value}, files={len(page.files)}")

    widget = (
        Widget.stylesheet("/static/css/style.css")
        + Widget.style(HOME_CSS)
        + Widget.from_template(
            foundation.templates, HOME_TEMPLATE, page.to_context(), title=page.title
        )
    )
    return render_page(request, foundation.templates, widget)


async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}
