"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- CLI: uv run python -m src.app.main --port 8000 --config default.yaml
"""

import argparse
import logging
import os
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from markupsafe import Markup
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.foundation import STATIC_DIR, Foundation, build_foundation
from src.app.routes import register_routes
from src.app.widgets import Widget, render_page
from src.core.config import Settings, load_settings
from src.core.logging import setup_logging
from src.domain.constants import CONFIG_ENV_VAR, ERROR_TEMPLATE
from src.domain.errors import FileHostError

logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    Foundation은 create_app()에서 이미 만들어져 있다.
    시작/종료 시점만 기록.
    """
    foundation: Foundation = app.state.foundation
    logger.info(
        f"Starting '{foundation.settings.title}' "
        f"(variant={foundation.settings.variant.value})"
    )

    yield

    logger.info("Shutting down")


# =============================================================================
# Error Handlers
# =============================================================================


def _render_error(request: Request, status_code: int, detail: str) -> HTMLResponse:
    """
    에러 페이지 렌더링.

    Foundation이 없는 앱이면 템플릿 없이 최소 HTML로 응답.
    """
    foundation: Foundation | None = getattr(request.app.state, "foundation", None)
    if foundation is None:
        return HTMLResponse(
            content=Markup("<h1>{}</h1><p>{}</p>").format(status_code, detail),
            status_code=status_code,
        )
    widget = Widget.stylesheet("/static/css/style.css") + Widget.from_template(
        foundation.templates,
        ERROR_TEMPLATE,
        {"status_code": status_code, "detail": detail},
        title=f"{status_code} - {foundation.settings.title}",
    )
    return render_page(request, foundation.templates, widget, status_code=status_code)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> HTMLResponse:
    """404/405 등 HTTP 에러 → 에러 페이지."""
    response = _render_error(request, exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def file_host_error_handler(request: Request, exc: FileHostError) -> HTMLResponse:
    """요청 처리 중 FileHostError → 500 에러 페이지."""
    logger.error(f"Request failed: {request.url.path} {exc.to_dict()}")
    return _render_error(request, 500, f"Internal error [{exc.code}]")


# =============================================================================
# App Factory
# =============================================================================


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    앱 생성.

    1. 설정 로드 (없으면 default.yaml / FILEHOST_CONFIG)
    2. 로깅 설정
    3. Foundation 생성 → app.state.foundation
    4. 라우트 테이블 등록, 정적 파일, 에러 핸들러
    """
    if settings is None:
        settings = load_settings()

    setup_logging(settings)

    app = FastAPI(
        title=settings.title,
        description="Toy file hosting site: a single page listing hosted files",
        version="0.1.0",
        lifespan=lifespan,
        # 라우트는 ROUTE_TABLE에 있는 것만 노출
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.foundation = build_foundation(settings)

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    register_routes(app)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(FileHostError, file_host_error_handler)

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================


def main(argv: Sequence[str] | None = None) -> int:
    import uvicorn

    parser = argparse.ArgumentParser(description="File hosting 서버 실행")
    parser.add_argument("--host", type=str, default=None, help="바인드 주소 (기본: 설정값)")
    parser.add_argument("--port", type=int, default=None, help="포트 (기본: 설정값)")
    parser.add_argument("--config", type=str, default=None, help="설정 파일 경로")
    parser.add_argument("--reload", action="store_true", help="코드 변경 시 재시작")
    args = parser.parse_args(argv)

    # reload 워커도 같은 설정을 읽도록 환경변수로 전달
    if args.config:
        os.environ[CONFIG_ENV_VAR] = os.path.abspath(args.config)

    try:
        settings = load_settings()
    except FileHostError as e:
        logger.error(f"설정 로드 실패: {e}")
        return 1

    host = args.host if args.host is not None else settings.server.host
    port = args.port if args.port is not None else settings.server.port

    logger.info(f"Listening on http://{host}:{port}")
    uvicorn.run(
        "src.app.main:app",
        host=host,
        port=port,
        reload=args.reload,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
