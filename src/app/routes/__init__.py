"""
Route table: HTTP 메서드 + 경로 → 핸들러 이름.

라우트는 여기 ROUTE_TABLE에만 선언한다.
register_routes()가 테이블 전체를 먼저 검증하고, 문제가 없을 때만 등록.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from src.domain.constants import SUPPORTED_METHODS
from src.domain.errors import ErrorCodes, FileHostError
from src.domain.schemas import RouteSpec

from . import pages

logger = logging.getLogger(__name__)

ROUTE_TABLE: tuple[RouteSpec, ...] = (
    RouteSpec("GET", "/", "home", name="home", response_class=HTMLResponse),
    RouteSpec("GET", "/health", "health", name="health"),
)


def resolve_handler(name: str) -> Callable[..., Any]:
    """
    핸들러 이름 → 함수.

    Raises:
        FileHostError: pages.__all__에 없는 이름 (ROUTE_HANDLER_MISSING)
    """
    if name not in pages.__all__:
        raise FileHostError(ErrorCodes.ROUTE_HANDLER_MISSING, handler=name)
    handler: Callable[..., Any] = getattr(pages, name)
    return handler


def validate_table(
    table: Iterable[RouteSpec],
) -> list[tuple[RouteSpec, Callable[..., Any]]]:
    """
    라우트 테이블 검증.

    - 지원하지 않는 메서드 → ROUTE_METHOD_INVALID
    - (method, path) 중복 → ROUTE_DUPLICATE
    - 핸들러 없음 → ROUTE_HANDLER_MISSING

    Returns:
        (RouteSpec, handler) 목록 (테이블 순서 유지)
    """
    seen: set[tuple[str, str]] = set()
    resolved: list[tuple[RouteSpec, Callable[..., Any]]] = []

    for spec in table:
        if spec.method.upper() not in SUPPORTED_METHODS:
            raise FileHostError(
                ErrorCodes.ROUTE_METHOD_INVALID, method=spec.method, path=spec.path
            )
        if spec.key in seen:
            raise FileHostError(
                ErrorCodes.ROUTE_DUPLICATE, method=spec.method, path=spec.path
            )
        seen.add(spec.key)
        resolved.append((spec, resolve_handler(spec.handler)))

    return resolved


def register_routes(app: FastAPI, table: Iterable[RouteSpec] = ROUTE_TABLE) -> None:
    """검증된 라우트 테이블을 앱에 등록."""
    for spec, handler in validate_table(table):
        options: dict[str, Any] = {}
        if spec.response_class is not None:
            options["response_class"] = spec.response_class
        app.add_api_route(
            spec.path,
            handler,
            methods=[spec.method.upper()],
            name=spec.name or spec.handler,
            **options,
        )
        logger.debug(f"Route registered: {spec.method.upper()} {spec.path} -> {spec.handler}")


__all__ = ["ROUTE_TABLE", "pages", "register_routes", "resolve_handler", "validate_table"]
