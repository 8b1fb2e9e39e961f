"""
Error definitions for the file hosting app.

규칙:
- 조용한 실패 금지 → FileHostError로 명시적 실패
- 설정/라우트 테이블 오류는 시작 시점에 즉시 중단
"""

from typing import Any


class FileHostError(Exception):
    """
    앱 정책 위반 시 발생하는 에러.

    즉시 중단이 필요한 경우에만 사용:
    - 설정 파일 형식 오류
    - 라우트 테이블의 핸들러 누락/중복
    - 파일 디렉터리 읽기 실패

    Usage:
        raise FileHostError("CONFIG_INVALID", key="page.variant", value="grid")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Config ===
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"

    # === Routing ===
    ROUTE_HANDLER_MISSING = "ROUTE_HANDLER_MISSING"
    ROUTE_DUPLICATE = "ROUTE_DUPLICATE"
    ROUTE_METHOD_INVALID = "ROUTE_METHOD_INVALID"

    # === Catalog ===
    FILES_DIR_UNREADABLE = "FILES_DIR_UNREADABLE"

    # === Render ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    FOUNDATION_MISSING = "FOUNDATION_MISSING"
