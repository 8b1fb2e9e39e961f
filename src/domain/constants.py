"""
Domain Constants: 앱 전역 상수.

설정 파일명, 기본값, 화면에 노출되는 문구 등.
"""

# =============================================================================
# Config (설정 파일)
# =============================================================================

DEFAULT_CONFIG_FILENAME = "default.yaml"
CONFIG_ENV_VAR = "FILEHOST_CONFIG"

# =============================================================================
# Defaults (기본값)
# =============================================================================

DEFAULT_TITLE = "File Hosting"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# Page Text (화면 문구)
# =============================================================================
# 업로드 기능은 범위 밖이므로 빈 목록은 항상 이 문구로 표시

NO_FILES_MESSAGE = "No files have been uploaded yet."

# static 변형에서 템플릿에 직접 쓰인 파일명 (home.html과 동일해야 함)
STATIC_VARIANT_FILES = ("file1.txt", "file2.txt", "file3.txt")

# =============================================================================
# Templates (Jinja2 템플릿 파일명)
# =============================================================================

LAYOUT_TEMPLATE = "layout.html"
HOME_TEMPLATE = "home.html"
ERROR_TEMPLATE = "error.html"

# =============================================================================
# HTTP
# =============================================================================

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"})
