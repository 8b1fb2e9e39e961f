"""
test_pages.py - 홈 화면 렌더링 테스트

DoD:
- 빈 목록 → "No files have been uploaded yet.", <ul> 없음
- 목록 있음 → <ul>에 파일당 <li> 하나, 순서 유지
- static 변형 → 템플릿에 적힌 3개 파일명
- 파일명은 HTML 이스케이프
"""

import re
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.main import file_host_error_handler, http_exception_handler
from src.app.routes import register_routes
from src.domain.constants import NO_FILES_MESSAGE, STATIC_VARIANT_FILES
from src.domain.errors import FileHostError


def _list_items(html: str) -> list[str]:
    """<li> 내용만 추출 (공백 정리)."""
    return [item.strip() for item in re.findall(r"<li>(.*?)</li>", html, flags=re.S)]


# =============================================================================
# conditional 변형 (기본)
# =============================================================================


class TestHomeConditional:
    """기본 변형: 순회 + 빈 목록 안내."""

    def test_empty_list_shows_message(self, make_client):
        client = make_client({"files": {"names": []}})

        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert NO_FILES_MESSAGE in response.text
        assert "<ul" not in response.text

    def test_names_rendered_in_order(self, make_client):
        names = ["zeta.txt", "alpha.pdf", "mid.jpg"]
        client = make_client({"files": {"names": names}})

        response = client.get("/")

        assert _list_items(response.text) == names
        assert response.text.count("<ul") == 1
        assert NO_FILES_MESSAGE not in response.text

    def test_directory_listing(self, make_client, files_dir: Path):
        client = make_client({"files": {"directory": str(files_dir)}})

        response = client.get("/")

        assert _list_items(response.text) == ["a_notes.txt", "b_report.pdf", "c_photo.jpg"]
        assert ".hidden" not in response.text

    def test_empty_directory(self, make_client, empty_files_dir: Path):
        client = make_client({"files": {"directory": str(empty_files_dir)}})

        response = client.get("/")

        assert NO_FILES_MESSAGE in response.text

    def test_new_file_appears_without_restart(self, make_client, empty_files_dir: Path):
        client = make_client({"files": {"directory": str(empty_files_dir)}})
        assert NO_FILES_MESSAGE in client.get("/").text

        (empty_files_dir / "fresh.txt").write_text("x", encoding="utf-8")

        assert _list_items(client.get("/").text) == ["fresh.txt"]

    def test_filenames_escaped(self, make_client):
        client = make_client({"files": {"names": ["<script>alert(1)</script>.txt"]}})

        response = client.get("/")

        assert "<script>alert(1)</script>" not in response.text
        assert "&lt;script&gt;alert(1)&lt;/script&gt;.txt" in response.text


# =============================================================================
# 제목 / 레이아웃
# =============================================================================


class TestHomeLayout:
    def test_title_in_head_and_heading(self, make_client):
        client = make_client({"app": {"title": "My Uploads"}})

        response = client.get("/")

        assert "<title>My Uploads</title>" in response.text
        assert "<h1>My Uploads</h1>" in response.text

    def test_default_title(self, make_client):
        response = make_client().get("/")

        assert "<title>File Hosting</title>" in response.text

    def test_stylesheet_and_inline_style(self, make_client):
        response = make_client().get("/")

        assert '<link rel="stylesheet" href="/static/css/style.css">' in response.text
        assert "<style>ul.files" in response.text

    def test_full_document(self, make_client):
        text = make_client().get("/").text

        assert text.lstrip().startswith("<!DOCTYPE html>")
        assert text.rstrip().endswith("</html>")


# =============================================================================
# static / loop 변형
# =============================================================================


class TestHomeVariants:
    def test_static_shows_fixed_files(self, make_client):
        """static 변형은 카탈로그와 무관하게 고정 3개."""
        client = make_client({"page": {"variant": "static"}, "files": {"names": ["x.txt"]}})

        response = client.get("/")

        assert _list_items(response.text) == list(STATIC_VARIANT_FILES)
        assert "x.txt" not in response.text

    @pytest.mark.parametrize("names", [["one.txt"], ["b.txt", "a.txt", "c.txt"]])
    def test_loop_lists_catalog(self, make_client, names: list[str]):
        client = make_client({"page": {"variant": "loop"}, "files": {"names": names}})

        response = client.get("/")

        assert _list_items(response.text) == names

    def test_loop_without_files_has_no_message(self, make_client):
        """loop 변형은 조건문이 없으므로 빈 <ul>만 나옴."""
        client = make_client({"page": {"variant": "loop"}})

        response = client.get("/")

        assert "<ul" in response.text
        assert _list_items(response.text) == []
        assert NO_FILES_MESSAGE not in response.text


# =============================================================================
# health / 에러
# =============================================================================


class TestHealthAndErrors:
    def test_health(self, make_client):
        response = make_client().get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_unknown_path_renders_error_page(self, make_client):
        response = make_client().get("/files/upload")

        assert response.status_code == 404
        assert "text/html" in response.headers["content-type"]
        assert "<h1>404</h1>" in response.text
        assert "<title>404 - File Hosting</title>" in response.text

    def test_wrong_method(self, make_client):
        """업로드는 범위 밖: POST / → 405."""
        response = make_client().post("/")

        assert response.status_code == 405
        assert response.headers.get("allow") == "GET"

    def test_catalog_error_renders_500(self, make_client, tmp_path: Path, monkeypatch):
        directory = tmp_path / "locked"
        directory.mkdir()
        client = make_client({"files": {"directory": str(directory)}})

        def _raise(self):
            raise PermissionError("denied")

        monkeypatch.setattr(Path, "iterdir", _raise)

        response = client.get("/")

        assert response.status_code == 500
        assert "FILES_DIR_UNREADABLE" in response.text

    @pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
    def test_only_route_table_paths_exposed(self, make_client, path: str):
        """자동 문서 라우트 없음: ROUTE_TABLE 밖의 경로는 404."""
        client = make_client()

        response = client.get(path)

        assert client.app.openapi_url is None
        assert response.status_code == 404


class TestErrorsWithoutFoundation:
    """create_app()을 거치지 않은 앱 (app.state.foundation 없음)."""

    @pytest.fixture
    def bare_client(self) -> TestClient:
        app = FastAPI()
        register_routes(app)
        app.add_exception_handler(StarletteHTTPException, http_exception_handler)
        app.add_exception_handler(FileHostError, file_host_error_handler)
        return TestClient(app)

    def test_foundation_missing_renders_plain_500(self, bare_client: TestClient):
        response = bare_client.get("/")

        assert response.status_code == 500
        assert "text/html" in response.headers["content-type"]
        assert "FOUNDATION_MISSING" in response.text

    def test_not_found_renders_plain_404(self, bare_client: TestClient):
        response = bare_client.get("/missing")

        assert response.status_code == 404
        assert "<h1>404</h1>" in response.text
