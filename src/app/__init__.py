"""
App layer: 웹 서버 (FastAPI + Jinja2).

역할:
- Foundation 생성, 라우트 테이블 등록
- 페이지 핸들러, 위젯 조합

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML (layout, 조각)
- src/app/static/ → CSS
"""
