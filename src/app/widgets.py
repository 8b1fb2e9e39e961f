"""
Widgets: 페이지 조각(마크업/스타일/스크립트) 조합.

Widget끼리 + 로 합치고, 마지막에 render_page()로 layout.html에 감싼다.

    widget = Widget.style(HOME_CSS) + Widget.from_template(templates, "home.html", ctx)
    return render_page(request, templates, widget)
"""

from dataclasses import dataclass
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateNotFound
from markupsafe import Markup

from src.domain.constants import LAYOUT_TEMPLATE
from src.domain.errors import ErrorCodes, FileHostError


@dataclass(frozen=True)
class Widget:
    """
    페이지 조각.

    - title: 페이지 제목 (합칠 때 먼저 나온 비어있지 않은 값 유지)
    - head: <head>에 들어갈 style/script
    - body: <body>에 들어갈 마크업
    """
    title: str = ""
    head: Markup = Markup("")
    body: Markup = Markup("")

    def __add__(self, other: "Widget") -> "Widget":
        if not isinstance(other, Widget):
            return NotImplemented
        return Widget(
            title=self.title or other.title,
            head=self.head + other.head,
            body=self.body + other.body,
        )

    @classmethod
    def from_template(
        cls,
        templates: Jinja2Templates,
        name: str,
        context: dict[str, Any],
        title: str = "",
    ) -> "Widget":
        """
        Jinja2 조각 템플릿 → body 위젯.

        Raises:
            FileHostError: 템플릿 없음 (TEMPLATE_NOT_FOUND)
        """
        try:
            template = templates.get_template(name)
        except TemplateNotFound as e:
            raise FileHostError(ErrorCodes.TEMPLATE_NOT_FOUND, name=name) from e
        return cls(title=title, body=Markup(template.render(**context)))

    @classmethod
    def style(cls, css: str) -> "Widget":
        """인라인 CSS 위젯. css는 코드에 있는 값만 넘긴다 (이스케이프 안 함)."""
        return cls(head=Markup(f"<style>{css}</style>"))

    @classmethod
    def stylesheet(cls, href: str) -> "Widget":
        return cls(head=Markup('<link rel="stylesheet" href="{}">').format(href))


def render_page(
    request: Request,
    templates: Jinja2Templates,
    widget: Widget,
    status_code: int = 200,
) -> HTMLResponse:
    """위젯을 layout.html로 감싸 전체 페이지 응답 생성."""
    return templates.TemplateResponse(
        request,
        LAYOUT_TEMPLATE,
        {
            "title": widget.title,
            "head": widget.head,
            "body": widget.body,
        },
        status_code=status_code,
    )
