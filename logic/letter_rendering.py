"""Compose letter HTML from Jinja templates and export it as PDF."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from analytics_tracker import emit_counter
from logic import pdf_renderer
from logic.text_layout import (
    NBSP,
    blank_if_empty,
    follow_case,
    pad_center,
    pad_fixed_length,
)
from models.document import RenderResult

_template_env: Environment | None = None


def ensure_template_env(base_template_dir: Optional[str] = None) -> Environment:
    """Return a Jinja2 environment rooted at ``base_template_dir``.

    The environment is cached so multiple calls reuse the same loader. The
    fixed-width text helpers are available as filters: ``pad_fixed``,
    ``pad_center``, ``blank`` and ``follow_case``.
    """
    global _template_env
    base_dir = str(base_template_dir or "templates")
    if _template_env is None or getattr(_template_env.loader, "searchpath", [None])[0] != base_dir:
        env = Environment(
            loader=FileSystemLoader(base_dir),
            autoescape=select_autoescape(["html", "htm"]),
        )
        # Markup padding survives autoescape while the text itself is escaped
        env.filters["pad_fixed"] = lambda text, lead, total: pad_fixed_length(
            text, lead, total, Markup(NBSP)
        )
        env.filters["pad_center"] = lambda text, total: pad_center(text, total, Markup(NBSP))
        env.filters["blank"] = blank_if_empty
        env.filters["follow_case"] = lambda text, fmt: follow_case(fmt, text)
        _template_env = env
    return _template_env


def render_letter_html(
    template_name: str, context: Mapping[str, Any], templates_dir: Optional[str] = None
) -> str:
    """Render the letter HTML using the Jinja template ``template_name``."""

    if not template_name:
        emit_counter("rendering.missing_template_path")
        raise ValueError("template_name is required")

    env = ensure_template_env(templates_dir)
    template = env.get_template(template_name)
    return template.render(**context)


def export_letter_pdf(
    template_name: str,
    context: Mapping[str, Any],
    output_path: str,
    *,
    templates_dir: Optional[str] = None,
    style: Optional[str] = None,
    orientation: str = "P",
    page_size: str = "A4",
    cfg=None,
) -> RenderResult:
    """Compose the letter and render it to ``{output_path}.pdf``."""

    html = render_letter_html(template_name, context, templates_dir)
    return pdf_renderer.render_html_to_pdf(
        html, output_path, style, orientation, page_size, cfg=cfg
    )


__all__ = ["ensure_template_env", "render_letter_html", "export_letter_pdf"]
