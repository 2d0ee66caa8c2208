from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

import pdfkit
from markupsafe import escape

from analytics_tracker import emit_counter
from models.document import (
    Orientation,
    OutputMode,
    PageSize,
    RenderRequest,
    RenderResult,
)

logger = logging.getLogger(__name__)


def _app_config(cfg=None):
    if cfg is None:
        from config import get_app_config

        cfg = get_app_config()
    return cfg


def load_stylesheet(style: Optional[str] = None, cfg=None) -> str:
    """Return the CSS at ``style`` or the configured report stylesheet."""

    path = style or _app_config(cfg).report_css_path
    return Path(path).read_text(encoding="utf-8")


def build_styled_html(html: str, css: str, default_font: str = "Arial") -> str:
    """Prefix ``html`` with an inline style block.

    The default font rule comes first so the stylesheet can override it.
    """

    font_rule = f"body {{ font-family: {default_font}; }}"
    return f"<style>\n {font_rule}\n{css}</style>\n{html}"


def pdfkit_options(orientation: Orientation, page_size: PageSize) -> Dict[str, str]:
    options = {
        "orientation": orientation.wkhtmltopdf_name,
        "encoding": "UTF-8",
        "quiet": "",
    }
    options.update(page_size.wkhtmltopdf_options)
    return options


def format_render_error(exc: BaseException) -> str:
    """Human readable HTML description of a rendering failure."""

    message = str(exc).strip() or "no details"
    return (
        '<span style="color: #AA0000; font-weight: bold;">'
        f"PDF rendering failed ({escape(type(exc).__name__)})</span><br>"
        f"{escape(message)}"
    ).replace("\n", "<br>")


def _write_atomic(path: Path, data: bytes) -> None:
    fd, tmp = tempfile.mkstemp(dir=str(path.parent), prefix=path.name, suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def _preserve_raw(request: RenderRequest) -> None:
    raw = Path(request.raw_path)
    raw.parent.mkdir(parents=True, exist_ok=True)
    raw.write_text(request.html_body, encoding="utf-8")


def render(
    request: RenderRequest,
    *,
    mode: OutputMode = OutputMode.FILE_INLINE,
    wkhtmltopdf_path: Optional[str] = None,
    cfg=None,
) -> RenderResult:
    """Render ``request`` to ``{output_path}.pdf``.

    Rendering errors never propagate. The unstyled HTML is saved to
    ``{output_path}_asli`` instead and the returned result carries the
    diagnostic message.
    """

    cfg = _app_config(cfg)
    pdf_path = Path(request.pdf_path)
    try:
        css = load_stylesheet(request.style_sheet, cfg)
        styled = build_styled_html(request.html_body, css, cfg.default_font)
        configuration = pdfkit.configuration(
            wkhtmltopdf=wkhtmltopdf_path or cfg.wkhtmltopdf_path
        )
        pdf_bytes = pdfkit.from_string(
            styled,
            False,
            configuration=configuration,
            options=pdfkit_options(request.orientation, request.page_size),
        )
        if mode.writes_file:
            pdf_path.parent.mkdir(parents=True, exist_ok=True)
            _write_atomic(pdf_path, pdf_bytes)
            # stale copy from an earlier failed attempt
            Path(request.raw_path).unlink(missing_ok=True)
    except Exception as exc:  # rendering failures are preserved, never raised
        emit_counter("pdf.render.failure")
        logger.error("Failed to render PDF %s: %s", pdf_path, exc)
        pdf_path.unlink(missing_ok=True)
        _preserve_raw(request)
        return RenderResult.failed(request, format_render_error(exc))

    emit_counter("pdf.render.success")
    logger.info("PDF rendered: %s", pdf_path if mode.writes_file else "<bytes>")
    return RenderResult.succeeded(
        request,
        pdf_bytes=pdf_bytes if mode.returns_bytes else None,
        written=mode.writes_file,
    )


def render_html_to_pdf(
    html: str,
    output_path: str,
    style: Optional[str] = None,
    orientation: Orientation | str = Orientation.PORTRAIT,
    page_size: PageSize | str = PageSize.A4,
    *,
    mode: OutputMode = OutputMode.FILE_INLINE,
    wkhtmltopdf_path: Optional[str] = None,
    cfg=None,
) -> RenderResult:
    """Render ``html`` to ``{output_path}.pdf``; see :func:`render`."""

    request = RenderRequest(
        html_body=html,
        output_path=str(output_path),
        style_sheet=style,
        orientation=orientation,
        page_size=page_size,
    )
    return render(request, mode=mode, wkhtmltopdf_path=wkhtmltopdf_path, cfg=cfg)


def buat_pdf(
    isi: str,
    file: str,
    style: Optional[str] = None,
    orientation: Orientation | str = "P",
    page_size: PageSize | str = "A4",
    cfg=None,
) -> RenderResult:
    """Save a report's HTML as PDF, logging the raw HTML echo on failure."""

    result = render_html_to_pdf(isi, file, style, orientation, page_size, cfg=cfg)
    if not result.ok:
        logger.warning(
            "Raw HTML preserved at %s\n%s", result.raw_path, result.diagnostic_echo()
        )
    return result


__all__ = [
    "load_stylesheet",
    "build_styled_html",
    "pdfkit_options",
    "format_render_error",
    "render",
    "render_html_to_pdf",
    "buat_pdf",
]
