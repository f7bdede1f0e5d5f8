"""
Wrap a substituted term body with the letterhead, according to the layout's
pagination strategy.

table_flow: header/footer images sit in the <thead>/<tfoot> of a layout table,
    so Chromium repeats them with the table on every page. Page margins are
    zero and the band heights are set inside the document.
native_header_footer: the body is emitted alone and the images go to
    page.pdf(header_template=..., footer_template=...); the page margins
    reserve exactly the room the images take.
"""
from __future__ import annotations

import html
from pathlib import Path

from models import ComposedDocument
from models_layout import LayoutConfig, PaginationStrategy

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
_TABLE_FLOW_HTML = (_TEMPLATE_DIR / "table_flow.html").read_text(encoding="utf-8")
_NATIVE_BODY_HTML = (_TEMPLATE_DIR / "native_body.html").read_text(encoding="utf-8")
_NATIVE_BAND_HTML = (_TEMPLATE_DIR / "native_band.html").read_text(encoding="utf-8")

# Chromium prints its own date/title when a template is empty.
_EMPTY_BAND = "<div></div>"


def _cm(value: float) -> str:
    return f"{value:g}"


def _img(src: str, alt: str) -> str:
    if not src:
        return ""
    return f'<img src="{html.escape(src, quote=True)}" alt="{alt}">'


def _band_img(src: str, height_cm: float) -> str:
    if not src:
        return ""
    return (
        f'<img src="{html.escape(src, quote=True)}" '
        f'style="display: block; width: 100%; height: {_cm(height_cm)}cm;">'
    )


def _apply_base_styles(shell: str, layout: LayoutConfig) -> str:
    return (
        shell.replace("__FONT_FAMILY__", layout.font_family)
        .replace("__FONT_SIZE__", _cm(layout.font_size_pt))
        .replace("__PAGE_FORMAT__", layout.page_format)
    )


def _compose_table_flow(body_html: str, header_src: str, footer_src: str, layout: LayoutConfig) -> ComposedDocument:
    page = (
        _apply_base_styles(_TABLE_FLOW_HTML, layout)
        .replace("__CONTENT_PADDING__", _cm(layout.content_padding_cm))
        .replace("__HEADER_BAND__", _cm(layout.header_band_cm))
        .replace("__FOOTER_BAND__", _cm(layout.footer_band_cm))
        .replace("__HEADER_IMG__", _img(header_src, "cabecalho"))
        .replace("__FOOTER_IMG__", _img(footer_src, "rodape"))
        # Body last so its own text is never scanned for shell markers.
        .replace("__BODY_HTML__", body_html)
    )
    return ComposedDocument(
        html=page,
        strategy=PaginationStrategy.TABLE_FLOW,
        pdf_options={
            "format": layout.page_format,
            "print_background": True,
            "display_header_footer": False,
            "margin": {"top": "0", "right": "0", "bottom": "0", "left": "0"},
        },
    )


def _native_band(src: str, height_cm: float) -> str:
    if not src:
        return _EMPTY_BAND
    return (
        _NATIVE_BAND_HTML.replace("__BAND_HEIGHT__", _cm(height_cm))
        .replace("__BAND_IMG__", _band_img(src, height_cm))
    )


def _compose_native(body_html: str, header_src: str, footer_src: str, layout: LayoutConfig) -> ComposedDocument:
    page = _apply_base_styles(_NATIVE_BODY_HTML, layout).replace("__BODY_HTML__", body_html)
    side = f"{_cm(layout.margin_side_cm)}cm"
    return ComposedDocument(
        html=page,
        strategy=PaginationStrategy.NATIVE_HEADER_FOOTER,
        header_template=_native_band(header_src, layout.margin_top_cm),
        footer_template=_native_band(footer_src, layout.margin_bottom_cm),
        pdf_options={
            "format": layout.page_format,
            "print_background": True,
            "display_header_footer": True,
            "margin": {
                "top": f"{_cm(layout.margin_top_cm)}cm",
                "right": side,
                "bottom": f"{_cm(layout.margin_bottom_cm)}cm",
                "left": side,
            },
        },
    )


def compose(body_html: str, header_src: str, footer_src: str, layout: LayoutConfig) -> ComposedDocument:
    """header_src/footer_src are data: URIs (see embedding.embed)."""
    if layout.strategy == PaginationStrategy.NATIVE_HEADER_FOOTER:
        return _compose_native(body_html, header_src, footer_src, layout)
    return _compose_table_flow(body_html, header_src, footer_src, layout)
