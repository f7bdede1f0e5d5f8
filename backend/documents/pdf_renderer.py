"""Render composed term HTML to PDF with headless Chromium (Playwright)."""
from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import sync_playwright

from models import ComposedDocument, RenderedArtifact

from .errors import RenderError

_LOG = logging.getLogger("uvicorn.error")

DEFAULT_PDF_FILENAME = "termo-gerado.pdf"
CHROMIUM_ARGS = ["--no-sandbox"]


def _short(e: Exception) -> str:
    msg = str(e)
    return msg[:500] if len(msg) > 500 else msg


@contextmanager
def rendering_session() -> Iterator[object]:
    """
    One Playwright driver + Chromium + page per call. The browser and the
    driver are closed on every exit path, including failures inside the block.
    """
    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=True, args=CHROMIUM_ARGS)
        except Exception as e:
            raise RenderError(f"Could not start Chromium: {_short(e)}") from e
        try:
            page = browser.new_page()
            yield page
        finally:
            browser.close()


def render_pdf(document: ComposedDocument, filename: str = DEFAULT_PDF_FILENAME) -> RenderedArtifact:
    options = dict(document.pdf_options)
    if options.get("display_header_footer"):
        options["header_template"] = document.header_template
        options["footer_template"] = document.footer_template
    start = time.perf_counter()
    try:
        with rendering_session() as page:
            page.set_content(document.html, wait_until="networkidle")
            page.emulate_media(media="print")
            pdf_bytes = page.pdf(**options)
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(f"PDF generation failed: {_short(e)}") from e
    _LOG.info(
        "RENDER_DONE strategy=%s bytes=%d duration_ms=%.0f",
        document.strategy.value,
        len(pdf_bytes),
        (time.perf_counter() - start) * 1000,
    )
    return RenderedArtifact(content=pdf_bytes, filename=filename)


def check_runtime() -> None:
    """Launch Chromium on a trivial page; raises RenderError when the runtime is unusable."""
    try:
        with rendering_session() as page:
            page.set_content("<html><body>ok</body></html>")
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(f"Playwright runtime unavailable: {_short(e)}") from e
