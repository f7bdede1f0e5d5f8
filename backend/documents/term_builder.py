"""
Term pipeline: lookups -> template -> placeholder substitution -> letterhead
composition -> PDF. build_term_html stops before rendering (used for preview).
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from sqlalchemy.orm import Session

from catalog import get_condominium, get_document_template
from models import ComposedDocument, FormSubmission, RenderedArtifact
from models_layout import LayoutConfig

from .assets import get_letterhead, load_template
from .composer import compose
from .embedding import embed
from .format_utils import local_today
from .pdf_renderer import DEFAULT_PDF_FILENAME, render_pdf
from .placeholders import apply_unresolved_policy, substitute
from .term_data import build_placeholder_map

_LOG = logging.getLogger("uvicorn.error")

DEFAULT_DOCUMENT_ID = "acordo_extra"


def build_term_html(
    db: Session,
    submission: FormSubmission,
    layout: LayoutConfig,
    today: date | None = None,
    unresolved_policy: str | None = None,
) -> ComposedDocument:
    condominium = get_condominium(db, submission.field("condominioId") or "")
    document_id = submission.field("documentoId") or DEFAULT_DOCUMENT_ID
    template = get_document_template(db, document_id)

    body = load_template(template.template_file)
    letterhead = get_letterhead()

    mapping = build_placeholder_map(submission, condominium, today or local_today())
    mapping = apply_unresolved_policy(body, mapping, unresolved_policy)
    body = substitute(body, mapping)

    _LOG.info(
        "TERM_COMPOSE document=%s condominium=%s layout=%s strategy=%s",
        template.id, condominium.id, layout.layout_id, layout.strategy.value,
    )
    return compose(
        body,
        embed(letterhead.header, letterhead.media_type),
        embed(letterhead.footer, letterhead.media_type),
        layout,
    )


def build_term_pdf(
    db: Session,
    submission: FormSubmission,
    layout: LayoutConfig,
    today: date | None = None,
    unresolved_policy: str | None = None,
    renderer: Callable[..., RenderedArtifact] | None = None,
) -> RenderedArtifact:
    """Compose, then render. All lookups and asset loads happen before Chromium starts."""
    document = build_term_html(db, submission, layout, today=today, unresolved_policy=unresolved_policy)
    return (renderer or render_pdf)(document, filename=DEFAULT_PDF_FILENAME)
