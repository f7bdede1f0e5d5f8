"""
Term API: catalog listings and term generation (PDF or HTML preview).
Form field names follow the web form: condominioId, documentoId, devedor, ...
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.orm import Session

from catalog import list_condominiums, list_documents
from db.session import get_db
from documents.errors import DocumentError
from documents.term_builder import build_term_html, build_term_pdf
from layouts import get_layout, list_layouts
from models import Attachment, CondominiumSummary, DocumentSummary, FormSubmission
from models_layout import LayoutConfig

_LOG = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/api", tags=["api"])


def _read_upload(upload: UploadFile | None) -> Attachment | None:
    if upload is None or not upload.filename:
        return None
    try:
        data = upload.file.read()
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Failed to read file: {e}") from e
    if not data:
        return None
    return Attachment(
        content=data,
        media_type=(upload.content_type or "application/octet-stream"),
        filename=upload.filename,
    )


def term_submission(
    condominioId: Optional[str] = Form(None),
    documentoId: Optional[str] = Form(None),
    devedor: Optional[str] = Form(None),
    cpf: Optional[str] = Form(None),
    endereco_devedor: Optional[str] = Form(None),
    telefone: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    valor_total: Optional[str] = Form(None),
    forma_pagamento: Optional[str] = Form(None),
    imgCotas: Optional[UploadFile] = File(None),
    imgCalculo: Optional[UploadFile] = File(None),
) -> FormSubmission:
    attachments = {}
    for name, upload in (("imgCotas", imgCotas), ("imgCalculo", imgCalculo)):
        attachment = _read_upload(upload)
        if attachment is not None:
            attachments[name] = attachment
    return FormSubmission(
        fields={
            "condominioId": condominioId,
            "documentoId": documentoId,
            "devedor": devedor,
            "cpf": cpf,
            "endereco_devedor": endereco_devedor,
            "telefone": telefone,
            "email": email,
            "valor_total": valor_total,
            "forma_pagamento": forma_pagamento,
        },
        attachments=attachments,
    )


def term_layout(layout: Optional[str] = Form(None)) -> LayoutConfig:
    try:
        return get_layout(layout)
    except DocumentError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


@router.get("/documentos", response_model=list[DocumentSummary])
def get_documents(db: Session = Depends(get_db)):
    return list_documents(db)


@router.get("/condominios", response_model=list[CondominiumSummary])
def get_condominiums(db: Session = Depends(get_db)):
    return list_condominiums(db)


@router.get("/layouts", response_model=list[LayoutConfig])
def get_layouts():
    return list_layouts()


@router.post("/gerar-termo")
def generate_term(
    request: Request,
    submission: FormSubmission = Depends(term_submission),
    layout: LayoutConfig = Depends(term_layout),
    db: Session = Depends(get_db),
):
    """Render the filled term to PDF and return it as a download."""
    rid = _request_id(request)
    _LOG.info(
        "TERM_START rid=%s condominium=%s document=%s layout=%s attachments=%s",
        rid,
        submission.field("condominioId"),
        submission.field("documentoId"),
        layout.layout_id,
        ",".join(sorted(submission.attachments)) or "-",
    )
    try:
        artifact = build_term_pdf(db, submission, layout)
    except DocumentError as e:
        _LOG.error("TERM_ERR rid=%s status=%s err=%s", rid, e.status_code, e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    _LOG.info("TERM_DONE rid=%s bytes=%d", rid, len(artifact.content))
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )


@router.post("/gerar-termo/preview", response_class=HTMLResponse)
def preview_term(
    request: Request,
    submission: FormSubmission = Depends(term_submission),
    layout: LayoutConfig = Depends(term_layout),
    db: Session = Depends(get_db),
):
    """
    Return the composed HTML (no Chromium required). For the native
    header/footer layout the letterhead is not part of the body, so the
    preview shows the body only.
    """
    try:
        document = build_term_html(db, submission, layout)
    except DocumentError as e:
        _LOG.error("TERM_ERR rid=%s status=%s err=%s", _request_id(request), e.status_code, e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return HTMLResponse(document.html, headers={"X-Term-Layout": layout.layout_id})
