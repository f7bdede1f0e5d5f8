"""
Lookups against termosign.documentos and termosign.condominios.
Unknown ids raise LookupNotFound so callers abort before any rendering.
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from db.models import Condominio, Documento
from documents.errors import LookupNotFound
from models import Condominium, CondominiumSummary, DocumentSummary, DocumentTemplate


def get_document_template(db: Session, document_id: str) -> DocumentTemplate:
    row = db.query(Documento).filter(Documento.id == str(document_id)).first()
    if row is None or not row.templatefile:
        raise LookupNotFound("Documento não encontrado.")
    return DocumentTemplate(id=row.id, name=row.nome or "", template_file=row.templatefile)


def get_condominium(db: Session, condominium_id: str) -> Condominium:
    row = db.query(Condominio).filter(Condominio.id == str(condominium_id)).first()
    if row is None:
        raise LookupNotFound("Condomínio não encontrado.")
    return Condominium(
        id=row.id,
        name=row.nome,
        tax_id=row.cnpj,
        address=row.endereco,
        neighborhood=row.bairro,
        city=row.cidade,
        representative=row.sindico,
    )


def list_documents(db: Session) -> list[DocumentSummary]:
    rows = db.query(Documento).order_by(Documento.nome).all()
    return [DocumentSummary(id=r.id, nome=r.nome) for r in rows]


def list_condominiums(db: Session) -> list[CondominiumSummary]:
    rows = db.query(Condominio).order_by(Condominio.nome).all()
    return [CondominiumSummary(id=r.id, nome=r.nome) for r in rows]
