from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from models_layout import PaginationStrategy


class DocumentTemplate(BaseModel):
    """A term template registered in termosign.documentos."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    template_file: str


class Condominium(BaseModel):
    """
    Condominium identity used to fill the term header and signature block.

    Descriptive columns are nullable in the database; the placeholder map
    normalises missing values to empty strings.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: Optional[str] = None
    tax_id: Optional[str] = None
    address: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    representative: Optional[str] = None


class Attachment(BaseModel):
    """Uploaded image (quota statement or debt calculation)."""
    model_config = ConfigDict(frozen=True)

    content: bytes = b""
    media_type: str = "application/octet-stream"
    filename: Optional[str] = None


class FormSubmission(BaseModel):
    """Parsed multipart form: plain fields plus named image uploads."""
    fields: Dict[str, Optional[str]] = Field(default_factory=dict)
    attachments: Dict[str, Attachment] = Field(default_factory=dict)

    def field(self, name: str) -> str | None:
        return self.fields.get(name)

    def attachment(self, name: str) -> Attachment | None:
        return self.attachments.get(name)


class ComposedDocument(BaseModel):
    """
    Fully resolved, self-contained HTML plus the page.pdf options its
    pagination strategy needs. header_template/footer_template are only
    populated for the native header/footer strategy.
    """
    model_config = ConfigDict(frozen=True)

    html: str
    strategy: PaginationStrategy
    header_template: str = ""
    footer_template: str = ""
    pdf_options: Dict[str, object] = Field(default_factory=dict)


class RenderedArtifact(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: bytes
    filename: str
    media_type: Literal["application/pdf"] = "application/pdf"


class DocumentSummary(BaseModel):
    id: str
    nome: Optional[str] = None


class CondominiumSummary(BaseModel):
    id: str
    nome: Optional[str] = None
