"""
Build the placeholder map for a term: condominium identity, debtor fields
from the form, today's date and the embedded attachment images.
"""
from __future__ import annotations

import html
from datetime import date
from typing import Optional

from models import Condominium, FormSubmission

from .embedding import embed_attachment
from .format_utils import format_date

DEFAULT_TOTAL_AMOUNT = "0,00"
ATTACHMENT_QUOTAS = "imgCotas"
ATTACHMENT_CALCULATION = "imgCalculo"

# token -> form field
_DEBTOR_FIELDS = (
    ("{{devedor}}", "devedor"),
    ("{{cpf}}", "cpf"),
    ("{{endereco_devedor}}", "endereco_devedor"),
    ("{{telefone}}", "telefone"),
    ("{{email}}", "email"),
)


def _text(value: Optional[str]) -> str:
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def build_image_refs(submission: FormSubmission) -> dict[str, str]:
    return {
        "{{IMAGEM_COTAS}}": embed_attachment(submission.attachment(ATTACHMENT_QUOTAS)),
        "{{IMAGEM_CALCULO}}": embed_attachment(submission.attachment(ATTACHMENT_CALCULATION)),
    }


def build_placeholder_map(
    submission: FormSubmission,
    condominium: Condominium,
    today: date,
    images: dict[str, str] | None = None,
) -> dict[str, str]:
    """Every token of the term vocabulary gets an entry; missing data maps to ""."""
    if images is None:
        images = build_image_refs(submission)
    mapping: dict[str, str] = {
        "{{condominio}}": _text(condominium.name),
        "{{cnpj_condominio}}": _text(condominium.tax_id),
        "{{endereco_cond}}": _text(condominium.address),
        "{{bairro_cond}}": _text(condominium.neighborhood),
        "{{cidade_cond}}": _text(condominium.city),
        "{{sindico}}": _text(condominium.representative),
    }
    for token, field in _DEBTOR_FIELDS:
        mapping[token] = _text(submission.field(field))
    mapping["{{valor_total}}"] = _text(submission.field("valor_total") or DEFAULT_TOTAL_AMOUNT)
    mapping["{{forma_pagamento}}"] = _text(submission.field("forma_pagamento"))
    mapping["{{CIDADE}}"] = _text(condominium.city)
    mapping["{{DATA_DIA}}"] = format_date(today)
    mapping["{{IMAGEM_COTAS}}"] = images.get("{{IMAGEM_COTAS}}", "")
    mapping["{{IMAGEM_CALCULO}}"] = images.get("{{IMAGEM_CALCULO}}", "")
    return mapping
