"""
Render the sample term with every registered layout, without a database:
1) table_flow (letterhead in the layout table)
2) native (Chromium header/footer templates)

Usage:
  cd backend
  python3 scripts/generate_example_term_pdf.py
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
import sys

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from documents.assets import get_letterhead, load_template
from documents.composer import compose
from documents.embedding import embed
from documents.pdf_renderer import render_pdf
from documents.placeholders import apply_unresolved_policy, substitute
from documents.term_data import build_placeholder_map
from layouts import list_layouts
from models import Condominium, FormSubmission
from models_layout import LayoutConfig


OUT_DIR = BACKEND_DIR / "reports" / "examples"

CONDOMINIUM = Condominium(
    id="1",
    name="Condomínio Residencial Jardim das Acácias",
    tax_id="12.345.678/0001-90",
    address="Rua das Acácias, 250",
    neighborhood="Jardim Botânico",
    city="Curitiba",
    representative="Carlos Eduardo Lima",
)

SUBMISSION = FormSubmission(
    fields={
        "condominioId": "1",
        "documentoId": "acordo_extra",
        "devedor": "Maria Silva",
        "cpf": "123.456.789-00",
        "endereco_devedor": "Rua das Acácias, 250, apto 302",
        "telefone": "(41) 99999-0000",
        "email": "maria.silva@example.com",
        "valor_total": "4.850,32",
        "forma_pagamento": "entrada de R$ 850,32 e 8 parcelas mensais de R$ 500,00",
    },
)


def _write_example(layout: LayoutConfig, body: str) -> None:
    letterhead = get_letterhead()
    document = compose(
        body,
        embed(letterhead.header, letterhead.media_type),
        embed(letterhead.footer, letterhead.media_type),
        layout,
    )
    OUT_DIR.mkdir(parents=True, exist_ok=True)
    (OUT_DIR / f"termo-{layout.layout_id}.html").write_text(document.html, encoding="utf-8")
    artifact = render_pdf(document, filename=f"termo-{layout.layout_id}.pdf")
    (OUT_DIR / artifact.filename).write_bytes(artifact.content)
    print(f"[example] wrote {OUT_DIR / artifact.filename} ({len(artifact.content)} bytes)")


def main() -> None:
    mapping = build_placeholder_map(SUBMISSION, CONDOMINIUM, date.today())
    template = load_template("acordo_extra.html")
    body = substitute(template, apply_unresolved_policy(template, mapping, "keep"))
    # Repeat the clauses so both layouts have to paginate.
    body = body + body
    for layout in list_layouts():
        _write_example(layout, body)
    print(f"[example] complete. Outputs in {OUT_DIR}")


if __name__ == "__main__":
    main()
