"""Endpoint tests. Conftest swaps the database for in-memory SQLite and the renderer for a fake."""
from __future__ import annotations

from documents import embedding
from documents.errors import RenderError

from conftest import PNG_1PX

FORM = {
    "condominioId": "1",
    "documentoId": "acordo_extra",
    "devedor": "Maria Silva",
    "cpf": "123.456.789-00",
    "endereco_devedor": "Rua das Acácias, 250, apto 302",
    "email": "maria@example.com",
    "valor_total": "4.850,32",
    "forma_pagamento": "8 parcelas mensais",
}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "X-Request-Id" in response.headers


def test_list_documents(client):
    response = client.get("/api/documentos")
    assert response.status_code == 200
    ids = {d["id"] for d in response.json()}
    assert {"acordo_extra", "tres_devedores"} <= ids
    assert all(set(d) == {"id", "nome"} for d in response.json())


def test_list_condominiums(client):
    response = client.get("/api/condominios")
    assert response.status_code == 200
    assert {c["id"]: c["nome"] for c in response.json()}["1"] == "Condomínio Jardim das Acácias"


def test_list_layouts(client):
    response = client.get("/api/layouts")
    assert response.status_code == 200
    ids = [layout["layout_id"] for layout in response.json()]
    assert "table_flow" in ids and "native" in ids


def test_generate_term_returns_pdf_download(client, fake_renderer):
    response = client.post(
        "/api/gerar-termo",
        data=FORM,
        files={"imgCotas": ("cotas.png", PNG_1PX, "image/png")},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/pdf")
    assert response.headers["content-disposition"] == 'attachment; filename="termo-gerado.pdf"'
    assert response.content.startswith(b"%PDF")
    html = fake_renderer.documents[0].html
    assert "Maria Silva" in html
    assert "R$ 4.850,32" in html
    assert "data:image/png;base64," in html
    assert "{{IMAGEM_CALCULO}}" not in html


def test_generate_term_selects_layout(client, fake_renderer):
    response = client.post("/api/gerar-termo", data={**FORM, "layout": "native"})
    assert response.status_code == 200
    doc = fake_renderer.documents[0]
    assert doc.strategy.value == "native_header_footer"
    assert doc.pdf_options["margin"]["top"] == "5cm"


def test_generate_term_unknown_layout_400(client, fake_renderer):
    response = client.post("/api/gerar-termo", data={**FORM, "layout": "landscape"})
    assert response.status_code == 400
    assert "landscape" in response.json()["detail"]
    assert fake_renderer.documents == []


def test_generate_term_unknown_condominium_404(client, fake_renderer):
    response = client.post("/api/gerar-termo", data={**FORM, "condominioId": "999"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Condomínio não encontrado."
    assert fake_renderer.documents == []


def test_generate_term_unknown_document_404(client, fake_renderer):
    response = client.post("/api/gerar-termo", data={**FORM, "documentoId": "outro"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Documento não encontrado."
    assert fake_renderer.documents == []


def test_generate_term_missing_template_file_500(client, fake_renderer):
    response = client.post("/api/gerar-termo", data={**FORM, "documentoId": "sem_arquivo"})
    assert response.status_code == 500
    assert "nao_existe.html" in response.json()["detail"]


def test_generate_term_attachment_too_large_413(client, fake_renderer, monkeypatch):
    monkeypatch.setattr(embedding, "MAX_ATTACHMENT_BYTES", 16)
    response = client.post(
        "/api/gerar-termo",
        data=FORM,
        files={"imgCalculo": ("calculo.png", PNG_1PX, "image/png")},
    )
    assert response.status_code == 413
    assert fake_renderer.documents == []


def test_generate_term_rejects_non_image_upload(client, fake_renderer):
    response = client.post(
        "/api/gerar-termo",
        data=FORM,
        files={"imgCotas": ("planilha.csv", b"a,b\n1,2\n", "text/csv")},
    )
    assert response.status_code == 400


def test_generate_term_render_failure_500(client, fake_renderer):
    fake_renderer.error = RenderError("PDF generation failed: Target closed")
    response = client.post("/api/gerar-termo", data=FORM)
    assert response.status_code == 500
    assert "Target closed" in response.json()["detail"]


def test_preview_returns_html(client):
    response = client.post(
        "/api/gerar-termo/preview",
        data=FORM,
        files={"imgCalculo": ("calculo.jpg", PNG_1PX, "application/octet-stream")},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.headers["X-Term-Layout"]
    html = response.text
    assert "Maria Silva" in html
    assert "data:image/jpeg;base64," in html
    assert "{{" not in html


def test_preview_missing_fields_never_render_none(client):
    response = client.post("/api/gerar-termo/preview", data={"condominioId": "2"})
    assert response.status_code == 200
    assert "None" not in response.text
    assert "undefined" not in response.text
    assert "R$ 0,00" in response.text
