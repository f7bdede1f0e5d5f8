"""Add backend to path so tests can use direct imports (from models import ...), plus shared DB/renderer fixtures."""
import os
import shutil
import sys

_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.models import Condominio, Documento
from db.session import Base, DB_SCHEMA
from documents import assets
from models import RenderedArtifact

PNG_1PX = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108040000"
    "00b51c0c020000000b4944415478da63fcff1f0003030200eed8a974"
    "0000000049454e44ae426082"
)


@pytest.fixture
def templates_dir(tmp_path, monkeypatch):
    """Temp templates dir seeded with the shipped templates; tests may add more files."""
    d = tmp_path / "templates"
    shutil.copytree(os.path.join(_backend_dir, "templates"), d)
    (d / "tres_devedores.html").write_text(
        "<p>{{devedor}}</p><p>{{devedor}}</p><p>{{devedor}} - tel: {{telefone}}</p>",
        encoding="utf-8",
    )
    (d / "com_lacuna.html").write_text(
        "<p>{{devedor}} deve {{valor_total}} ({{multa}})</p>",
        encoding="utf-8",
    )
    monkeypatch.setattr(assets, "TEMPLATES_DIR", d)
    return d


@pytest.fixture
def db_session(templates_dir):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _attach_schema(dbapi_conn, _record):
        dbapi_conn.execute(f"ATTACH DATABASE ':memory:' AS {DB_SCHEMA}")

    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    db = Session()
    db.add_all([
        Documento(id="acordo_extra", nome="Acordo Extrajudicial", templatefile="acordo_extra.html"),
        Documento(id="tres_devedores", nome="Teste repetição", templatefile="tres_devedores.html"),
        Documento(id="com_lacuna", nome="Teste lacuna", templatefile="com_lacuna.html"),
        Documento(id="sem_arquivo", nome="Arquivo ausente", templatefile="nao_existe.html"),
        Condominio(
            id="1",
            nome="Condomínio Jardim das Acácias",
            cnpj="12.345.678/0001-90",
            endereco="Rua das Acácias, 250",
            bairro="Jardim Botânico",
            cidade="Curitiba",
            sindico="Carlos Eduardo Lima",
        ),
        Condominio(id="2", nome="Edifício Sem Cadastro"),
    ])
    db.commit()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


class FakeRenderer:
    """Stands in for render_pdf; records every composed document it receives."""

    def __init__(self, error: Exception | None = None):
        self.documents = []
        self.error = error

    def __call__(self, document, filename="termo-gerado.pdf"):
        self.documents.append(document)
        if self.error is not None:
            raise self.error
        return RenderedArtifact(content=b"%PDF-1.7\n%fake\n" + b"0" * 200, filename=filename)


@pytest.fixture
def fake_renderer(monkeypatch):
    from documents import term_builder

    renderer = FakeRenderer()
    monkeypatch.setattr(term_builder, "render_pdf", renderer)
    return renderer


@pytest.fixture
def client(db_session):
    from fastapi.testclient import TestClient

    from db.session import get_db
    from main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
