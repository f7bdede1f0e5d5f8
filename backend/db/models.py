"""SQLAlchemy models for the termosign schema (read-only lookups). Use Alembic for migrations."""
from __future__ import annotations

from sqlalchemy import Column, String

from .session import Base, DB_SCHEMA


class Documento(Base):
    __tablename__ = "documentos"
    __table_args__ = {"schema": DB_SCHEMA}

    id = Column(String, primary_key=True)
    nome = Column(String, nullable=False)
    templatefile = Column("templatefile", String, nullable=False)


class Condominio(Base):
    __tablename__ = "condominios"
    __table_args__ = {"schema": DB_SCHEMA}

    id = Column(String, primary_key=True)
    nome = Column(String, nullable=False)
    cnpj = Column(String, nullable=True)
    endereco = Column(String, nullable=True)
    bairro = Column(String, nullable=True)
    cidade = Column(String, nullable=True)
    sindico = Column(String, nullable=True)
