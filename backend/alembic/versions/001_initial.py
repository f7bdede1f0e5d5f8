"""Initial schema: termosign.documentos, termosign.condominios

Revision ID: 001
Revises:
Create Date: 2026-10-01 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = "termosign"


def upgrade() -> None:
    op.execute(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}")

    op.create_table(
        "documentos",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("nome", sa.String(), nullable=False),
        sa.Column("templatefile", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        schema=SCHEMA,
    )

    op.create_table(
        "condominios",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("nome", sa.String(), nullable=False),
        sa.Column("cnpj", sa.String(), nullable=True),
        sa.Column("endereco", sa.String(), nullable=True),
        sa.Column("bairro", sa.String(), nullable=True),
        sa.Column("cidade", sa.String(), nullable=True),
        sa.Column("sindico", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        schema=SCHEMA,
    )
    op.create_index("ix_condominios_nome", "condominios", ["nome"], schema=SCHEMA)

    op.bulk_insert(
        sa.table(
            "documentos",
            sa.column("id", sa.String()),
            sa.column("nome", sa.String()),
            sa.column("templatefile", sa.String()),
            schema=SCHEMA,
        ),
        [{"id": "acordo_extra", "nome": "Acordo Extrajudicial", "templatefile": "acordo_extra.html"}],
    )


def downgrade() -> None:
    op.drop_index("ix_condominios_nome", table_name="condominios", schema=SCHEMA)
    op.drop_table("condominios", schema=SCHEMA)
    op.drop_table("documentos", schema=SCHEMA)
