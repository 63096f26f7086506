"""Initial schema — aeroporto table.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "aeroporto",
        sa.Column("id_aeroporto", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("nome_aeroporto", sa.String(255), nullable=False),
        sa.Column("codigo_iata", sa.String(3), nullable=False),
        sa.Column("cidade", sa.String(100), nullable=False),
        sa.Column("codigo_pais_iso", sa.String(2), nullable=False),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("altitude", sa.Float, nullable=False),
        sa.UniqueConstraint("codigo_iata", name="uq_aeroporto_codigo_iata"),
    )


def downgrade() -> None:
    op.drop_table("aeroporto")
