"""Airport ORM — persists one airport per IATA code.

Invariants:
    - id is an autoincrement integer primary key (server-assigned)
    - iata_code is UNIQUE and non-nullable: the authoritative duplicate guard
    - iata_code and country_code are stored upper-cased (normalized before insert)
    - All columns are non-nullable

Design Decisions:
    - Portuguese column names (nome_aeroporto, codigo_iata, ...) kept from the
      existing "aeroporto" schema; Python attributes are English
    - Float for coordinates and altitude: no range validation at DB level
"""

from sqlalchemy import Float, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from aeroportos.db.base import Base

IATA_CODE_CONSTRAINT = "uq_aeroporto_codigo_iata"


class Airport(Base):
    """Airport entity identified by its IATA code."""
    __tablename__ = "aeroporto"
    __table_args__ = (
        UniqueConstraint("codigo_iata", name=IATA_CODE_CONSTRAINT),
    )

    id: Mapped[int] = mapped_column(
        "id_aeroporto", Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        "nome_aeroporto", String(255), nullable=False,
    )
    iata_code: Mapped[str] = mapped_column(
        "codigo_iata", String(3), nullable=False,
    )
    city: Mapped[str] = mapped_column("cidade", String(100), nullable=False)
    country_code: Mapped[str] = mapped_column(
        "codigo_pais_iso", String(2), nullable=False,
    )
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    altitude: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Airport {self.iata_code} id={self.id}>"
