"""Modelo Año de cursada (estructura académica)."""
from typing import TYPE_CHECKING

from sqlalchemy import Identity, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.subject import Materia


class AnioCursada(Base):
    """Año de cursada: 1er Año, 2do Año, 3er Año; `orden` define la secuencia."""

    __tablename__ = "anos_cursada"

    id_anio: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    nombre: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    orden: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)

    materias: Mapped[list["Materia"]] = relationship("Materia", back_populates="anio")
