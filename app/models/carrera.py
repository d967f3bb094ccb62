"""Modelo Carrera (tecnicatura ofrecida)."""
from typing import TYPE_CHECKING

from sqlalchemy import Identity, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.subject import Materia


class Carrera(Base):
    """Carrera: ej. Tecnicatura Superior en Logística."""

    __tablename__ = "carreras"

    id_carrera: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    nombre: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    descripcion: Mapped[str | None] = mapped_column(Text, nullable=True)

    materias: Mapped[list["Materia"]] = relationship("Materia", back_populates="carrera")
