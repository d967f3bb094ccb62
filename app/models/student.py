"""Modelo Estudiante."""
from typing import TYPE_CHECKING

from sqlalchemy import Identity, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.inscripcion import InscripcionExamen


class Estudiante(Base):
    """Estudiante identificado por DNI; cada envío del formulario refresca sus datos."""

    __tablename__ = "estudiantes"

    id_estudiante: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    dni: Mapped[str] = mapped_column(Text, nullable=False, unique=True, index=True)
    apellido: Mapped[str] = mapped_column(Text, nullable=False)
    nombre: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)

    inscripciones: Mapped[list["InscripcionExamen"]] = relationship(
        "InscripcionExamen", back_populates="estudiante"
    )
