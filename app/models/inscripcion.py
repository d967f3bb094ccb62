"""Modelo Inscripción a examen (estudiante–materia–cohorte)."""
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    DateTime,
    ForeignKey,
    ForeignKeyConstraint,
    Identity,
    Integer,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.student import Estudiante


class Condicion:
    """Valores permitidos para la condición de examen."""
    REGULAR = "regular"
    LIBRE = "libre"

    TODAS = (REGULAR, LIBRE)


class InscripcionExamen(Base):
    """Inscripción inmutable: una fila por materia elegida en un envío."""

    __tablename__ = "inscripciones_examenes"
    __table_args__ = (
        ForeignKeyConstraint(
            ["id_carrera", "id_anio", "id_materia"],
            ["materias.id_carrera", "materias.id_anio", "materias.id_materia"],
            name="fk_inscripciones_materia_carrera_anio",
        ),
        CheckConstraint(
            "condicion IN (" + ", ".join(f"'{c}'" for c in Condicion.TODAS) + ")",
            name="ck_inscripciones_condicion",
        ),
        CheckConstraint("cohorte >= 2000", name="ck_inscripciones_cohorte"),
    )

    id_inscripcion: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    id_estudiante: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("estudiantes.id_estudiante"), nullable=False
    )
    id_carrera: Mapped[int] = mapped_column(BigInteger, nullable=False)
    id_anio: Mapped[int] = mapped_column(BigInteger, nullable=False)
    id_materia: Mapped[int] = mapped_column(BigInteger, nullable=False)
    cohorte: Mapped[int] = mapped_column(Integer, nullable=False)
    condicion: Mapped[str] = mapped_column(Text, nullable=False)
    fecha_inscripcion: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    estudiante: Mapped["Estudiante"] = relationship("Estudiante", back_populates="inscripciones")
