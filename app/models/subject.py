"""Modelo Materia."""
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Identity, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.carrera import Carrera
    from app.models.anio_cursada import AnioCursada


class Materia(Base):
    """Materia del plan: pertenece a exactamente una carrera y un año de cursada."""

    __tablename__ = "materias"
    __table_args__ = (
        UniqueConstraint(
            "nombre", "id_carrera", "id_anio",
            name="uq_materias_nombre_carrera_anio"
        ),
        # Destino de la FK compuesta de inscripciones_examenes
        UniqueConstraint(
            "id_carrera", "id_anio", "id_materia",
            name="uq_materias_carrera_anio_id"
        ),
    )

    id_materia: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    nombre: Mapped[str] = mapped_column(Text, nullable=False)
    id_carrera: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("carreras.id_carrera"), nullable=False
    )
    id_anio: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("anos_cursada.id_anio"), nullable=False
    )

    carrera: Mapped["Carrera"] = relationship("Carrera", back_populates="materias")
    anio: Mapped["AnioCursada"] = relationship("AnioCursada", back_populates="materias")
