"""Esquemas del catálogo de referencia (carreras, años, materias)."""
from pydantic import BaseModel, Field


class CarreraItem(BaseModel):
    """Carrera: id, nombre y descripción."""

    id_carrera: int = Field(description="ID de la carrera")
    nombre: str = Field(description="Nombre de la carrera (único)")
    descripcion: str | None = Field(default=None, description="Nombre completo de la tecnicatura")


class AnioItem(BaseModel):
    """Año de cursada con su orden."""

    id_anio: int
    nombre: str
    orden: int = Field(description="Posición del año (1, 2, 3)")


class MateriaItem(BaseModel):
    """Materia de una carrera y año de cursada."""

    id_materia: int = Field(description="ID de la materia")
    nombre: str = Field(description="Nombre de la materia")
    id_carrera: int = Field(description="ID de la carrera a la que pertenece")
    id_anio: int = Field(description="ID del año de cursada al que pertenece")
