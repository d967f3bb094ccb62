"""Esquemas para inscripciones a examen (formulario, listado y resumen)."""
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.inscripcion import Condicion


class AlumnoIn(BaseModel):
    """Datos personales (paso 1 del formulario)."""

    dni: str = Field(min_length=6, description="Documento Nacional de Identidad")
    apellido: str = Field(min_length=2)
    nombre: str = Field(min_length=2)
    email: EmailStr


class AcademicoIn(BaseModel):
    """Carrera, año de cursada y cohorte (pasos 2 y 3)."""

    id_carrera: int
    id_anio: int
    cohorte: int = Field(ge=2000, description="Año de ingreso (2000 al año en curso)")

    @field_validator("cohorte")
    @classmethod
    def cohorte_no_futura(cls, v: int) -> int:
        actual = date.today().year
        if v > actual:
            raise ValueError(f"La cohorte no puede ser posterior a {actual}")
        return v


class MateriaSeleccionada(BaseModel):
    """Materia elegida con su condición de examen (paso 4)."""

    id_materia: int
    condicion: Literal[Condicion.REGULAR, Condicion.LIBRE]


class InscripcionCreate(BaseModel):
    """Request completo de POST /inscripciones."""

    alumno: AlumnoIn
    academico: AcademicoIn
    # el máximo depende de la configuración: lo controla el endpoint
    inscripciones: list[MateriaSeleccionada] = Field(min_length=1)


class InscripcionCreada(BaseModel):
    """Respuesta 201 de POST /inscripciones."""

    message: str = "Inscripción realizada con éxito"
    cantidad: int = Field(description="Cantidad de inscripciones creadas")


class InscripcionListItem(BaseModel):
    """Fila del panel administrativo (inscripción con estudiante, carrera, año y materia)."""

    id_inscripcion: int
    fecha_inscripcion: datetime
    cohorte: int
    condicion: str
    dni: str
    apellido: str
    nombre_alumno: str
    email: str
    carrera: str
    anio_cursada: str
    materia: str


class InscripcionesResumen(BaseModel):
    """Tarjetas del panel: total de inscripciones y alumnos únicos."""

    total_inscripciones: int = 0
    alumnos_unicos: int = 0


class ErrorCampo(BaseModel):
    campo: str
    mensaje: str


class ErrorValidacion(BaseModel):
    """Cuerpo 400 cuando el formulario no pasa la validación."""

    error: str = "Datos de inscripción inválidos"
    errores: list[ErrorCampo] = Field(default_factory=list)
