"""Modelos SQLAlchemy (tablas de la base de datos)."""
from app.models.carrera import Carrera
from app.models.anio_cursada import AnioCursada
from app.models.subject import Materia
from app.models.student import Estudiante
from app.models.inscripcion import Condicion, InscripcionExamen

__all__ = [
    "Carrera",
    "AnioCursada",
    "Materia",
    "Estudiante",
    "Condicion",
    "InscripcionExamen",
]
