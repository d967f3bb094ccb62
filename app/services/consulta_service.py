"""Consultas de solo lectura para el formulario y el panel administrativo."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import AnioCursada, Carrera, Estudiante, InscripcionExamen, Materia


async def listar_carreras(db: AsyncSession) -> list[Carrera]:
    result = await db.execute(select(Carrera).order_by(Carrera.id_carrera))
    return list(result.scalars().all())


async def listar_anios(db: AsyncSession) -> list[AnioCursada]:
    result = await db.execute(select(AnioCursada).order_by(AnioCursada.orden.asc()))
    return list(result.scalars().all())


async def listar_materias(db: AsyncSession, id_carrera: int, id_anio: int) -> list[Materia]:
    result = await db.execute(
        select(Materia)
        .where(Materia.id_carrera == id_carrera, Materia.id_anio == id_anio)
        .order_by(Materia.id_materia)
    )
    return list(result.scalars().all())


async def listar_inscripciones(db: AsyncSession) -> list[dict]:
    """Todas las inscripciones con estudiante, carrera, año y materia; la más reciente primero."""
    q = (
        select(
            InscripcionExamen.id_inscripcion,
            InscripcionExamen.fecha_inscripcion,
            InscripcionExamen.cohorte,
            InscripcionExamen.condicion,
            Estudiante.dni,
            Estudiante.apellido,
            Estudiante.nombre.label("nombre_alumno"),
            Estudiante.email,
            Carrera.nombre.label("carrera"),
            AnioCursada.nombre.label("anio_cursada"),
            Materia.nombre.label("materia"),
        )
        .join(Estudiante, InscripcionExamen.id_estudiante == Estudiante.id_estudiante)
        .join(Carrera, InscripcionExamen.id_carrera == Carrera.id_carrera)
        .join(AnioCursada, InscripcionExamen.id_anio == AnioCursada.id_anio)
        .join(Materia, InscripcionExamen.id_materia == Materia.id_materia)
        # empate de timestamp (resolución de segundos): desempata el ID
        .order_by(
            InscripcionExamen.fecha_inscripcion.desc(),
            InscripcionExamen.id_inscripcion.desc(),
        )
    )
    result = await db.execute(q)
    return [dict(fila) for fila in result.mappings().all()]
