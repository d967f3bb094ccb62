"""Alta de inscripciones: upsert del estudiante por DNI + una fila por materia."""
import logging

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import EstudianteNoResueltoError, RestriccionViolada
from app.models import Estudiante, InscripcionExamen
from app.schemas.inscripcion import AlumnoIn, InscripcionCreate

logger = logging.getLogger(__name__)


def _upsert_estudiante(dialecto: str, alumno: AlumnoIn):
    """INSERT ... ON CONFLICT (dni) DO UPDATE: el último envío pisa apellido, nombre y email."""
    insert = postgresql.insert if dialecto == "postgresql" else sqlite.insert
    stmt = insert(Estudiante).values(
        dni=alumno.dni,
        apellido=alumno.apellido,
        nombre=alumno.nombre,
        email=alumno.email,
    )
    return stmt.on_conflict_do_update(
        index_elements=["dni"],
        set_={
            "apellido": stmt.excluded.apellido,
            "nombre": stmt.excluded.nombre,
            "email": stmt.excluded.email,
        },
    )


async def registrar_inscripcion(db: AsyncSession, datos: InscripcionCreate) -> int:
    """Persiste el estudiante y sus inscripciones en una única transacción.

    Si cualquier inserción falla no queda nada escrito, ni siquiera el upsert
    del estudiante. Devuelve la cantidad de inscripciones creadas.
    """
    alumno, academico = datos.alumno, datos.academico
    dialecto = db.get_bind().dialect.name

    try:
        await db.execute(_upsert_estudiante(dialecto, alumno))

        res = await db.execute(
            select(Estudiante.id_estudiante).where(Estudiante.dni == alumno.dni)
        )
        id_estudiante = res.scalar_one_or_none()
        if id_estudiante is None:
            raise EstudianteNoResueltoError()

        db.add_all(
            InscripcionExamen(
                id_estudiante=id_estudiante,
                id_carrera=academico.id_carrera,
                id_anio=academico.id_anio,
                id_materia=sel.id_materia,
                cohorte=academico.cohorte,
                condicion=sel.condicion,
            )
            for sel in datos.inscripciones
        )
        await db.flush()
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning("Inscripción rechazada por restricción (dni=%s): %s", alumno.dni, e.orig)
        raise RestriccionViolada(
            "Alguna materia no corresponde a la carrera y año seleccionados"
        ) from e
    except Exception:
        await db.rollback()
        raise

    cantidad = len(datos.inscripciones)
    logger.info(
        "Inscripción registrada: dni=%s carrera=%s anio=%s materias=%d",
        alumno.dni, academico.id_carrera, academico.id_anio, cantidad,
    )
    return cantidad
