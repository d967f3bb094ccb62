"""Carga idempotente del catálogo (carreras, años de cursada y materias)."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.data.catalogo import ANIOS, CARRERAS, MATERIAS
from app.models import AnioCursada, Carrera, Materia

logger = logging.getLogger(__name__)


async def sembrar_catalogo(db: AsyncSession) -> dict[str, int]:
    """Inserta lo que falte del catálogo, buscando por clave natural (nombre).

    Las materias se vinculan por nombre de carrera y de año, no por IDs
    supuestos. Devuelve la cantidad de filas creadas por tabla.
    """
    creados = {"carreras": 0, "anios": 0, "materias": 0}

    res = await db.execute(select(Carrera))
    carreras_cache: dict[str, Carrera] = {c.nombre: c for c in res.scalars().all()}
    for nombre, descripcion in CARRERAS:
        if nombre not in carreras_cache:
            carrera = Carrera(nombre=nombre, descripcion=descripcion)
            db.add(carrera)
            await db.flush()
            carreras_cache[nombre] = carrera
            creados["carreras"] += 1

    res = await db.execute(select(AnioCursada))
    anios_cache: dict[str, AnioCursada] = {a.nombre: a for a in res.scalars().all()}
    for nombre, orden in ANIOS:
        if nombre not in anios_cache:
            anio = AnioCursada(nombre=nombre, orden=orden)
            db.add(anio)
            await db.flush()
            anios_cache[nombre] = anio
            creados["anios"] += 1

    res = await db.execute(select(Materia.nombre, Materia.id_carrera, Materia.id_anio))
    existentes = {tuple(fila) for fila in res.all()}
    for nombre_carrera, por_anio in MATERIAS.items():
        carrera = carreras_cache[nombre_carrera]
        for nombre_anio, materias in por_anio.items():
            anio = anios_cache[nombre_anio]
            for nombre in materias:
                if (nombre, carrera.id_carrera, anio.id_anio) in existentes:
                    continue
                db.add(Materia(nombre=nombre, id_carrera=carrera.id_carrera, id_anio=anio.id_anio))
                # flush por fila: el ID sigue el orden del catálogo
                await db.flush()
                creados["materias"] += 1

    await db.commit()
    if any(creados.values()):
        logger.info(
            "Catálogo sembrado: %d carreras, %d años, %d materias",
            creados["carreras"], creados["anios"], creados["materias"],
        )
    else:
        logger.info("El catálogo ya estaba cargado")
    return creados
