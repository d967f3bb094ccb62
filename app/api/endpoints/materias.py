"""Endpoints de materias (filtradas por carrera y año de cursada)."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.catalogo import MateriaItem
from app.services import consulta_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/materias", tags=["materias"])


@router.get(
    "",
    response_model=list[MateriaItem],
    summary="Listar materias de una carrera y año",
    description="Ambos parámetros son obligatorios; si falta alguno se responde 400.",
    responses={
        400: {"description": "Falta id_carrera o id_anio"},
    },
)
async def get_materias(
    db: AsyncSession = Depends(get_db),
    id_carrera: Annotated[int | None, Query(description="ID de la carrera")] = None,
    id_anio: Annotated[int | None, Query(description="ID del año de cursada")] = None,
):
    if id_carrera is None or id_anio is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Faltan parámetros id_carrera o id_anio",
        )

    try:
        materias = await consulta_service.listar_materias(db, id_carrera, id_anio)
    except SQLAlchemyError:
        logger.exception("Error getMaterias")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al obtener materias",
        )
    return [
        MateriaItem(
            id_materia=m.id_materia,
            nombre=m.nombre,
            id_carrera=m.id_carrera,
            id_anio=m.id_anio,
        )
        for m in materias
    ]
