"""Endpoints de carreras y años de cursada (catálogo de referencia)."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.catalogo import AnioItem, CarreraItem
from app.services import consulta_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["catalogo"])


@router.get(
    "/carreras",
    response_model=list[CarreraItem],
    summary="Listar carreras",
    description="Todas las carreras en el orden en que fueron cargadas.",
)
async def get_carreras(db: AsyncSession = Depends(get_db)):
    try:
        carreras = await consulta_service.listar_carreras(db)
    except SQLAlchemyError:
        logger.exception("Error getCarreras")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al obtener carreras",
        )
    return [
        CarreraItem(id_carrera=c.id_carrera, nombre=c.nombre, descripcion=c.descripcion)
        for c in carreras
    ]


@router.get(
    "/anios",
    response_model=list[AnioItem],
    summary="Listar años de cursada",
    description="Años de cursada ordenados por `orden` ascendente.",
)
async def get_anios(db: AsyncSession = Depends(get_db)):
    try:
        anios = await consulta_service.listar_anios(db)
    except SQLAlchemyError:
        logger.exception("Error getAnios")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al obtener años",
        )
    return [AnioItem(id_anio=a.id_anio, nombre=a.nombre, orden=a.orden) for a in anios]
