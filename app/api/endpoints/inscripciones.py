"""Endpoints de inscripciones a examen (alta desde el formulario y panel administrativo)."""
import logging
from io import BytesIO
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import StreamingResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.inscripcion import (
    ErrorValidacion,
    InscripcionCreada,
    InscripcionCreate,
    InscripcionesResumen,
    InscripcionListItem,
)
from app.services import consulta_service, exportacion_service
from app.services.inscripcion_service import registrar_inscripcion

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inscripciones", tags=["inscripciones"])


async def _listar(db: AsyncSession) -> list[dict]:
    try:
        return await consulta_service.listar_inscripciones(db)
    except SQLAlchemyError:
        logger.exception("Error getInscripciones")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al obtener inscripciones",
        )


@router.post(
    "",
    response_model=InscripcionCreada,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar inscripción",
    description=(
        "Crea o actualiza el estudiante por DNI e inserta una inscripción por materia "
        "seleccionada, todo en una única transacción."
    ),
    responses={
        400: {"model": ErrorValidacion, "description": "Datos inválidos o materia fuera de la carrera/año"},
        500: {"description": "Error interno del servidor"},
    },
)
async def crear_inscripcion(
    body: InscripcionCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    maximo = request.app.state.settings.max_materias_por_inscripcion
    if len(body.inscripciones) > maximo:
        raise RequestValidationError([
            {
                "type": "too_long",
                "loc": ("body", "inscripciones"),
                "msg": f"Se pueden seleccionar como máximo {maximo} materias",
                "input": len(body.inscripciones),
            }
        ])

    cantidad = await registrar_inscripcion(db, body)
    return InscripcionCreada(cantidad=cantidad)


@router.get(
    "",
    response_model=list[InscripcionListItem],
    summary="Listar inscripciones",
    description="Todas las inscripciones (sin paginar), la más reciente primero. El panel filtra del lado del cliente.",
)
async def get_inscripciones(db: AsyncSession = Depends(get_db)):
    return await _listar(db)


@router.get(
    "/resumen",
    response_model=InscripcionesResumen,
    summary="Resumen para el panel",
)
async def get_resumen(db: AsyncSession = Depends(get_db)):
    return InscripcionesResumen(**exportacion_service.resumir(await _listar(db)))


@router.get(
    "/exportar",
    summary="Exportar inscripciones a Excel",
    description="Descarga un .xlsx con las mismas columnas y filtros que el panel administrativo.",
)
async def exportar_inscripciones(
    db: AsyncSession = Depends(get_db),
    buscar: Annotated[str | None, Query(description="Apellido, nombre o DNI")] = None,
    carrera: Annotated[str | None, Query(description="Nombre exacto de la carrera")] = None,
    anio: Annotated[str | None, Query(description="Nombre exacto del año de cursada")] = None,
):
    filas = exportacion_service.filtrar_inscripciones(await _listar(db), buscar, carrera, anio)
    contenido = exportacion_service.exportar_excel(filas)
    filename = exportacion_service.nombre_archivo()
    return StreamingResponse(
        BytesIO(contenido),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
