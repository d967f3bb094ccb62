"""Routers de la API."""
from fastapi import APIRouter

from app.api.endpoints import carreras, inscripciones, materias

router = APIRouter()
router.include_router(carreras.router)
router.include_router(materias.router)
router.include_router(inscripciones.router)
