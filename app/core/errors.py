"""Errores de dominio convertidos a respuestas JSON en el borde HTTP."""
from fastapi import status


class InscripcionError(Exception):
    """Error genérico al procesar una inscripción (500)."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    mensaje = "Error interno del servidor"

    def __init__(self, mensaje: str | None = None) -> None:
        if mensaje is not None:
            self.mensaje = mensaje
        super().__init__(self.mensaje)


class RestriccionViolada(InscripcionError):
    """El almacenamiento rechazó la escritura (FK, UNIQUE o CHECK)."""

    status_code = status.HTTP_400_BAD_REQUEST
    mensaje = "Los datos no respetan las restricciones del catálogo"


class EstudianteNoResueltoError(InscripcionError):
    """Tras el upsert no se encontró el estudiante por DNI."""

    mensaje = "Error al recuperar estudiante"
