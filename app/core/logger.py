"""Configuración del logger raíz de la aplicación."""
import logging
import sys

FORMATO = "%(asctime)s %(levelname)-5s [inscripciones] %(name)s: %(message)s"


def configurar_logging(nivel: str = "INFO") -> None:
    """Un único handler a stdout para el paquete `app`."""
    logger = logging.getLogger("app")
    logger.setLevel(nivel.upper())

    if any(getattr(h, "_inscripciones", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMATO, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._inscripciones = True  # marca para no duplicar handlers
    logger.addHandler(handler)
