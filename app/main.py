"""Punto de entrada de la aplicación FastAPI."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import router as api_router
from app.core.config import Settings, settings
from app.core.database import Database
from app.core.errors import InscripcionError
from app.core.logger import configurar_logging
from app.services.catalogo_service import sembrar_catalogo

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {
        "name": "catalogo",
        "description": "Carreras y años de cursada para los pasos 2 y 3 del formulario.",
    },
    {
        "name": "materias",
        "description": "Materias de una carrera y año (paso 4 del formulario).",
    },
    {
        "name": "inscripciones",
        "description": "Alta de inscripciones a examen y listado/exportación para el panel administrativo.",
    },
    {
        "name": "salud",
        "description": "Comprobación del estado del servicio.",
    },
]


def _campo(loc: tuple) -> str:
    partes = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(partes) or "body"


def registrar_manejadores(app: FastAPI) -> None:
    """Convierte todos los errores en un cuerpo JSON `{"error": ...}`."""

    @app.exception_handler(RequestValidationError)
    async def validacion_handler(request: Request, exc: RequestValidationError):
        errores = [
            {"campo": _campo(tuple(e.get("loc", ()))), "mensaje": e.get("msg", "Valor inválido")}
            for e in exc.errors()
        ]
        if request.method == "POST" and request.url.path.endswith("/inscripciones"):
            mensaje = "Datos de inscripción inválidos"
        else:
            mensaje = "Parámetros inválidos"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": mensaje, "errores": errores},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(InscripcionError)
    async def inscripcion_handler(request: Request, exc: InscripcionError):
        if exc.status_code >= 500:
            logger.error("Error procesando %s %s: %s", request.method, request.url.path, exc.mensaje)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.mensaje})

    @app.exception_handler(SQLAlchemyError)
    async def base_datos_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Error de base de datos en %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Error interno del servidor"},
        )


def create_app(config: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Construye la aplicación con su propio handle de base de datos."""
    config = config or settings
    configurar_logging(config.log_level)
    if database is None:
        database = Database(config.database_url, config.database_auth_token, echo=config.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Gestiona el ciclo de vida: inicio y cierre de la aplicación."""
        await database.init()
        if config.seed_on_startup:
            try:
                async with database.session_factory() as session:
                    await sembrar_catalogo(session)
            except SQLAlchemyError:
                logger.exception("No se pudo sembrar el catálogo; se continúa con los datos existentes")
        yield
        await database.dispose()

    app = FastAPI(
        title=config.app_name,
        description="""
API REST del **formulario de inscripción a exámenes**.

- El formulario consulta carreras, años y materias, y envía una única inscripción al final.
- El panel administrativo lista todas las inscripciones (la más reciente primero) y puede exportarlas a Excel.
""",
        version="1.0.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.settings = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    registrar_manejadores(app)
    app.include_router(api_router, prefix=config.api_prefix)

    @app.get("/", tags=["salud"], summary="Raíz del servicio")
    async def root():
        return {"message": config.app_name, "docs": "/docs"}

    @app.get(
        "/health",
        tags=["salud"],
        summary="Estado del servicio",
        response_description="Indica que la API está en ejecución",
    )
    async def health_check():
        """Comprueba que el servicio está activo."""
        return {"status": "ok", "message": "Servicio en ejecución"}

    return app


app = create_app()
