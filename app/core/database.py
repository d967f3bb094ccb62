"""Conexión asíncrona a la base de datos con SQLAlchemy 2.0."""
import logging

from fastapi import Request
from sqlalchemy import BigInteger, Integer, event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)

# SQLite solo autoincrementa columnas INTEGER PRIMARY KEY
BigIntPK = BigInteger().with_variant(Integer, "sqlite")


class Base(DeclarativeBase):
    """Base para todos los modelos SQLAlchemy."""

    pass


def _activar_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Handle del almacenamiento: engine y fábrica de sesiones de un proceso.

    Se construye explícitamente en `create_app` (o en los scripts) y se
    inyecta a cada request a través de `app.state.database`.
    """

    def __init__(self, url: str, auth_token: str | None = None, echo: bool = False) -> None:
        url_obj = make_url(url)
        es_sqlite = url_obj.get_backend_name() == "sqlite"

        if auth_token:
            if es_sqlite:
                logger.warning("DATABASE_AUTH_TOKEN ignorado: la URL apunta a SQLite local")
            else:
                url_obj = url_obj.set(password=auth_token)
        else:
            logger.info("Sin DATABASE_AUTH_TOKEN: conexión anónima/local a %s", url_obj.render_as_string(hide_password=True))

        opciones: dict = {"echo": echo, "pool_pre_ping": True}
        if not es_sqlite:
            opciones.update(pool_size=5, max_overflow=10)

        self.url = url_obj
        self.engine = create_async_engine(url_obj, **opciones)
        if es_sqlite:
            event.listen(self.engine.sync_engine, "connect", _activar_foreign_keys)

        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    async def init(self) -> None:
        """Crea las tablas si no existen."""
        # Registra los modelos en Base.metadata
        import app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        import app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request):
    """Dependencia para obtener una sesión de base de datos por request."""
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
