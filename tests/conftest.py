import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from app.core.config import Settings
from app.core.database import Database
from app.main import create_app
from app.services.catalogo_service import sembrar_catalogo


@pytest.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'inscripciones.db'}")
    await db.init()
    async with db.session_factory() as session:
        await sembrar_catalogo(session)
    yield db
    await db.dispose()


@pytest.fixture
def app(database):
    config = Settings(
        database_url=database.url.render_as_string(hide_password=False),
        seed_on_startup=False,
    )
    return create_app(config, database)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def contar(database):
    """Cuenta filas de un modelo con una sesión nueva."""

    async def _contar(modelo, *condiciones) -> int:
        async with database.session_factory() as session:
            q = select(func.count()).select_from(modelo)
            if condiciones:
                q = q.where(*condiciones)
            return (await session.execute(q)).scalar_one()

    return _contar


def _payload(
    dni="12345678",
    apellido="Gómez",
    nombre="Ana",
    email="ana@x.com",
    id_carrera=1,
    id_anio=1,
    cohorte=2024,
    materias=((3, "regular"),),
):
    return {
        "alumno": {"dni": dni, "apellido": apellido, "nombre": nombre, "email": email},
        "academico": {"id_carrera": id_carrera, "id_anio": id_anio, "cohorte": cohorte},
        "inscripciones": [{"id_materia": m, "condicion": c} for m, c in materias],
    }


@pytest.fixture
def payload():
    """Arma el cuerpo de POST /inscripciones (por defecto, el caso de Ana Gómez)."""
    return _payload
