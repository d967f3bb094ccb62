import logging

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.database import Database
from app.models import Condicion, Estudiante, InscripcionExamen


async def test_sqlite_sin_token_modo_local(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="app.core.database")
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'x.db'}")
    assert "Sin DATABASE_AUTH_TOKEN" in caplog.text
    await db.dispose()


async def test_token_ignorado_en_sqlite(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="app.core.database")
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'x.db'}", auth_token="secreto")
    assert db.url.password is None
    assert "ignorado" in caplog.text
    await db.dispose()


async def test_token_como_password_de_la_url():
    db = Database("postgresql+asyncpg://inscripciones@localhost/inscripciones", auth_token="secreto")
    assert db.url.password == "secreto"
    assert db.url.username == "inscripciones"
    await db.dispose()


async def test_foreign_keys_activas_en_sqlite(database):
    async with database.engine.connect() as conn:
        valor = (await conn.exec_driver_sql("PRAGMA foreign_keys")).scalar_one()
    assert valor == 1


async def test_condicion_fuera_del_catalogo_rechazada_por_la_base(database):
    async with database.session_factory() as session:
        session.add(Estudiante(dni="50111222", apellido="Ruiz", nombre="Eva", email="eva@x.com"))
        await session.flush()
        session.add(
            InscripcionExamen(
                id_estudiante=1, id_carrera=1, id_anio=1, id_materia=3,
                cohorte=2024, condicion="oyente",
            )
        )
        with pytest.raises(IntegrityError):
            await session.flush()
        await session.rollback()


def test_condiciones_validas():
    assert Condicion.TODAS == ("regular", "libre")
