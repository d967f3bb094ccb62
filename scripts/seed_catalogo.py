"""Script para crear el esquema y cargar el catálogo (carreras, años y materias).

Uso:
    python scripts/seed_catalogo.py           # crea lo que falte
    python scripts/seed_catalogo.py --reset   # borra todas las tablas y recarga
"""
import argparse
import asyncio
import sys
from pathlib import Path

# Asegurar que el proyecto esté en el path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings
from app.core.database import Database
from app.core.logger import configurar_logging
from app.services.catalogo_service import sembrar_catalogo


async def seed(reset: bool) -> None:
    database = Database(settings.database_url, settings.database_auth_token, echo=settings.debug)
    try:
        if reset:
            print("Borrando tablas existentes...")
            await database.drop_all()
        await database.init()
        async with database.session_factory() as session:
            creados = await sembrar_catalogo(session)
        print(
            f"  + {creados['carreras']} carreras, {creados['anios']} años, "
            f"{creados['materias']} materias"
        )
    finally:
        await database.dispose()
    print("Listo.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Inicializa la base de datos de inscripciones")
    parser.add_argument("--reset", action="store_true", help="Borra todas las tablas antes de cargar")
    args = parser.parse_args()
    configurar_logging(settings.log_level)
    asyncio.run(seed(args.reset))
