"""Filtros, resumen y exportación a Excel del listado de inscripciones."""
from datetime import date
from io import BytesIO

import pandas as pd

COLUMNAS_EXCEL = {
    "fecha_inscripcion": "Fecha",
    "apellido": "Apellido",
    "nombre_alumno": "Nombre",
    "dni": "DNI",
    "email": "Email",
    "carrera": "Carrera",
    "anio_cursada": "Año de Cursada",
    "materia": "Materia",
    "condicion": "Condición",
    "cohorte": "Cohorte",
}


def filtrar_inscripciones(
    filas: list[dict],
    buscar: str | None = None,
    carrera: str | None = None,
    anio: str | None = None,
) -> list[dict]:
    """Mismo criterio que el panel: texto en apellido/nombre (sin mayúsculas) o en el DNI."""
    termino = (buscar or "").strip().lower()

    def coincide(fila: dict) -> bool:
        if termino and not (
            termino in fila["apellido"].lower()
            or termino in fila["nombre_alumno"].lower()
            or termino in fila["dni"]
        ):
            return False
        if carrera and fila["carrera"] != carrera:
            return False
        if anio and fila["anio_cursada"] != anio:
            return False
        return True

    return [f for f in filas if coincide(f)]


def resumir(filas: list[dict]) -> dict[str, int]:
    return {
        "total_inscripciones": len(filas),
        "alumnos_unicos": len({f["dni"] for f in filas}),
    }


def nombre_archivo(hoy: date | None = None) -> str:
    return f"Inscripciones_{(hoy or date.today()).isoformat()}.xlsx"


def exportar_excel(filas: list[dict]) -> bytes:
    """Genera el .xlsx (hoja "Inscripciones") con las columnas del panel."""
    df = pd.DataFrame(filas, columns=list(COLUMNAS_EXCEL))
    if not df.empty:
        df["fecha_inscripcion"] = pd.to_datetime(df["fecha_inscripcion"]).dt.date
    df = df.rename(columns=COLUMNAS_EXCEL)

    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Inscripciones", index=False)
    return buffer.getvalue()
