from datetime import date

from httpx import ASGITransport, AsyncClient
from sqlalchemy import select, text

from app.core.config import Settings
from app.main import create_app
from app.models import Estudiante, InscripcionExamen
from app.services import inscripcion_service

HISTORIA_MEDIOS = "Historia de los Medios y Sistemas de Comunicación"


async def test_inscripcion_de_punta_a_punta(client, payload, contar):
    resp = await client.post("/api/inscripciones", json=payload())
    assert resp.status_code == 201
    assert resp.json() == {"message": "Inscripción realizada con éxito", "cantidad": 1}

    listado = (await client.get("/api/inscripciones")).json()
    filas = [f for f in listado if f["dni"] == "12345678"]
    assert len(filas) == 1
    fila = filas[0]
    assert fila["materia"] == HISTORIA_MEDIOS
    assert fila["condicion"] == "regular"
    assert fila["cohorte"] == 2024
    assert fila["apellido"] == "Gómez"
    assert fila["nombre_alumno"] == "Ana"
    assert fila["carrera"] == "Producción de Multimedios"
    assert fila["anio_cursada"] == "1er Año"
    assert fila["fecha_inscripcion"]
    assert await contar(Estudiante) == 1


async def test_un_estudiante_y_una_fila_por_materia(client, payload, contar):
    body = payload(dni="30111222", materias=[(1, "regular"), (2, "libre"), (5, "regular")])
    resp = await client.post("/api/inscripciones", json=body)
    assert resp.status_code == 201
    assert resp.json()["cantidad"] == 3

    assert await contar(Estudiante, Estudiante.dni == "30111222") == 1
    assert await contar(InscripcionExamen) == 3

    listado = (await client.get("/api/inscripciones")).json()
    assert {f["condicion"] for f in listado} == {"regular", "libre"}
    assert {f["cohorte"] for f in listado} == {2024}


async def test_reenvio_actualiza_estudiante_en_el_lugar(client, payload, database, contar):
    await client.post("/api/inscripciones", json=payload())
    resp = await client.post(
        "/api/inscripciones",
        json=payload(apellido="Gómez Paz", nombre="Ana María", email="ana.maria@x.com", materias=[(4, "libre")]),
    )
    assert resp.status_code == 201
    assert await contar(Estudiante) == 1

    async with database.session_factory() as session:
        est = await session.get(Estudiante, 1)
    assert (est.apellido, est.nombre, est.email) == ("Gómez Paz", "Ana María", "ana.maria@x.com")

    listado = (await client.get("/api/inscripciones")).json()
    assert len(listado) == 2
    # el listado refleja los datos del último envío en todas las filas
    assert {f["nombre_alumno"] for f in listado} == {"Ana María"}


async def test_reenvio_identico_duplica_inscripciones(client, payload, contar):
    """No hay restricción única sobre (estudiante, materia, cohorte)."""
    await client.post("/api/inscripciones", json=payload())
    resp = await client.post("/api/inscripciones", json=payload())
    assert resp.status_code == 201
    assert await contar(Estudiante) == 1
    assert await contar(InscripcionExamen) == 2


async def test_cohorte_anterior_a_2000_rechazada(client, payload, contar):
    resp = await client.post("/api/inscripciones", json=payload(cohorte=1999))
    assert resp.status_code == 400
    campos = [e["campo"] for e in resp.json()["errores"]]
    assert campos == ["academico.cohorte"]
    assert await contar(Estudiante) == 0
    assert await contar(InscripcionExamen) == 0


async def test_cohorte_futura_rechazada(client, payload, contar):
    resp = await client.post("/api/inscripciones", json=payload(cohorte=date.today().year + 1))
    assert resp.status_code == 400
    assert resp.json()["errores"][0]["campo"] == "academico.cohorte"
    assert await contar(InscripcionExamen) == 0


async def test_cohorte_del_anio_en_curso_aceptada(client, payload):
    resp = await client.post("/api/inscripciones", json=payload(cohorte=date.today().year))
    assert resp.status_code == 201


async def test_materia_de_otra_carrera_no_escribe_nada(client, payload, contar):
    """Transacción única: si una materia no corresponde, no queda ninguna fila."""
    # id 8 es "Inglés Técnico" de Producción de Multimedios, 2do Año
    body = payload(dni="40999888", materias=[(3, "regular"), (8, "regular")])
    resp = await client.post("/api/inscripciones", json=body)
    assert resp.status_code == 400
    assert "error" in resp.json()
    assert await contar(InscripcionExamen) == 0
    assert await contar(Estudiante, Estudiante.dni == "40999888") == 0


async def test_materia_inexistente_rechazada(client, payload, contar):
    resp = await client.post("/api/inscripciones", json=payload(materias=[(9999, "libre")]))
    assert resp.status_code == 400
    assert await contar(InscripcionExamen) == 0


async def test_fallo_no_altera_estudiante_existente(client, payload, database):
    await client.post("/api/inscripciones", json=payload())
    resp = await client.post(
        "/api/inscripciones",
        json=payload(email="otra@x.com", materias=[(8, "regular")]),
    )
    assert resp.status_code == 400

    async with database.session_factory() as session:
        est = await session.get(Estudiante, 1)
    assert est.email == "ana@x.com"


async def test_maximo_tres_materias(client, payload, contar):
    body = payload(materias=[(1, "regular"), (2, "regular"), (3, "libre"), (4, "libre")])
    resp = await client.post("/api/inscripciones", json=body)
    assert resp.status_code == 400
    assert resp.json()["errores"][0]["campo"] == "inscripciones"
    assert await contar(InscripcionExamen) == 0


async def test_sin_materias_rechazada(client, payload):
    resp = await client.post("/api/inscripciones", json=payload(materias=[]))
    assert resp.status_code == 400
    assert resp.json()["errores"][0]["campo"] == "inscripciones"


async def test_errores_enumeran_cada_campo(client, payload, contar):
    body = payload(dni="123", apellido="G", nombre="", email="no-es-email", materias=[(3, "oyente")])
    resp = await client.post("/api/inscripciones", json=body)
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "Datos de inscripción inválidos"
    campos = {e["campo"] for e in data["errores"]}
    assert {
        "alumno.dni",
        "alumno.apellido",
        "alumno.nombre",
        "alumno.email",
        "inscripciones.0.condicion",
    } <= campos
    assert all(e["mensaje"] for e in data["errores"])
    assert await contar(Estudiante) == 0


async def test_listado_mas_reciente_primero(client, payload):
    await client.post("/api/inscripciones", json=payload(dni="11111111"))
    await client.post("/api/inscripciones", json=payload(dni="22222222", materias=[(1, "libre")]))
    await client.post("/api/inscripciones", json=payload(dni="33333333", materias=[(2, "libre")]))

    listado = (await client.get("/api/inscripciones")).json()
    assert [f["dni"] for f in listado] == ["33333333", "22222222", "11111111"]
    ids = [f["id_inscripcion"] for f in listado]
    assert ids == sorted(ids, reverse=True)
    fechas = [f["fecha_inscripcion"] for f in listado]
    assert fechas == sorted(fechas, reverse=True)


async def test_listado_vacio(client):
    resp = await client.get("/api/inscripciones")
    assert resp.status_code == 200
    assert resp.json() == []


async def test_maximo_configurable_desde_settings(database, payload, contar):
    config = Settings(
        database_url=database.url.render_as_string(hide_password=False),
        seed_on_startup=False,
        max_materias_por_inscripcion=5,
    )
    app = create_app(config, database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        cuatro = payload(materias=[(1, "regular"), (2, "regular"), (3, "libre"), (4, "libre")])
        resp = await client.post("/api/inscripciones", json=cuatro)
        assert resp.status_code == 201
        assert resp.json()["cantidad"] == 4

        seis = payload(materias=[(m, "libre") for m in range(1, 7)])
        resp = await client.post("/api/inscripciones", json=seis)
        assert resp.status_code == 400
        assert resp.json()["errores"][0]["campo"] == "inscripciones"

    assert await contar(InscripcionExamen) == 4


async def test_error_de_base_de_datos_responde_500(client, payload, contar, monkeypatch):
    monkeypatch.setattr(
        inscripcion_service,
        "_upsert_estudiante",
        lambda dialecto, alumno: text("UPDATE tabla_inexistente SET x = 1"),
    )
    resp = await client.post("/api/inscripciones", json=payload())
    assert resp.status_code == 500
    assert resp.json() == {"error": "Error interno del servidor"}
    assert await contar(Estudiante) == 0
    assert await contar(InscripcionExamen) == 0


async def test_estudiante_no_resuelto_responde_500(client, payload, contar, monkeypatch):
    # el upsert no escribe nada: la búsqueda por DNI no encuentra fila
    monkeypatch.setattr(
        inscripcion_service,
        "_upsert_estudiante",
        lambda dialecto, alumno: select(1),
    )
    resp = await client.post("/api/inscripciones", json=payload())
    assert resp.status_code == 500
    assert resp.json() == {"error": "Error al recuperar estudiante"}
    assert await contar(Estudiante) == 0
    assert await contar(InscripcionExamen) == 0
