"""
Testes de integração da API dos registros diários.
"""

import datetime as dt
from unittest.mock import patch

from crecheapp.exceptions import ConflictError, NotFoundError
from crecheapp.schemas.record import RecordResponse


def make_record_response(**kwargs) -> RecordResponse:
    values = {
        "id": 1, "aluno_id": 4, "turma_id": 2, "data": dt.date(2024, 3, 1),
        "alimentacao": "Bom", "comportamento": None, "presenca": "Presente", "observacoes": None,
    }
    values.update(kwargs)
    return RecordResponse(**values)


# ============================================================
# POST /registros
# ============================================================

def test_create_registro_sucesso(client):
    with patch("crecheapp.routers.records.record_service.create_record") as mock:
        mock.return_value = 7
        response = client.post("/registros", json={
            "aluno_id": 4, "turma_id": 2, "data": "2024-03-01", "alimentacao": "Bom",
        })

    assert response.status_code == 201
    assert response.json()["id"] == 7
    assert mock.call_args[0][1].data == dt.date(2024, 3, 1)


def test_create_registro_sem_data(client):
    response = client.post("/registros", json={"aluno_id": 4, "turma_id": 2})
    assert response.status_code == 400
    assert "data" in response.json()["detail"]


def test_create_registro_valor_invalido(client):
    response = client.post("/registros", json={
        "aluno_id": 4, "turma_id": 2, "data": "2024-03-01", "presenca": "Talvez",
    })
    assert response.status_code == 400


def test_create_registro_duplicado(client):
    with patch("crecheapp.routers.records.record_service.create_record") as mock:
        mock.side_effect = ConflictError("Já existe um registro para este aluno nesta data.")
        response = client.post("/registros", json={"aluno_id": 4, "turma_id": 2, "data": "2024-03-01"})
    assert response.status_code == 409


def test_create_registro_aluno_inexistente(client):
    with patch("crecheapp.routers.records.record_service.create_record") as mock:
        mock.side_effect = NotFoundError("Aluno não encontrado.")
        response = client.post("/registros", json={"aluno_id": 99, "turma_id": 2, "data": "2024-03-01"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Aluno não encontrado."


# ============================================================
# GET /registros/{aluno_id}
# ============================================================

def test_list_registros_com_periodo(client):
    with patch("crecheapp.routers.records.record_service.get_student_records") as mock:
        mock.return_value = [make_record_response()]
        response = client.get("/registros/4?inicio=2024-03-01&fim=2024-03-31")

    assert response.status_code == 200
    assert response.json()[0]["data"] == "2024-03-01"
    mock.assert_called_once()
    assert mock.call_args[0][1:] == (4, dt.date(2024, 3, 1), dt.date(2024, 3, 31))


def test_list_registros_periodo_invalido(client):
    response = client.get("/registros/4?inicio=ontem")
    assert response.status_code == 400


# ============================================================
# PUT /registros/{registro_id}
# ============================================================

def test_update_registro_sucesso(client):
    with patch("crecheapp.routers.records.record_service.update_record") as mock:
        mock.return_value = make_record_response(observacoes="Chorou um pouco")
        response = client.put("/registros/1", json={"observacoes": "Chorou um pouco"})

    assert response.status_code == 200
    assert response.json()["observacoes"] == "Chorou um pouco"


def test_update_registro_inexistente(client):
    with patch("crecheapp.routers.records.record_service.update_record") as mock:
        mock.return_value = None
        response = client.put("/registros/99", json={"observacoes": "x"})
    assert response.status_code == 404


# ============================================================
# Cenário completo sobre SQLite
# ============================================================

def test_cenario_registro_diario(live_client):
    aluno_id = live_client.post(
        "/register/aluno", json={"nome": "Ana", "cpf": "1", "matricula": "A1"}
    ).json()["id"]
    turma_id = live_client.post("/turmas", json={"nome": "Turma A", "ano": "2024"}).json()["id"]
    body = {"aluno_id": aluno_id, "turma_id": turma_id, "data": "2024-03-01"}

    first = live_client.post("/registros", json=body)
    second = live_client.post("/registros", json={**body, "presenca": "Ausente"})
    records = live_client.get(f"/registros/{aluno_id}").json()

    assert first.status_code == 201
    assert second.status_code == 409
    assert len(records) == 1
    assert records[0]["presenca"] == "Presente"
