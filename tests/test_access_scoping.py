# /tests/test_access_scoping.py

"""
Role scoping across the API: general admins see everything, academy admins
only their academy, students only themselves. Out-of-scope records are 404s,
role violations are 403s.
"""

import pytest

from jiujitsu_hub.models.student_model import StudentCreate
from jiujitsu_hub.services import student_service


@pytest.fixture
def student(db, academy, academy_admin_claims):
    return student_service.create_student(
        db, StudentCreate(name="Aluno Centro", email="aluno@centro.com", cpf="44455566677"), academy_admin_claims,
    )


@pytest.fixture
def student_headers(db, student, headers_for):
    return headers_for(db.get_user_by_student_id(student.id))


# --- Students ---

def test_other_academy_admin_gets_404_for_foreign_student(client, student, other_admin_headers):
    assert client.get(f"/api/students/{student.id}", headers=other_admin_headers).status_code == 404
    assert client.put(f"/api/students/{student.id}", json={"name": "Hack"}, headers=other_admin_headers).status_code == 404
    assert client.delete(f"/api/students/{student.id}", headers=other_admin_headers).status_code == 404


def test_student_lists_are_scoped_per_academy(client, student, other_admin_headers, general_admin_headers):
    assert client.get("/api/students", headers=other_admin_headers).json() == []
    assert [s["id"] for s in client.get("/api/students", headers=general_admin_headers).json()] == [student.id]


def test_student_sees_only_itself(client, db, student, academy, academy_admin_claims, student_headers):
    other = student_service.create_student(
        db, StudentCreate(name="Colega", email="colega@centro.com", cpf="99988877766"), academy_admin_claims,
    )

    assert [s["id"] for s in client.get("/api/students", headers=student_headers).json()] == [student.id]
    assert client.get(f"/api/students/{other.id}", headers=student_headers).status_code == 404


def test_student_cannot_create_students(client, student_headers):
    payload = {"name": "Novo", "email": "novo@aluno.com", "cpf": "12312312312"}
    assert client.post("/api/students", json=payload, headers=student_headers).status_code == 403


# --- Academies ---

def test_academy_writes_are_general_admin_only(client, academy_admin_headers, general_admin_headers):
    payload = {"name": "Academia Leste", "email": "leste@academia.com", "password": "leste123"}

    assert client.post("/api/academies", json=payload, headers=academy_admin_headers).status_code == 403
    response = client.post("/api/academies", json=payload, headers=general_admin_headers)
    assert response.status_code == 201
    assert "password" not in response.json()


def test_academy_lists(client, academy, other_academy, academy_admin_headers, general_admin_headers):
    own = client.get("/api/academies", headers=academy_admin_headers).json()
    everything = client.get("/api/academies", headers=general_admin_headers).json()

    assert [a["id"] for a in own] == [academy.id]
    assert sorted(a["id"] for a in everything) == sorted([academy.id, other_academy.id])


def test_academy_admin_cannot_update_another_academy(client, other_academy, academy_admin_headers):
    response = client.put(f"/api/academies/{other_academy.id}", json={"name": "Tomada"}, headers=academy_admin_headers)
    assert response.status_code == 404


def test_deleting_an_academy_removes_students_and_logins(client, db, academy, student, general_admin_headers):
    student_user_id = db.get_user_by_student_id(student.id).id

    response = client.delete(f"/api/academies/{academy.id}", headers=general_admin_headers)

    assert response.status_code == 204
    assert db.get_academy_by_id(academy.id) is None
    assert db.get_student_by_id(student.id) is None
    assert db.get_user_by_id(student_user_id) is None
    assert db.get_user_by_email("centro@academia.com") is None


def test_master_academy_cannot_be_deleted(client, general_admin, general_admin_headers):
    response = client.delete("/api/academies/master_admin_academy_01", headers=general_admin_headers)
    assert response.status_code == 400


# --- Graduations ---

def test_graduation_reorder_skips_unknown_ids(client, graduations, general_admin_headers, academy_admin_headers):
    ranks = [{"id": "grad_branca", "rank": 99}, {"id": "grad_fantasma", "rank": 1}]

    assert client.put("/api/graduations/ranks", json=ranks, headers=academy_admin_headers).status_code == 403
    response = client.put("/api/graduations/ranks", json=ranks, headers=general_admin_headers)

    assert response.status_code == 200
    names = [g["name"] for g in response.json()]
    assert names[-1] == "Branca"
    assert len(names) == len(graduations)


def test_students_can_read_graduations(client, graduations, student_headers):
    response = client.get("/api/graduations", headers=student_headers)
    assert [g["name"] for g in response.json()] == ["Branca", "Azul", "Roxa", "Marrom", "Preta"]


# --- Settings ---

def test_public_settings_need_no_token_and_fall_back_to_defaults(client):
    response = client.get("/api/settings")
    assert response.status_code == 200
    assert response.json()["systemName"] == "Jiu-Jitsu Hub"


def test_settings_update_is_general_admin_only(client, academy_admin_headers, general_admin_headers):
    payload = {"monthlyFeeAmount": 200.0, "systemName": "Hub Norte"}

    assert client.put("/api/settings", json=payload, headers=academy_admin_headers).status_code == 403
    response = client.put("/api/settings", json=payload, headers=general_admin_headers)

    assert response.status_code == 200
    assert response.json()["monthlyFeeAmount"] == 200.0
    assert client.get("/api/settings").json()["systemName"] == "Hub Norte"


@pytest.mark.parametrize("field", ["systemName", "monthlyFeeAmount", "useGradient", "overdueDaysAfterDue"])
def test_settings_update_rejects_null_for_required_fields(client, general_admin_headers, field):
    response = client.put("/api/settings", json={field: None}, headers=general_admin_headers)

    assert response.status_code == 400
    assert field in response.json()["message"]
    assert client.get("/api/settings").json()["systemName"] == "Jiu-Jitsu Hub"


def test_settings_update_can_clear_optional_fields(client, general_admin_headers):
    response = client.put("/api/settings", json={"pixKey": None}, headers=general_admin_headers)
    assert response.status_code == 200
    assert response.json()["pixKey"] is None


# --- Directory ---

def test_users_are_scoped_and_admin_only(client, student, other_academy, academy_admin_headers, student_headers):
    emails = {u["email"] for u in client.get("/api/users", headers=academy_admin_headers).json()}

    assert emails == {"centro@academia.com", "aluno@centro.com"}
    assert client.get("/api/users", headers=student_headers).status_code == 403


def test_activity_logs_record_writes(client, student, academy_admin_headers):
    logs = client.get("/api/logs", headers=academy_admin_headers).json()
    assert any(entry["action"] == "Aluno criado" for entry in logs)


def test_news_is_readable_by_any_role(client, student_headers):
    response = client.get("/api/news", headers=student_headers)
    assert response.status_code == 200
    assert response.json() == []
