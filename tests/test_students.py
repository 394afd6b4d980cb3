# /tests/test_students.py

from datetime import date

import pytest

from jiujitsu_hub.models.student_model import StudentCreate
from jiujitsu_hub.services import student_service


@pytest.fixture
def student(db, academy, academy_admin_claims, graduations):
    return student_service.create_student(
        db,
        StudentCreate(
            name="Rickson Silva", email="rickson@aluno.com", cpf="987.654.321-00",
            beltId=graduations["Azul"].id, stripes=4, academyId=academy.id,
            firstGraduationDate="2018-01-10", lastPromotionDate="2020-01-10",
            paymentDueDateDay=10,
        ),
        academy_admin_claims,
    )


@pytest.fixture
def student_headers(db, student, headers_for):
    return headers_for(db.get_user_by_student_id(student.id))


# --- Creation ---

def test_creating_a_student_creates_its_login(client, db, academy, academy_admin_headers):
    payload = {"name": "Royler Souza", "email": "royler@aluno.com", "cpf": "111.222.333-44"}

    response = client.post("/api/students", json=payload, headers=academy_admin_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["cpf"] == "11122233344"
    assert body["academyId"] == academy.id
    assert body["paymentStatus"] == "unpaid"
    assert "password" not in body
    user = db.get_user_by_student_id(body["id"])
    assert user is not None
    assert user.role == "student"
    assert user.email == "royler@aluno.com"


def test_duplicate_cpf_is_rejected(client, student, academy_admin_headers):
    payload = {"name": "Outro Aluno", "email": "outro@aluno.com", "cpf": "98765432100"}
    response = client.post("/api/students", json=payload, headers=academy_admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "CPF já cadastrado."


def test_updating_name_and_email_syncs_the_login(client, db, student, academy_admin_headers):
    response = client.put(
        f"/api/students/{student.id}",
        json={"name": "Rickson Gracie", "email": "rg@aluno.com"},
        headers=academy_admin_headers,
    )
    assert response.status_code == 200
    user = db.get_user_by_student_id(student.id)
    assert user.name == "Rickson Gracie"
    assert user.email == "rg@aluno.com"


@pytest.mark.parametrize("cpf", [None, "", "...-"])
def test_update_cannot_clear_the_cpf(client, db, student, academy_admin_headers, cpf):
    response = client.put(f"/api/students/{student.id}", json={"cpf": cpf}, headers=academy_admin_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "CPF é obrigatório."
    assert db.get_student_by_id(student.id).cpf == "98765432100"


@pytest.mark.parametrize("field", ["name", "email", "stripes"])
def test_update_rejects_null_for_required_fields(client, db, student, academy_admin_headers, field):
    response = client.put(f"/api/students/{student.id}", json={field: None}, headers=academy_admin_headers)

    assert response.status_code == 400
    assert field in response.json()["message"]
    assert db.get_student_by_id(student.id).name == "Rickson Silva"


# --- Black Belt Auto-Promotion ---

def _professors_with_cpf(db, cpf):
    return [p for p in db.get_all_professors() if p.cpf == cpf]


def test_black_belt_creates_exactly_one_professor(client, db, student, graduations, academy_admin_headers):
    url = f"/api/students/{student.id}"

    first = client.put(url, json={"beltId": graduations["Preta"].id}, headers=academy_admin_headers)
    second = client.put(url, json={"beltId": graduations["Preta"].id, "stripes": 1}, headers=academy_admin_headers)

    assert first.status_code == 200
    assert second.status_code == 200
    professors = _professors_with_cpf(db, "98765432100")
    assert len(professors) == 1
    assert professors[0].graduationId == graduations["Preta"].id
    assert professors[0].academyId == student.academyId
    assert professors[0].blackBeltDate == date.today().isoformat()


def test_black_belt_matches_professor_registered_with_punctuated_cpf(
    client, db, student, graduations, academy_admin_headers,
):
    created = client.post(
        "/api/professors",
        json={"name": "Rickson Silva", "cpf": "987.654.321-00", "graduationId": graduations["Preta"].id},
        headers=academy_admin_headers,
    )
    assert created.status_code == 201
    assert created.json()["cpf"] == "98765432100"

    response = client.put(
        f"/api/students/{student.id}", json={"beltId": graduations["Preta"].id}, headers=academy_admin_headers,
    )

    assert response.status_code == 200
    assert len(_professors_with_cpf(db, "98765432100")) == 1


def test_other_belts_do_not_create_a_professor(client, db, student, graduations, academy_admin_headers):
    client.put(f"/api/students/{student.id}", json={"beltId": graduations["Roxa"].id}, headers=academy_admin_headers)
    assert _professors_with_cpf(db, "98765432100") == []


# --- Deletion ---

def test_deleting_a_student_removes_its_login(client, db, student, academy_admin_headers):
    user_id = db.get_user_by_student_id(student.id).id

    response = client.delete(f"/api/students/{student.id}", headers=academy_admin_headers)

    assert response.status_code == 204
    assert db.get_student_by_id(student.id) is None
    assert db.get_user_by_id(user_id) is None


def test_deleting_unknown_student_is_404(client, academy_admin_headers):
    assert client.delete("/api/students/stu_missing", headers=academy_admin_headers).status_code == 404


# --- Payments ---

def test_marking_paid_appends_payment_with_default_fee(client, student, academy_admin_headers):
    url = f"/api/students/{student.id}/payment"

    paid = client.post(url, json={"status": "paid"}, headers=academy_admin_headers)
    unpaid = client.post(url, json={"status": "unpaid"}, headers=academy_admin_headers)

    assert paid.status_code == 200
    assert paid.json()["paymentStatus"] == "paid"
    assert [p["amount"] for p in paid.json()["paymentHistory"]] == [150.0]
    assert unpaid.json()["paymentStatus"] == "unpaid"
    assert len(unpaid.json()["paymentHistory"]) == 1


def test_explicit_amount_is_recorded(client, student, academy_admin_headers):
    response = client.post(
        f"/api/students/{student.id}/payment", json={"status": "paid", "amount": 99.5}, headers=academy_admin_headers,
    )
    assert response.json()["paymentHistory"][0]["amount"] == 99.5


def test_student_may_only_mark_own_fee_as_paid(client, student, student_headers):
    url = f"/api/students/{student.id}/payment"
    assert client.post(url, json={"status": "unpaid"}, headers=student_headers).status_code == 403
    assert client.post(url, json={"status": "paid"}, headers=student_headers).status_code == 200


# --- Progress & Promotion ---

def test_progress_endpoint(client, student, student_headers):
    response = client.get(f"/api/students/{student.id}/progress", headers=student_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["currentBeltName"] == "Azul"
    assert body["nextBeltName"] == "Roxa"


def _attend(db, student, academy, days):
    schedule = db.add_schedule({
        "id": "sch_promo", "className": "Fundamentos", "dayOfWeek": "Segunda-feira",
        "startTime": "19:00", "endTime": "20:30", "academyId": academy.id,
    })
    for day in days:
        db.upsert_attendance(student.id, schedule.id, day, "present")


def test_promote_moves_to_next_belt_and_resets_stripes(client, db, student, academy, academy_admin_headers):
    _attend(db, student, academy, ["2021-03-01", "2022-03-01", "2023-03-01"])

    eligibility = client.get(f"/api/students/{student.id}/promotion", headers=academy_admin_headers)
    assert eligibility.json()["eligible"] is True

    response = client.post(f"/api/students/{student.id}/promote", headers=academy_admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["beltId"] == "grad_roxa"
    assert body["stripes"] == 0
    assert body["lastPromotionDate"] == date.today().isoformat()


def test_promote_when_not_eligible_is_400(client, student, academy_admin_headers):
    response = client.post(f"/api/students/{student.id}/promote", headers=academy_admin_headers)
    assert response.status_code == 400


def test_students_cannot_check_promotion(client, student, student_headers):
    assert client.get(f"/api/students/{student.id}/promotion", headers=student_headers).status_code == 403


# --- Export ---

def test_export_returns_csv_of_visible_students(client, student, academy_admin_headers):
    response = client.get("/api/students/export", headers=academy_admin_headers)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().splitlines()
    assert lines[0].startswith("Nome,Email,CPF,Faixa")
    assert "Rickson Silva" in lines[1]
    assert "Azul" in lines[1]
