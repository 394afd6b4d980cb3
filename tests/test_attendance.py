# /tests/test_attendance.py

import pytest

from jiujitsu_hub.models.student_model import StudentCreate
from jiujitsu_hub.services import student_service


@pytest.fixture
def white_belt(db, academy, academy_admin_claims, graduations):
    return student_service.create_student(
        db,
        StudentCreate(name="Joao Branca", email="joao@aluno.com", cpf="22233344455", beltId=graduations["Branca"].id),
        academy_admin_claims,
    )


@pytest.fixture
def purple_belt(db, academy, academy_admin_claims, graduations):
    return student_service.create_student(
        db,
        StudentCreate(name="Maria Roxa", email="maria@aluno.com", cpf="33344455566", beltId=graduations["Roxa"].id),
        academy_admin_claims,
    )


@pytest.fixture
def advanced_class(db, academy, graduations):
    return db.add_schedule({
        "id": "sch_avancada", "className": "Avançada", "dayOfWeek": "Quarta-feira",
        "startTime": "20:00", "endTime": "21:30", "academyId": academy.id,
        "requiredGraduationId": graduations["Azul"].id,
    })


def save(client, headers, student_id, schedule_id, status, day="2024-05-08"):
    return client.post(
        "/api/attendance",
        json={"studentId": student_id, "scheduleId": schedule_id, "date": day, "status": status},
        headers=headers,
    )


def test_saving_the_same_triple_twice_keeps_one_record(client, db, purple_belt, advanced_class, academy_admin_headers):
    first = save(client, academy_admin_headers, purple_belt.id, advanced_class.id, "present")
    second = save(client, academy_admin_headers, purple_belt.id, advanced_class.id, "absent")

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["id"] == second.json()["id"]
    records = db.get_attendance_records(student_ids=[purple_belt.id])
    assert len(records) == 1
    assert records[0].status == "absent"


def test_underqualified_student_cannot_be_marked_present(client, white_belt, advanced_class, academy_admin_headers):
    response = save(client, academy_admin_headers, white_belt.id, advanced_class.id, "present")
    assert response.status_code == 400


def test_underqualified_student_can_be_marked_absent(client, white_belt, advanced_class, academy_admin_headers):
    assert save(client, academy_admin_headers, white_belt.id, advanced_class.id, "absent").status_code == 200


def test_eligible_students_lists_only_qualified_belts(client, white_belt, purple_belt, advanced_class, academy_admin_headers):
    response = client.get(f"/api/schedules/{advanced_class.id}/eligible-students", headers=academy_admin_headers)
    assert response.status_code == 200
    assert [s["id"] for s in response.json()] == [purple_belt.id]


def test_list_can_be_filtered_by_schedule_and_date(client, purple_belt, advanced_class, academy_admin_headers):
    save(client, academy_admin_headers, purple_belt.id, advanced_class.id, "present", day="2024-05-08")
    save(client, academy_admin_headers, purple_belt.id, advanced_class.id, "present", day="2024-05-15")

    response = client.get(
        "/api/attendance", params={"scheduleId": advanced_class.id, "date": "2024-05-15"}, headers=academy_admin_headers,
    )

    assert [r["date"] for r in response.json()] == ["2024-05-15"]


def test_student_only_sees_own_attendance(client, db, white_belt, purple_belt, advanced_class, academy_admin_headers, headers_for):
    save(client, academy_admin_headers, purple_belt.id, advanced_class.id, "present")
    save(client, academy_admin_headers, white_belt.id, advanced_class.id, "absent")

    response = client.get("/api/attendance", headers=headers_for(db.get_user_by_student_id(white_belt.id)))

    assert [r["studentId"] for r in response.json()] == [white_belt.id]


def test_delete_attendance(client, purple_belt, advanced_class, academy_admin_headers):
    record_id = save(client, academy_admin_headers, purple_belt.id, advanced_class.id, "present").json()["id"]
    assert client.delete(f"/api/attendance/{record_id}", headers=academy_admin_headers).status_code == 204
    assert client.delete(f"/api/attendance/{record_id}", headers=academy_admin_headers).status_code == 404


def test_deleting_a_schedule_removes_its_attendance(client, db, purple_belt, advanced_class, academy_admin_headers):
    save(client, academy_admin_headers, purple_belt.id, advanced_class.id, "present")
    assert client.delete(f"/api/schedules/{advanced_class.id}", headers=academy_admin_headers).status_code == 204
    assert db.get_attendance_records(student_ids=[purple_belt.id]) == []
