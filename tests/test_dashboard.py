# /tests/test_dashboard.py

from datetime import date
from types import SimpleNamespace

from jiujitsu_hub.models.student_model import StudentCreate, PaymentUpdate
from jiujitsu_hub.services import dashboard_service, student_service


def test_attendance_rate_by_weekday():
    records = [
        SimpleNamespace(date="2024-05-08", status="present"),  # Wednesday
        SimpleNamespace(date="2024-05-15", status="absent"),   # Wednesday
        SimpleNamespace(date="2024-05-11", status="present"),  # Saturday
    ]
    rates = dashboard_service._attendance_rate_by_day(records)
    assert rates == {"Quarta-feira": 50.0, "Sábado": 100.0}


def test_attendance_rate_with_no_records_is_empty():
    assert dashboard_service._attendance_rate_by_day([]) == {}


def test_summary_for_academy_admin(client, db, academy, other_academy, academy_admin_claims, academy_admin_headers):
    today = date.today()
    birthday_kid = student_service.create_student(
        db,
        StudentCreate(name="Aniversariante", email="niver@aluno.com", cpf="10120230344",
                      birthDate=f"2000-{today.month:02d}-{today.day:02d}"),
        academy_admin_claims,
    )
    student_service.create_student(
        db, StudentCreate(name="Outro", email="outro@aluno.com", cpf="50560570855"),
        academy_admin_claims,
    )
    student_service.update_payment(db, birthday_kid.id, PaymentUpdate(status="paid"), academy_admin_claims)

    response = client.get("/api/dashboard/summary", headers=academy_admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["studentCount"] == 2
    assert body["academyCount"] == 1
    assert body["paidCount"] == 1
    assert body["unpaidCount"] == 1
    assert body["birthdaysToday"] == [{"name": "Aniversariante", "type": "Aluno"}]


def test_students_cannot_see_the_dashboard(client, db, academy, academy_admin_claims, headers_for):
    student = student_service.create_student(
        db, StudentCreate(name="Aluno", email="aluno@dash.com", cpf="70780790811"), academy_admin_claims,
    )
    headers = headers_for(db.get_user_by_student_id(student.id))
    assert client.get("/api/dashboard/summary", headers=headers).status_code == 403
