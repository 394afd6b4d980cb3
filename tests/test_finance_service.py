# /tests/test_finance_service.py

from datetime import date
from types import SimpleNamespace

from jiujitsu_hub.services import finance_service


def unpaid(due_day, **overrides):
    fields = {"id": "stu_1", "name": "Ana", "phone": None, "paymentDueDateDay": due_day, "paymentStatus": "unpaid"}
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_due_day_ahead_this_month_is_a_reminder_only():
    result = finance_service.classify_students([unpaid(5)], today=date(2024, 10, 3))

    assert [w.studentId for w in result.reminders] == ["stu_1"]
    assert result.overdue == []
    window = result.reminders[0]
    assert window.nextDueDate == date(2024, 10, 5)
    assert window.lastDueDate == date(2024, 9, 5)
    assert window.daysUntilNextDue == 2


def test_due_day_just_passed_is_overdue_only():
    result = finance_service.classify_students([unpaid(5)], today=date(2024, 10, 8))

    assert result.reminders == []
    assert [w.studentId for w in result.overdue] == ["stu_1"]
    assert result.overdue[0].daysSinceLastDue == 3
    assert result.overdue[0].nextDueDate == date(2024, 11, 5)


def test_due_today_counts_as_reminder_not_overdue():
    result = finance_service.classify_students([unpaid(5)], today=date(2024, 10, 5))
    assert len(result.reminders) == 1
    assert result.overdue == []


def test_due_day_past_month_end_is_clamped():
    last_due, next_due = finance_service.compute_due_dates(31, date(2024, 2, 10))
    assert next_due == date(2024, 2, 29)
    assert last_due == date(2024, 1, 31)


def test_year_boundary():
    last_due, next_due = finance_service.compute_due_dates(10, date(2025, 1, 3))
    assert last_due == date(2024, 12, 10)
    assert next_due == date(2025, 1, 10)


def test_student_can_be_in_both_lists_with_wide_thresholds():
    result = finance_service.classify_students(
        [unpaid(5)], today=date(2024, 10, 8), reminder_days=30, overdue_days=30,
    )
    assert len(result.reminders) == 1
    assert len(result.overdue) == 1


def test_paid_students_and_students_without_due_day_are_skipped():
    students = [
        unpaid(5, id="stu_paid", paymentStatus="paid"),
        unpaid(None, id="stu_no_day"),
    ]
    result = finance_service.classify_students(students, today=date(2024, 10, 3))
    assert result.reminders == []
    assert result.overdue == []


def test_reminders_endpoint_uses_settings_thresholds(client, db, academy, academy_admin_headers):
    db.create_settings({"reminderDaysBeforeDue": 0, "overdueDaysAfterDue": 0})
    db.add_student({
        "id": "stu_due_today", "name": "Bruno", "email": "bruno@aluno.com", "password": "x",
        "cpf": "11122233344", "academyId": academy.id, "paymentDueDateDay": date.today().day,
    })
    db.add_student({
        "id": "stu_other_academy", "name": "Carla", "email": "carla@aluno.com", "password": "x",
        "cpf": "55566677788", "academyId": "acd_elsewhere", "paymentDueDateDay": date.today().day,
    })

    response = client.get("/api/finance/reminders", headers=academy_admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert [w["studentId"] for w in body["reminders"]] == ["stu_due_today"]
    assert body["overdue"] == []
