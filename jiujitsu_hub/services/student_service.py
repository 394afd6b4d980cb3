# /jiujitsu_hub/services/student_service.py

"""
This service module is the business logic layer for everything a student
record drives: the roster itself, the linked login identity, monthly-fee
payments, belt progress and promotions, and the CSV export.

Every function receives the caller's decoded token so that reads and writes
are scoped by role. Out-of-scope students are reported as not found.
"""

import logging
import uuid
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

import pandas as pd
from sqlalchemy.exc import IntegrityError

from ..core import security
from ..models import student_model
from ..models.user_model import Role, TokenPayload
from .database_service import DatabaseService
from .access_helpers import scope_academy_id, can_access_student, normalize_cpf
from .graduation_helpers import belt_rules
from . import activity_service, settings_service

logger = logging.getLogger(__name__)

DEFAULT_STUDENT_PASSWORD = "123456"

EXPORT_COLUMNS = [
    "Nome", "Email", "CPF", "Faixa", "Graus", "Academia",
    "Status do Pagamento", "Dia de Vencimento",
]

# Non-nullable student columns that a partial update may not null out.
REQUIRED_FIELDS = ("name", "email", "stripes", "isCompetitor")


# --- Reads ---

def get_all_students(db: DatabaseService, current_user: TokenPayload) -> List:
    if current_user.role == Role.STUDENT:
        student = db.get_student_by_id(current_user.studentId) if current_user.studentId else None
        return [student] if student else []
    return db.get_all_students(academy_id=scope_academy_id(current_user))


def get_student(db: DatabaseService, student_id: str, current_user: TokenPayload):
    student = db.get_student_by_id(student_id)
    if not can_access_student(current_user, student):
        return None
    return student


# --- Writes ---

def create_student(db: DatabaseService, student_in: student_model.StudentCreate, current_user: TokenPayload):
    """
    Creates a student and its `student` login in a single transaction.
    Academy admins can only create students in their own academy.
    """
    data = student_in.model_dump(exclude={"password"})
    data["cpf"] = normalize_cpf(data["cpf"])
    if not data["cpf"]:
        raise ValueError("CPF é obrigatório.")
    if current_user.role == Role.ACADEMY_ADMIN:
        data["academyId"] = current_user.academyId

    if db.get_student_by_cpf(data["cpf"]):
        raise ValueError("CPF já cadastrado.")
    if db.get_user_by_email(data["email"]):
        raise ValueError("Email já existe.")

    data["id"] = f"stu_{uuid.uuid4().hex[:12]}"
    data["password"] = security.hash_password(student_in.password or DEFAULT_STUDENT_PASSWORD)
    data["paymentStatus"] = student_model.PaymentStatus.UNPAID.value

    try:
        student = db.add_student(data, commit=False)
        db.add_user(
            {
                "id": f"usr_{uuid.uuid4().hex[:12]}",
                "name": student.name,
                "email": student.email,
                "role": Role.STUDENT.value,
                "academyId": student.academyId,
                "studentId": student.id,
                "birthDate": student.birthDate,
            },
            commit=False,
        )
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError("CPF ou email já cadastrado.")

    activity_service.log_action(db, current_user.id, "Aluno criado", f"Aluno '{student.name}' criado.")
    return db.get_student_by_id(student.id)


def _ensure_black_belt_professor(db: DatabaseService, student, actor_id: str) -> bool:
    """
    A student who reaches the black belt becomes a professor. Skipped when a
    professor with the same CPF already exists.
    """
    graduation = db.get_graduation_by_id(student.beltId) if student.beltId else None
    if graduation is None or graduation.name != belt_rules.BLACK_BELT_NAME:
        return False
    if not student.cpf or db.get_professor_by_cpf(student.cpf):
        return False

    db.add_professor(
        {
            "id": f"prof_{uuid.uuid4().hex[:12]}",
            "name": student.name,
            "registration": student.registration,
            "cpf": student.cpf,
            "academyId": student.academyId,
            "graduationId": graduation.id,
            "imageUrl": student.imageUrl,
            "blackBeltDate": date.today().isoformat(),
        }
    )
    logger.info("Student %s promoted to black belt; professor record created.", student.id)
    activity_service.log_action(
        db, actor_id, "Promoção automática",
        f"Aluno '{student.name}' alcançou a faixa preta e foi cadastrado como professor.",
    )
    return True


def _apply_update(db: DatabaseService, student, update_data: Dict, actor_id: str):
    """Writes the student row and keeps the linked login in sync, in one commit."""
    user_fields = {k: update_data[k] for k in ("name", "email", "academyId", "birthDate") if k in update_data}
    try:
        db.update_student(student.id, update_data, commit=False)
        linked_user = db.get_user_by_student_id(student.id)
        if linked_user and user_fields:
            db.update_user(linked_user.id, user_fields, commit=False)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError("CPF ou email já cadastrado.")

    updated = db.get_student_by_id(student.id)
    _ensure_black_belt_professor(db, updated, actor_id)
    return updated


def update_student(
    db: DatabaseService,
    student_id: str,
    student_update: student_model.StudentUpdate,
    current_user: TokenPayload,
):
    student = get_student(db, student_id, current_user)
    if student is None:
        return None

    update_data = student_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")

    missing = [field for field in REQUIRED_FIELDS if field in update_data and update_data[field] is None]
    if missing:
        raise ValueError(f"Campo obrigatório não pode ser vazio: {', '.join(missing)}.")

    if "cpf" in update_data:
        update_data["cpf"] = normalize_cpf(update_data["cpf"])
        if not update_data["cpf"]:
            raise ValueError("CPF é obrigatório.")
        existing = db.get_student_by_cpf(update_data["cpf"])
        if existing and existing.id != student.id:
            raise ValueError("CPF já cadastrado.")
    if "email" in update_data and update_data["email"] != student.email:
        existing_user = db.get_user_by_email(update_data["email"])
        if existing_user and existing_user.studentId != student.id:
            raise ValueError("Email já existe.")
    if current_user.role == Role.ACADEMY_ADMIN:
        update_data.pop("academyId", None)

    new_password = update_data.pop("password", None)
    if new_password:
        update_data["password"] = security.hash_password(new_password)

    updated = _apply_update(db, student, update_data, current_user.id)
    activity_service.log_action(db, current_user.id, "Aluno atualizado", f"Aluno '{updated.name}' atualizado.")
    return updated


def delete_student(db: DatabaseService, student_id: str, current_user: TokenPayload) -> bool:
    """Deleting a student also deletes its login and payment history."""
    student = get_student(db, student_id, current_user)
    if student is None:
        return False
    name = student.name
    db.delete_student(student_id)
    logger.warning("Student %s deleted by %s.", student_id, current_user.id)
    activity_service.log_action(db, current_user.id, "Aluno excluído", f"Aluno '{name}' excluído.")
    return True


# --- Payments ---

def update_payment(
    db: DatabaseService,
    student_id: str,
    payment_in: student_model.PaymentUpdate,
    current_user: TokenPayload,
):
    """
    Sets the monthly-fee status. Marking as paid appends a payment entry with
    today's date; a student may only mark its own fee as paid.
    """
    student = get_student(db, student_id, current_user)
    if student is None:
        return None
    if current_user.role == Role.STUDENT and payment_in.status != student_model.PaymentStatus.PAID:
        raise PermissionError("Alunos só podem registrar o próprio pagamento.")

    try:
        if payment_in.status == student_model.PaymentStatus.PAID:
            amount = payment_in.amount
            if amount is None:
                amount = float(settings_service.get_settings_dict(db).get("monthlyFeeAmount") or 0)
            db.add_payment(
                {
                    "id": f"pay_{uuid.uuid4().hex[:12]}",
                    "studentId": student.id,
                    "date": datetime.now(timezone.utc),
                    "amount": amount,
                },
                commit=False,
            )
        db.update_student(student.id, {"paymentStatus": payment_in.status.value}, commit=False)
        db.commit()
    except Exception:
        db.rollback()
        raise

    activity_service.log_action(
        db, current_user.id, "Pagamento atualizado",
        f"Pagamento de '{student.name}' marcado como {payment_in.status.value}.",
    )
    return db.get_student_by_id(student.id)


# --- Belt Progress & Promotion ---

def get_progress(db: DatabaseService, student_id: str, current_user: TokenPayload, today: Optional[date] = None):
    student = get_student(db, student_id, current_user)
    if student is None:
        return None
    return belt_rules.belt_progress(student, db.get_all_graduations(), today or date.today())


def get_promotion_eligibility(db: DatabaseService, student_id: str, current_user: TokenPayload, today: Optional[date] = None):
    student = get_student(db, student_id, current_user)
    if student is None:
        return None
    records = db.get_attendance_records(student_ids=[student.id])
    return belt_rules.promotion_eligibility(student, db.get_all_graduations(), records, today or date.today())


def promote_student(db: DatabaseService, student_id: str, current_user: TokenPayload, today: Optional[date] = None):
    """
    Moves an eligible student to the next belt, resetting stripes. Reaching
    the black belt this way also registers the student as a professor.
    """
    today = today or date.today()
    student = get_student(db, student_id, current_user)
    if student is None:
        return None

    eligibility = get_promotion_eligibility(db, student_id, current_user, today=today)
    if not eligibility["eligible"]:
        raise ValueError(eligibility["reason"])

    updated = _apply_update(
        db, student,
        {"beltId": eligibility["nextBeltId"], "stripes": 0, "lastPromotionDate": today.isoformat()},
        current_user.id,
    )
    activity_service.log_action(
        db, current_user.id, "Aluno promovido",
        f"Aluno '{updated.name}' promovido para a faixa {eligibility['nextBeltName']}.",
    )
    return updated


# --- Export ---

def export_students_as_csv(db: DatabaseService, current_user: TokenPayload) -> str:
    """Builds the roster CSV for every student visible to the caller."""
    students = get_all_students(db, current_user)
    belts = {g.id: g.name for g in db.get_all_graduations()}
    academies = {a.id: a.name for a in db.get_all_academies()}

    export_data = [
        {
            "Nome": s.name,
            "Email": s.email,
            "CPF": s.cpf,
            "Faixa": belts.get(s.beltId, ""),
            "Graus": s.stripes or 0,
            "Academia": academies.get(s.academyId, ""),
            "Status do Pagamento": "Pago" if s.paymentStatus == "paid" else "Pendente",
            "Dia de Vencimento": s.paymentDueDateDay if s.paymentDueDateDay is not None else "",
        } for s in students
    ]

    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=EXPORT_COLUMNS)
    return df.to_csv(index=False)
