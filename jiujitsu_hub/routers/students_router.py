# /jiujitsu_hub/routers/students_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status, Response
from fastapi.responses import StreamingResponse

from ..core.deps import get_current_user, require_admin
from ..models import student_model
from ..models.user_model import TokenPayload
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


def _not_found(student_id: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Aluno {student_id} não encontrado.")


# --- STUDENT COLLECTION ENDPOINTS (/api/students) ---

@router.get("", response_model=List[student_model.Student], summary="Get All Visible Students")
def get_all_students(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(get_current_user),
):
    return student_service.get_all_students(db, current_user)


@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Create a Student")
def create_student(
    student_create: student_model.StudentCreate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    try:
        return student_service.create_student(db, student_create, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# Declared before /{student_id} so "export" is not captured as an id.
@router.get("/export", summary="Export the Roster as CSV", response_class=StreamingResponse)
def export_students_csv(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    csv_string = student_service.export_students_as_csv(db, current_user)
    return StreamingResponse(
        iter([csv_string]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=alunos.csv"},
    )


# --- INDIVIDUAL STUDENT ENDPOINTS (/api/students/{student_id}) ---

@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Single Student")
def get_student(
    student_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(get_current_user),
):
    student = student_service.get_student(db, student_id, current_user)
    if student is None:
        raise _not_found(student_id)
    return student


@router.put("/{student_id}", response_model=student_model.Student, summary="Update a Student")
def update_student(
    student_id: str,
    student_update: student_model.StudentUpdate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    try:
        updated = student_service.update_student(db, student_id, student_update, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise _not_found(student_id)
    return updated


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Student")
def delete_student(
    student_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    if not student_service.delete_student(db, student_id, current_user):
        raise _not_found(student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{student_id}/payment", response_model=student_model.Student, summary="Update Payment Status")
def update_payment(
    student_id: str,
    payment_update: student_model.PaymentUpdate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(get_current_user),
):
    try:
        updated = student_service.update_payment(db, student_id, payment_update, current_user)
    except PermissionError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if updated is None:
        raise _not_found(student_id)
    return updated


@router.get("/{student_id}/progress", response_model=student_model.BeltProgress, summary="Get Belt Progress")
def get_progress(
    student_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(get_current_user),
):
    progress = student_service.get_progress(db, student_id, current_user)
    if progress is None:
        raise _not_found(student_id)
    return progress


@router.get("/{student_id}/promotion", response_model=student_model.PromotionEligibility, summary="Check Promotion Eligibility")
def get_promotion_eligibility(
    student_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    eligibility = student_service.get_promotion_eligibility(db, student_id, current_user)
    if eligibility is None:
        raise _not_found(student_id)
    return eligibility


@router.post("/{student_id}/promote", response_model=student_model.Student, summary="Promote to the Next Belt")
def promote_student(
    student_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    try:
        promoted = student_service.promote_student(db, student_id, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if promoted is None:
        raise _not_found(student_id)
    return promoted
