# /jiujitsu_hub/routers/attendance_router.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, Response

from ..core.deps import get_current_user, require_admin
from ..models import attendance_model
from ..models.user_model import TokenPayload
from ..services import attendance_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[attendance_model.AttendanceRecord], summary="Get Attendance Records")
def get_attendance(
    scheduleId: Optional[str] = None,
    date: Optional[date] = None,
    studentId: Optional[str] = None,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(get_current_user),
):
    return attendance_service.get_attendance(
        db, current_user,
        schedule_id=scheduleId,
        date=date.isoformat() if date else None,
        student_id=studentId,
    )


@router.post("", response_model=attendance_model.AttendanceRecord, summary="Save Attendance (Upsert)")
def save_attendance(
    attendance_in: attendance_model.AttendanceSave,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    """Saving the same student, class and date again overwrites the status."""
    try:
        record = attendance_service.save_attendance(db, attendance_in, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Aluno ou horário não encontrado.")
    return record


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an Attendance Record")
def delete_attendance(
    record_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    if not attendance_service.delete_attendance(db, record_id, current_user):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Registro {record_id} não encontrado.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
