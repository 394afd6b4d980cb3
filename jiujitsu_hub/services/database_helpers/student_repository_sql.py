# /jiujitsu_hub/services/database_helpers/student_repository_sql.py

"""
Raw SQLAlchemy queries for the `students` and `payment_history` tables.

Deleting a Student goes through the ORM so that the cascade on
`Student.user` and `Student.paymentHistory` removes the linked rows.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ...db.models.student_models import Student, Payment
from ...db.models.schedule_models import AttendanceRecord


class StudentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_all_students(self, academy_id: Optional[str] = None) -> List[Student]:
        query = self.db.query(Student)
        if academy_id is not None:
            query = query.filter(Student.academyId == academy_id)
        return query.order_by(Student.name).all()

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def get_student_by_cpf(self, cpf: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.cpf == cpf).first()

    def add_student(self, record: Dict, commit: bool = True) -> Student:
        new_student = Student(**record)
        self.db.add(new_student)
        if commit:
            self.db.commit()
            self.db.refresh(new_student)
        else:
            self.db.flush()
        return new_student

    def update_student(self, student_id: str, data: Dict, commit: bool = True) -> Optional[Student]:
        db_student = self.get_student_by_id(student_id)
        if db_student:
            for key, value in data.items():
                setattr(db_student, key, value)
            if commit:
                self.db.commit()
                self.db.refresh(db_student)
            else:
                self.db.flush()
        return db_student

    def delete_student(self, student_id: str, commit: bool = True) -> bool:
        db_student = self.get_student_by_id(student_id)
        if not db_student:
            return False
        # Attendance is not an ORM child of Student, so clear it explicitly.
        self.db.query(AttendanceRecord).filter(AttendanceRecord.studentId == student_id).delete(
            synchronize_session=False
        )
        self.db.delete(db_student)
        if commit:
            self.db.commit()
        return True

    def delete_students_by_academy_id(self, academy_id: str, commit: bool = True) -> int:
        students = self.get_all_students(academy_id=academy_id)
        for student in students:
            self.delete_student(student.id, commit=False)
        if commit:
            self.db.commit()
        return len(students)

    # --- Payment History ---

    def add_payment(self, record: Dict, commit: bool = True) -> Payment:
        payment = Payment(**record)
        self.db.add(payment)
        if commit:
            self.db.commit()
            self.db.refresh(payment)
        else:
            self.db.flush()
        return payment
