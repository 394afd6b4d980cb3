# /jiujitsu_hub/services/database_helpers/academy_repository_sql.py

"""
Raw SQLAlchemy queries for the `academies` and `professors` tables and the
academy assistant link table.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ...db.models.academy_models import Academy, Professor


class AcademyRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Academy Methods ---

    def get_all_academies(self, exclude_id: Optional[str] = None) -> List[Academy]:
        query = self.db.query(Academy)
        if exclude_id is not None:
            query = query.filter(Academy.id != exclude_id)
        return query.order_by(Academy.name).all()

    def get_academy_by_id(self, academy_id: str) -> Optional[Academy]:
        return self.db.query(Academy).filter(Academy.id == academy_id).first()

    def get_academy_by_email(self, email: str) -> Optional[Academy]:
        return self.db.query(Academy).filter(Academy.email == email).first()

    def add_academy(self, record: Dict, assistant_ids: Optional[List[str]] = None, commit: bool = True) -> Academy:
        new_academy = Academy(**record)
        if assistant_ids:
            new_academy.assistants = self.get_professors_by_ids(assistant_ids)
        self.db.add(new_academy)
        if commit:
            self.db.commit()
            self.db.refresh(new_academy)
        else:
            self.db.flush()
        return new_academy

    def update_academy(self, academy_id: str, data: Dict, assistant_ids: Optional[List[str]] = None) -> Optional[Academy]:
        """
        Updates an academy. `assistant_ids=None` leaves the assistant set
        untouched; a list (even empty) replaces it.
        """
        db_academy = self.get_academy_by_id(academy_id)
        if db_academy:
            for key, value in data.items():
                setattr(db_academy, key, value)
            if assistant_ids is not None:
                db_academy.assistants = self.get_professors_by_ids(assistant_ids)
            self.db.commit()
            self.db.refresh(db_academy)
        return db_academy

    def delete_academy(self, academy_id: str, commit: bool = True) -> bool:
        db_academy = self.get_academy_by_id(academy_id)
        if not db_academy:
            return False
        self.db.delete(db_academy)
        if commit:
            self.db.commit()
        return True

    # --- Professor Methods ---

    def get_all_professors(self, academy_id: Optional[str] = None) -> List[Professor]:
        query = self.db.query(Professor)
        if academy_id is not None:
            query = query.filter(Professor.academyId == academy_id)
        return query.order_by(Professor.name).all()

    def get_professor_by_id(self, professor_id: str) -> Optional[Professor]:
        return self.db.query(Professor).filter(Professor.id == professor_id).first()

    def get_professor_by_cpf(self, cpf: str) -> Optional[Professor]:
        return self.db.query(Professor).filter(Professor.cpf == cpf).first()

    def get_professors_by_ids(self, professor_ids: List[str]) -> List[Professor]:
        if not professor_ids:
            return []
        return self.db.query(Professor).filter(Professor.id.in_(professor_ids)).all()

    def add_professor(self, record: Dict, commit: bool = True) -> Professor:
        new_professor = Professor(**record)
        self.db.add(new_professor)
        if commit:
            self.db.commit()
            self.db.refresh(new_professor)
        else:
            self.db.flush()
        return new_professor

    def update_professor(self, professor_id: str, data: Dict) -> Optional[Professor]:
        db_professor = self.get_professor_by_id(professor_id)
        if db_professor:
            for key, value in data.items():
                setattr(db_professor, key, value)
            self.db.commit()
            self.db.refresh(db_professor)
        return db_professor

    def delete_professor(self, professor_id: str) -> bool:
        db_professor = self.get_professor_by_id(professor_id)
        if not db_professor:
            return False
        self.db.delete(db_professor)
        self.db.commit()
        return True
