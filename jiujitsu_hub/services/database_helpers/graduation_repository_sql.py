# /jiujitsu_hub/services/database_helpers/graduation_repository_sql.py

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ...db.models.graduation_models import Graduation


class GraduationRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_all_graduations(self) -> List[Graduation]:
        return self.db.query(Graduation).order_by(Graduation.rank, Graduation.name).all()

    def get_graduation_by_id(self, graduation_id: str) -> Optional[Graduation]:
        return self.db.query(Graduation).filter(Graduation.id == graduation_id).first()

    def add_graduation(self, record: Dict) -> Graduation:
        new_graduation = Graduation(**record)
        self.db.add(new_graduation)
        self.db.commit()
        self.db.refresh(new_graduation)
        return new_graduation

    def update_graduation(self, graduation_id: str, data: Dict) -> Optional[Graduation]:
        db_graduation = self.get_graduation_by_id(graduation_id)
        if db_graduation:
            for key, value in data.items():
                setattr(db_graduation, key, value)
            self.db.commit()
            self.db.refresh(db_graduation)
        return db_graduation

    def update_ranks(self, ranks: List[Dict]) -> int:
        """
        Rewrites `rank` for every `{id, rank}` pair, one row at a time.
        Unknown ids are skipped. Returns the number of rows updated.
        """
        updated = 0
        for item in ranks:
            db_graduation = self.get_graduation_by_id(item["id"])
            if db_graduation is None:
                continue
            db_graduation.rank = item["rank"]
            updated += 1
        self.db.commit()
        return updated

    def delete_graduation(self, graduation_id: str) -> bool:
        db_graduation = self.get_graduation_by_id(graduation_id)
        if not db_graduation:
            return False
        self.db.delete(db_graduation)
        self.db.commit()
        return True
