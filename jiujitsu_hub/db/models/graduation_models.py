# /jiujitsu_hub/db/models/graduation_models.py

from sqlalchemy import Column, String, Integer

from ..base_class import Base


class Graduation(Base):
    """
    A belt. `rank` is the ordering key used for every belt comparison; the
    schema does not force it to be unique.
    """
    __tablename__ = "graduations"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(64), nullable=False)
    color = Column(String(32), nullable=True)
    minTimeInMonths = Column(Integer, nullable=False, default=0)
    rank = Column(Integer, nullable=False, default=0, index=True)
    type = Column(String(16), nullable=False, default="adult")  # adult | kids
    minAge = Column(Integer, nullable=True)
    maxAge = Column(Integer, nullable=True)
