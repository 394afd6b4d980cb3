# /jiujitsu_hub/db/models/academy_models.py

"""
ORM models for the tenant side of the system: the `Academy` (a gym location
with its own admin credential) and the `Professor` registry.
"""

from sqlalchemy import Column, String, Table, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base

# Set of assistant professors per academy.
academy_assistants = Table(
    "academy_assistants",
    Base.metadata,
    Column("academyId", String(64), ForeignKey("academies.id", ondelete="CASCADE"), primary_key=True),
    Column("professorId", String(64), ForeignKey("professors.id", ondelete="CASCADE"), primary_key=True),
)


class Academy(Base):
    __tablename__ = "academies"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(String(500), nullable=True)
    responsible = Column(String(255), nullable=True)
    responsibleRegistration = Column(String(64), nullable=True)
    professorId = Column(String(64), nullable=True)
    imageUrl = Column(String, nullable=True)

    # Academy admin credential. The hash is only ever read by the login flow.
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)

    assistants = relationship("Professor", secondary=academy_assistants, lazy="selectin")

    @property
    def assistantIds(self):
        return [p.id for p in self.assistants]


class Professor(Base):
    __tablename__ = "professors"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    registration = Column(String(64), nullable=True)
    cpf = Column(String(14), index=True, nullable=True)
    academyId = Column(String(64), index=True, nullable=True)
    graduationId = Column(String(64), nullable=True)
    imageUrl = Column(String, nullable=True)
    blackBeltDate = Column(String(10), nullable=True)
