from sqlalchemy import Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.sql import func

from ..database import Base


class Candidate(Base):
    __tablename__ = "candidates"
    __table_args__ = (
        UniqueConstraint("email", name="uq_candidates_email"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    age = Column(Integer, nullable=False)
    # Bounded so the UNIQUE index works on MySQL.
    email = Column(String(255), index=True, nullable=False)
    phone = Column(Text, nullable=False, default="")
    skills = Column(Text, nullable=False, default="")
    experience = Column(Integer, nullable=False, default=0)
    applied_position = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default="Applied")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
