"""SQLAlchemy ORM models for persisted score submissions"""

import uuid
from sqlalchemy import Column, Float, DateTime, Text, JSON, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class Submission(Base):
    """One PFHR questionnaire submission and its computed score"""

    __tablename__ = "submissions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    responses = Column(JSON, nullable=False)  # validated input + breakdown
    pfhr_score = Column(Float, nullable=False)
    category = Column(Text, nullable=False, index=True)
    risk_level = Column(Text, nullable=False)
    recommendations = Column(JSON, nullable=False, default=list)
    status = Column(Text, nullable=False, default="pending")
    submitted_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
