"""Data access layer for score submissions"""

import uuid
from typing import Optional
from sqlalchemy.orm import Session
from pfhr_service.infrastructure.database.models import Submission
from pfhr_service.domain.models import PFHRResult, ScoreInput


class SubmissionRepository:
    """Repository for PFHR submissions"""

    def __init__(self, db: Session):
        self.db = db

    def create_submission(self, inputs: ScoreInput, result: PFHRResult) -> Submission:
        """Persist validated input and its unrounded score"""
        responses = inputs.to_dict()
        responses["breakdown"] = result.breakdown.to_dict()

        db_submission = Submission(
            responses=responses,
            pfhr_score=result.score,
            category=result.category.value,
            risk_level=result.risk_level.value,
            recommendations=list(result.recommendations),
            status="pending",
        )
        self.db.add(db_submission)
        self.db.flush()  # Get ID without committing
        return db_submission

    def get_submission_by_id(self, submission_id: uuid.UUID) -> Optional[Submission]:
        return (
            self.db.query(Submission)
            .filter(Submission.id == submission_id)
            .first()
        )
