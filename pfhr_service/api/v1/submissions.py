"""GET /v1/submissions/{submission_id} - Fetch a stored score submission"""

import uuid
from fastapi import APIRouter, Depends, HTTPException

from pfhr_service.api.v1.schemas import BreakdownSchema, SubmissionResponse
from pfhr_service.api.dependencies import get_submission_repository
from pfhr_service.config import settings
from pfhr_service.domain.models import ScoreBreakdown
from pfhr_service.infrastructure.database.repositories import SubmissionRepository

router = APIRouter()


@router.get("/submissions/{submission_id}", response_model=SubmissionResponse)
def get_submission(
    submission_id: str,
    repo: SubmissionRepository = Depends(get_submission_repository),
):
    """
    Retrieve a previously scored submission.

    Returns:
        Stored score, category, breakdown and the validated inputs
    """
    try:
        submission_uuid = uuid.UUID(submission_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid submission ID format")

    submission = repo.get_submission_by_id(submission_uuid)

    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")

    responses = dict(submission.responses)
    breakdown = ScoreBreakdown(**responses.pop("breakdown"))
    decimals = settings.score_decimal_places

    return SubmissionResponse(
        submission_id=str(submission.id),
        score=round(submission.pfhr_score, decimals),
        category=submission.category,
        risk_level=submission.risk_level,
        status=submission.status,
        breakdown=BreakdownSchema.from_breakdown(breakdown, decimals),
        recommendations=submission.recommendations,
        responses=responses,
        submitted_at=submission.submitted_at.isoformat(),
    )
