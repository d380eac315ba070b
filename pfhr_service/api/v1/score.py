"""POST /v1/score - PFHR score calculation endpoint"""

import time
import logging
from typing import Any
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from pfhr_service.api.v1.schemas import BreakdownSchema, ErrorResponse, FieldErrorSchema, ScoreResponse
from pfhr_service.api.dependencies import get_request_id, get_submission_repository
from pfhr_service.config import settings
from pfhr_service.infrastructure.database.repositories import SubmissionRepository
from pfhr_service.domain.validation import parse_score_input
from pfhr_service.domain.scoring import compute_pfhr
from pfhr_service.domain.exceptions import ComputationError, FieldError, ValidationError
from pfhr_service.infrastructure.observability.metrics import record_score, validation_failures_counter
from pfhr_service.infrastructure.observability.logging import log_score

router = APIRouter()


async def read_json_body(request: Request) -> Any:
    """Decode the request body, reporting malformed JSON as a payload error"""
    try:
        return await request.json()
    except ValueError as e:
        raise ValidationError([FieldError(field="payload", message="Request body is not valid JSON")]) from e


@router.post(
    "/score",
    response_model=ScoreResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_score(
    request: Request,
    repo: SubmissionRepository = Depends(get_submission_repository),
):
    """
    Score a financial profile and store the submission.

    Flow:
    1. Decode the raw body and parse it into a validated ScoreInput
    2. Compute PFHR score, breakdown, category and recommendations
    3. Persist the submission (status "pending")
    4. Return the result rounded for display
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)
    db = repo.db

    try:
        payload = await read_json_body(request)
        inputs = parse_score_input(payload)
        result = compute_pfhr(inputs)

        submission = repo.create_submission(inputs, result)
        submission_id = str(submission.id)
        db.commit()

    except ValidationError as e:
        validation_failures_counter.inc()
        logging.warning(f"Invalid score input: {e}", extra={"request_id": request_id})
        body = ErrorResponse(
            error="Invalid input",
            details=[FieldErrorSchema(field=err.field, message=err.message) for err in e.errors],
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    except ComputationError as e:
        db.rollback()
        logging.error(f"PFHR computation error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Score computation failed")

    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Failed to save submission: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to save submission")

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_score(result.category.value, result.score)
    log_score(request_id, submission_id, result.score, result.category.value, duration_ms)

    decimals = settings.score_decimal_places
    return ScoreResponse(
        submission_id=submission_id,
        score=round(result.score, decimals),
        category=result.category.value,
        risk_level=result.risk_level.value,
        breakdown=BreakdownSchema.from_breakdown(result.breakdown, decimals),
        recommendations=list(result.recommendations),
    )
