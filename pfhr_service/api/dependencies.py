"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from pfhr_service.infrastructure.database.repositories import SubmissionRepository
from pfhr_service.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_submission_repository(db: Session = Depends(get_db)) -> SubmissionRepository:
    """Provide a submission repository bound to the request's session"""
    return SubmissionRepository(db)
