# src/neta_promise/api/v1/endpoints/submissions.py
"""Visitor promise submissions."""

import logging

from fastapi import APIRouter, status

from neta_promise.models import Submission
from neta_promise.schemas.catalog import SubmissionCreate, SubmissionResponse

from ..dependencies import SessionDep

router = APIRouter(prefix="/submissions", tags=["submissions"])
logger = logging.getLogger(__name__)


@router.post("",
          response_model=SubmissionResponse,
          status_code=status.HTTP_201_CREATED)
async def create_submission(data: SubmissionCreate, db: SessionDep) -> Submission:
    """Queue a promise candidate for admin review."""
    submission = Submission(**data.model_dump())
    db.add(submission)
    db.commit()
    db.refresh(submission)
    logger.info("Received submission %d for %s", submission.id, submission.politician_name)
    return submission
