from datetime import datetime
from typing import Any
import logging

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.candidate import Candidate
from ..schemas.candidate import CandidateUpdate
from ..services.candidates import (
    create_candidate as create_candidate_row,
    delete_candidate as delete_candidate_row,
    list_candidates as list_candidate_rows,
    update_candidate as update_candidate_row,
)
from ..utils.validation import validate_candidate_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/candidates", tags=["Candidates"])


def _candidate_to_public(candidate: Candidate) -> dict:
    # Keys mirror the table columns; the dashboard reads `applied_position`.
    created_at = getattr(candidate, "created_at", None)
    return {
        "id": int(candidate.id),
        "name": candidate.name,
        "age": candidate.age,
        "email": candidate.email,
        "phone": candidate.phone,
        "skills": candidate.skills,
        "experience": candidate.experience,
        "applied_position": candidate.applied_position,
        "status": candidate.status,
        "created_at": created_at.isoformat() if isinstance(created_at, datetime) else created_at,
    }


@router.get("")
def list_candidates(db: Session = Depends(get_db)):
    return [_candidate_to_public(c) for c in list_candidate_rows(db)]


@router.post("", status_code=201)
def create_candidate(payload: Any = Body(default=None), db: Session = Depends(get_db)):
    record = validate_candidate_payload(payload)
    candidate = create_candidate_row(db, record)
    return _candidate_to_public(candidate)


@router.put("/{candidate_id}")
def update_candidate(candidate_id: int, payload: CandidateUpdate, db: Session = Depends(get_db)):
    candidate = update_candidate_row(
        db,
        candidate_id,
        name=payload.name,
        status=payload.status,
        experience=payload.experience,
    )
    if candidate is None:
        # No matching row: answer 200 with an empty body rather than 404.
        return Response(status_code=200)
    return _candidate_to_public(candidate)


@router.delete("/{candidate_id}", status_code=204)
def delete_candidate(candidate_id: int, db: Session = Depends(get_db)):
    delete_candidate_row(db, candidate_id)
    return Response(status_code=204)
