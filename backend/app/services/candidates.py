"""
Persistence operations for the candidates table.

Each function runs one unit of work on the given session and commits it.
Any failure raised by the store or its driver is rolled back and re-raised as
an AppError subclass (DuplicateEmailError for the email constraint,
DatabaseError otherwise).
"""
import logging

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from ..models.candidate import Candidate
from ..schemas.candidate import CandidateCreate
from ..utils.error_handlers import handle_database_error

logger = logging.getLogger(__name__)


def list_candidates(db: Session) -> list[Candidate]:
    try:
        return (
            db.query(Candidate)
            .order_by(Candidate.created_at.desc(), Candidate.id.desc())
            .all()
        )
    except Exception as e:
        db.rollback()
        raise handle_database_error(e, "listing candidates") from e


def create_candidate(db: Session, record: CandidateCreate) -> Candidate:
    candidate = Candidate(**record.as_row())
    try:
        db.add(candidate)
        db.commit()
        db.refresh(candidate)
    except Exception as e:
        db.rollback()
        raise handle_database_error(e, "creating candidate") from e

    logger.info("Created candidate id=%s", candidate.id)
    return candidate


def update_candidate(
    db: Session,
    candidate_id: int,
    *,
    name: str,
    status: str,
    experience: int,
) -> Candidate | None:
    """
    Overwrite name, status and experience on one row with a single UPDATE.

    Returns None when no row has `candidate_id` (including a row deleted by a
    concurrent request); callers treat that as a no-op.
    """
    stmt = (
        update(Candidate)
        .where(Candidate.id == candidate_id)
        .values(name=name, status=status, experience=experience)
        .execution_options(synchronize_session=False)
    )
    try:
        matched = db.execute(stmt).rowcount
        db.commit()
        # Everything is expired after commit, so this reloads the row.
        candidate = db.get(Candidate, candidate_id) if matched else None
    except Exception as e:
        db.rollback()
        raise handle_database_error(e, "updating candidate") from e

    if candidate is None:
        logger.warning("Update skipped: candidate id=%s does not exist", candidate_id)
    return candidate


def delete_candidate(db: Session, candidate_id: int) -> int:
    """Hard-delete one row. Returns the number of rows removed (0 is fine)."""
    stmt = (
        delete(Candidate)
        .where(Candidate.id == candidate_id)
        .execution_options(synchronize_session=False)
    )
    try:
        deleted = db.execute(stmt).rowcount
        db.commit()
    except Exception as e:
        db.rollback()
        raise handle_database_error(e, "deleting candidate") from e

    if deleted:
        logger.info("Deleted candidate id=%s", candidate_id)
    return deleted
