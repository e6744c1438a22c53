# backend/routes/jobs.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from database import get_db
from models.jobs import Job
from schemas.job import EmployerOut, JobCreate, JobOut
from utils.audit import write_log, client_ip

router = APIRouter(prefix="/api/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


# Map Job model to JobOut schema, resolving the employer to id and name
def _job_to_out(job: Job) -> JobOut:
    employer = None
    if job.employer is not None:
        employer = EmployerOut(id=job.employer.id, name=job.employer.name)
    return JobOut(
        id=job.id,
        title=job.title,
        description=job.description,
        employer=employer,
        bids=[u.id for u in job.bids],
        created_at=job.created_at,
    )


# Create a job posting. The employer's role is not checked.
@router.post("", response_model=JobOut, status_code=status.HTTP_201_CREATED)
def create_job(payload: JobCreate, request: Request, db: Session = Depends(get_db)):
    try:
        job = Job(
            title=payload.title,
            description=payload.description,
            employer_id=payload.employer_id,
        )
        db.add(job)
        db.commit()
        db.refresh(job)
        out = _job_to_out(job)
    except Exception as e:
        db.rollback()
        logger.exception("Failed to create job for employer %s: %s", payload.employer_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")

    try:
        write_log(
            db,
            user_id=job.employer_id if job.employer is not None else None,
            action="JOB_CREATE",
            resource="jobs",
            ip=client_ip(request),
            meta={"job_id": out.id},
        )
    except Exception as e:
        db.rollback()
        logger.exception("Failed to write audit log: %s", e)

    return out


# List every job with its employer's name, in storage order
@router.get("", response_model=List[JobOut])
def list_jobs(db: Session = Depends(get_db)):
    try:
        return [_job_to_out(job) for job in db.query(Job).all()]
    except Exception as e:
        logger.exception("Failed to list jobs: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")
