import logging
from typing import Annotated
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.crud import job as job_crud
from app.schemas.job import (
    JobCreateRequest,
    JobDeletedResponse,
    JobDetailEnvelope,
    JobEnvelope,
    JobListEnvelope,
    JobSearchParams,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(get_admin_user)
):
    """
    Create a new job posting.

    Authorization required: admin
    """
    job = job_crud.create(db, request)
    logger.info(f"Job {job.id} created by {admin_user['sub']}")
    return {"job": job}


@router.get("/", response_model=JobListEnvelope)
def list_jobs(
    filters: Annotated[JobSearchParams, Query()],
    db: Session = Depends(get_db)
):
    """
    List jobs ordered by title.

    Optional filters (combined with AND):
    - min_salary: only jobs paying at least this amount
    - has_equity: only jobs with non-zero equity (only the value `true` filters)
    - title: case-insensitive substring match on the title
    """
    jobs = job_crud.find_all(db, **filters.model_dump())
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID, with its company nested under `company`.
    """
    return {"job": job_crud.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(get_admin_user)
):
    """
    Partially update a job. Only the fields sent are changed.

    Fields can be: title, salary, equity

    Authorization required: admin
    """
    job = job_crud.update(db, job_id, request.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete("/{job_id}", response_model=JobDeletedResponse)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(get_admin_user)
):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    job_crud.remove(db, job_id)
    return {"deleted": job_id}
