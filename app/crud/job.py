"""
Data access for jobs.

Every statement is raw, parameterized SQL run through run_query; the
listing query and the partial update are assembled from the caller's input.
"""

import logging
from typing import Any, List, Mapping, Optional
from sqlalchemy.orm import Session

from app.core.database import run_query
from app.core.exceptions import BadRequestError, NotFoundError
from app.crud import company as company_crud
from app.crud.sql import SqlFragment, placeholder, sql_for_partial_update
from app.schemas.job import JobCreateRequest, JobDetail, JobListItem, JobResponse

logger = logging.getLogger(__name__)

# Columns a partial update may touch
JOB_UPDATE_FIELDS = ("title", "salary", "equity")

# Job columns shared by RETURNING clauses and single-row reads
_JOB_COLUMNS = "id, title, salary, equity, company_handle"

_LIST_BASE_QUERY = """SELECT j.id,
                        j.title,
                        j.salary,
                        j.equity,
                        j.company_handle,
                        c.name AS company_name
                 FROM jobs j
                   LEFT JOIN companies AS c ON c.handle = j.company_handle"""


def build_list_query(
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None,
    title: Optional[str] = None,
) -> SqlFragment:
    """
    Build the job listing query for the given filters.

    Filters are checked in a fixed order (min_salary, has_equity, title) and
    placeholders are numbered by how many parameters came before, so the
    title filter alone is ``$1``. ``has_equity`` filters only when it is
    exactly True and adds no parameter.

    Returns:
        The full SELECT statement and its parameters
    """
    where_clauses: List[str] = []
    where_values: List[Any] = []

    if min_salary is not None:
        where_values.append(min_salary)
        where_clauses.append(f"salary >= {placeholder(len(where_values))}")

    if has_equity is True:
        where_clauses.append("equity > 0")

    if title is not None:
        where_values.append(f"%{title}%")
        where_clauses.append(f"title ILIKE {placeholder(len(where_values))}")

    query = _LIST_BASE_QUERY
    if where_clauses:
        query += " WHERE " + " AND ".join(where_clauses)
    query += " ORDER BY title"

    return SqlFragment(clause=query, values=tuple(where_values))


def create(db: Session, job_data: JobCreateRequest) -> JobResponse:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        The created job, including its new id

    Raises:
        BadRequestError: If the owning company does not exist
    """
    if company_crud.get(db, job_data.company_handle) is None:
        raise BadRequestError(f"Company not found: {job_data.company_handle}")

    rows = run_query(
        db,
        f"""INSERT INTO jobs (title,
                             salary,
                             equity,
                             company_handle)
           VALUES ($1, $2, $3, $4)
           RETURNING {_JOB_COLUMNS}""",
        [job_data.title, job_data.salary, job_data.equity, job_data.company_handle],
    )
    db.commit()

    job = JobResponse.model_validate(rows[0])
    logger.info(f"Created job {job.id}: {job.title} ({job.company_handle})")
    return job


def find_all(
    db: Session,
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None,
    title: Optional[str] = None,
) -> List[JobListItem]:
    """
    List jobs ordered by title, optionally filtered.

    Args:
        db: Database session
        min_salary: Only jobs paying at least this much
        has_equity: When True, only jobs offering non-zero equity
        title: Case-insensitive substring the title must contain

    Returns:
        Matching jobs with their company names
    """
    query, values = build_list_query(min_salary=min_salary, has_equity=has_equity, title=title)
    logger.debug(f"Listing jobs with {len(values)} filter parameter(s)")
    return [JobListItem.model_validate(row) for row in run_query(db, query, values)]


def get(db: Session, job_id: int) -> JobDetail:
    """
    Retrieve a job by its ID, with its company nested in the result.

    Raises:
        NotFoundError: If no job has this id
    """
    rows = run_query(
        db,
        f"""SELECT {_JOB_COLUMNS}
           FROM jobs
           WHERE id = $1""",
        [job_id],
    )
    if not rows:
        raise NotFoundError(f"Job not found: {job_id}")

    job = rows[0]
    return JobDetail(
        id=job["id"],
        title=job["title"],
        salary=job["salary"],
        equity=job["equity"],
        company=company_crud.get(db, job["company_handle"]),
    )


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> JobResponse:
    """
    Update only the fields present in ``data``.

    Args:
        db: Database session
        job_id: Job ID to update
        data: Fields to change; keys must be in JOB_UPDATE_FIELDS

    Returns:
        The updated job

    Raises:
        BadRequestError: If ``data`` names a field that cannot be updated
        MissingDataError: If ``data`` is empty
        NotFoundError: If no job has this id
    """
    unknown = [key for key in data if key not in JOB_UPDATE_FIELDS]
    if unknown:
        raise BadRequestError(f"Cannot update field(s): {', '.join(unknown)}")

    set_cols, values = sql_for_partial_update(data, {})
    id_var_idx = placeholder(len(values) + 1)

    rows = run_query(
        db,
        f"""UPDATE jobs
           SET {set_cols}
           WHERE id = {id_var_idx}
           RETURNING {_JOB_COLUMNS}""",
        [*values, job_id],
    )
    if not rows:
        raise NotFoundError(f"Job not found: {job_id}")
    db.commit()

    logger.info(f"Updated job {job_id}: {', '.join(data)}")
    return JobResponse.model_validate(rows[0])


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has this id
    """
    rows = run_query(
        db,
        """DELETE
           FROM jobs
           WHERE id = $1
           RETURNING id""",
        [job_id],
    )
    if not rows:
        raise NotFoundError(f"Job not found: {job_id}")
    db.commit()

    logger.info(f"Deleted job {job_id}")
