"""
Read access to companies, used to resolve a job's owning company.
"""

from typing import Optional
from sqlalchemy.orm import Session

from app.core.database import run_query
from app.schemas.company import CompanyResponse


def get(db: Session, handle: str) -> Optional[CompanyResponse]:
    """
    Retrieve a company by its handle.

    Returns:
        The company if found, None otherwise
    """
    rows = run_query(
        db,
        """SELECT handle,
                  name,
                  description,
                  num_employees,
                  logo_url
           FROM companies
           WHERE handle = $1""",
        [handle],
    )
    return CompanyResponse.model_validate(rows[0]) if rows else None
