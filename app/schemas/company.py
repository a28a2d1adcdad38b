"""
Pydantic schemas for Company data nested in job responses.
"""

from typing import Optional
from pydantic import BaseModel


class CompanyResponse(BaseModel):
    """Company as embedded in a job detail response."""
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None

    class Config:
        from_attributes = True
        frozen = True
