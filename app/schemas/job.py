"""
Pydantic schemas for Job API requests/responses.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator

from app.schemas.company import CompanyResponse


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1, max_length=200)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1, description="Fraction of the company offered (0 to 1)")
    company_handle: str = Field(..., min_length=1, max_length=25)

    class Config:
        extra = "forbid"


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    Only title, salary and equity may change; the id and owning company are
    fixed once a job exists. Unknown keys are rejected, which keeps every key
    that reaches the SQL builder an application-defined column name.
    """
    title: str = Field(None, min_length=1, max_length=200)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)

    class Config:
        extra = "forbid"


class JobSearchParams(BaseModel):
    """Query string filters for listing jobs"""
    min_salary: Optional[int] = Field(None, ge=0)
    has_equity: bool = False
    title: Optional[str] = Field(None, max_length=200)

    class Config:
        extra = "forbid"

    @field_validator("has_equity", mode="before")
    @classmethod
    def parse_has_equity(cls, v: Any) -> bool:
        """Only an explicit ``true`` turns the equity filter on"""
        return v is True or v == "true"


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company_handle: str

    class Config:
        from_attributes = True
        frozen = True


class JobListItem(JobResponse):
    """Job row from the listing query, with the owning company's name"""
    company_name: Optional[str] = None


class JobDetail(BaseModel):
    """Single job with its company nested in place of the handle"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company: Optional[CompanyResponse] = None

    class Config:
        frozen = True


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetail


class JobListEnvelope(BaseModel):
    jobs: List[JobListItem]


class JobDeletedResponse(BaseModel):
    deleted: int
