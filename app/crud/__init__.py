"""
Data access for the API.

Each module wraps the SQL for one table and returns schema objects,
keeping SQL out of the endpoints.
"""

from app.crud import company, job

__all__ = ["company", "job"]
