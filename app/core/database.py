import logging
import re
from typing import Any, Dict, List, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import Session, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
    pool_size=10,
    max_overflow=20
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()

_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Imports the models so their tables are registered on Base.metadata.
    Schema changes are applied outside the application.
    """
    from app.models import job, company  # noqa: F401


def run_query(db: Session, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """
    Execute SQL written with positional ``$n`` placeholders.

    The placeholders are rewritten to SQLAlchemy bind names (``$1`` -> ``:p1``)
    so the same statement text runs on every dialect SQLAlchemy supports.

    Args:
        db: Database session
        sql: Statement text using ``$1``, ``$2``, ... placeholders
        params: Values for the placeholders, in order

    Returns:
        Rows as plain dicts keyed by column label

    Raises:
        ValueError: If the placeholders and the parameter list disagree
    """
    numbers = {int(n) for n in _PLACEHOLDER_RE.findall(sql)}
    if numbers != set(range(1, len(params) + 1)):
        raise ValueError(
            f"SQL uses placeholders {sorted(numbers)} but {len(params)} parameter(s) were given"
        )

    bound_sql = _PLACEHOLDER_RE.sub(lambda m: f":p{m.group(1)}", sql)
    bind_params = {f"p{i}": value for i, value in enumerate(params, start=1)}

    logger.debug("Executing query with %d parameter(s)", len(bind_params))
    result = db.execute(text(bound_sql), bind_params)
    return [dict(row) for row in result.mappings()]
