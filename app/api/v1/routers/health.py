from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.db.session import get_db
from app.utils.decorators import log_request

logger = get_logger(__name__)

router = APIRouter()

@router.get("/health")
@log_request
async def health_check():
    """Checks the health of the application."""
    return {"status": "ok"}


@router.get("/health/db")
@log_request
def database_health_check(db: Session = Depends(get_db)):
    """Checks that a connection to the database can be established."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, "Database unreachable.")
    return {"status": "ok", "database": "reachable"}
