"""Health check endpoint with database and storage checks."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(request: Request, db: Session = Depends(get_db)) -> HealthResponse:
    """
    Return service health status, database connectivity and storage availability.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"
    storage_status = (
        "configured" if getattr(request.app.state, "storage", None) is not None else "unavailable"
    )

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database=db_status,
        storage=storage_status,
    )
