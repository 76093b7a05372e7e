"""Health check endpoint with database connectivity check."""

from fastapi import APIRouter

from inkwell import __version__
from inkwell.api.deps import DbDep
from inkwell.core.config import settings
from inkwell.core.database import check_db_connected
from inkwell.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: DbDep) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    return HealthResponse(
        version=__version__,
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
