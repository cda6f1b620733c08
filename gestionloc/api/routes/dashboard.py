"""Owner dashboard route."""

from datetime import date

from fastapi import APIRouter

from gestionloc.api.deps import to_entities
from gestionloc.api.schemas import DashboardRequest, DashboardResponse
from gestionloc.config import settings
from gestionloc.engine.dashboard import build_dashboard

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.post("", response_model=DashboardResponse)
async def dashboard(req: DashboardRequest):
    """Current-month collection, unit occupancy and alert counts."""
    snapshot = to_entities(req.snapshot)
    overview = build_dashboard(
        snapshot,
        req.today or date.today(),
        lease_window_days=settings.lease_expiry_window_days,
    )
    return DashboardResponse.model_validate(overview)
