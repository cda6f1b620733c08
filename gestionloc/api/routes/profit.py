"""Profitability routes: portfolio summary, per-property analysis, advice, projections, trend."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from gestionloc.api.deps import get_stored_snapshot, to_entities
from gestionloc.api.schemas import (
    PeriodRequest,
    PeriodResponse,
    PortfolioProfitResponse,
    ProjectionPointResponse,
    ProjectionRequest,
    ProjectionsResponse,
    PropertyProfitResponse,
    RecommendationsResponse,
    SnapshotIn,
    TrendPointResponse,
    TrendRequest,
    TrendResponse,
)
from gestionloc.config import settings
from gestionloc.data.cache import cached
from gestionloc.engine.profit import calculate_portfolio_profit
from gestionloc.engine.projections import calculate_projections
from gestionloc.engine.recommendations import generate_recommendations
from gestionloc.engine.trend import calculate_for_property, calculate_trend
from gestionloc.models.entities import EntitySnapshot
from gestionloc.models.results import Period, PropertyProfitAnalysis

router = APIRouter(prefix="/api/v1/profit", tags=["profit"])


def _portfolio(snapshot: EntitySnapshot, month: int, year: int) -> PortfolioProfitResponse:
    summary = calculate_portfolio_profit(
        snapshot.properties,
        snapshot.units,
        snapshot.tenants,
        snapshot.payments,
        snapshot.expenses,
        month,
        year,
    )
    return PortfolioProfitResponse.model_validate(summary)


@cached("profit:portfolio")
async def portfolio_payload(raw_snapshot: dict, month: int, year: int) -> dict:
    """JSON-ready portfolio summary; cached per (snapshot, period) when enabled."""
    snapshot = to_entities(SnapshotIn.model_validate(raw_snapshot))
    return _portfolio(snapshot, month, year).model_dump(mode="json")


def _analysis_or_404(req: PeriodRequest, property_id: str) -> PropertyProfitAnalysis:
    snapshot = to_entities(req.snapshot)
    analysis = calculate_for_property(snapshot, property_id, Period(req.month, req.year))
    if analysis is None:
        raise HTTPException(status_code=404, detail=f"Unknown property {property_id}")
    return analysis


@router.post("/portfolio", response_model=PortfolioProfitResponse)
async def portfolio_profit(req: PeriodRequest):
    """Portfolio summary for one month from the posted snapshot."""
    return await portfolio_payload(req.snapshot.model_dump(), req.month, req.year)


@router.get("/portfolio", response_model=PortfolioProfitResponse)
async def stored_portfolio_profit(
    month: int | None = Query(None, ge=0, le=11),
    year: int | None = Query(None, ge=1900, le=9999),
    snapshot: EntitySnapshot = Depends(get_stored_snapshot),
):
    """Portfolio summary from the configured export; defaults to the current month."""
    current = Period.of(date.today())
    return _portfolio(
        snapshot,
        current.month if month is None else month,
        current.year if year is None else year,
    )


@router.post("/property/{property_id}", response_model=PropertyProfitResponse)
async def property_profit(property_id: str, req: PeriodRequest):
    return PropertyProfitResponse.model_validate(_analysis_or_404(req, property_id))


@router.post("/property/{property_id}/recommendations", response_model=RecommendationsResponse)
async def property_recommendations(property_id: str, req: PeriodRequest):
    analysis = _analysis_or_404(req, property_id)
    return RecommendationsResponse(
        property_id=property_id,
        period=PeriodResponse.model_validate(analysis.period),
        recommendations=generate_recommendations(analysis),
    )


@router.post("/property/{property_id}/projections", response_model=ProjectionsResponse)
async def property_projections(property_id: str, req: ProjectionRequest):
    analysis = _analysis_or_404(req, property_id)
    months_ahead = req.months_ahead
    if months_ahead is None:
        months_ahead = settings.default_projection_months
    points = calculate_projections(analysis, months_ahead)
    return ProjectionsResponse(
        property_id=property_id,
        projections=[ProjectionPointResponse.model_validate(p) for p in points],
    )


@router.post("/property/{property_id}/trend", response_model=TrendResponse)
async def property_trend(property_id: str, req: TrendRequest):
    snapshot = to_entities(req.snapshot)
    if snapshot.get_property(property_id) is None:
        raise HTTPException(status_code=404, detail=f"Unknown property {property_id}")
    months_back = req.months_back
    if months_back is None:
        months_back = settings.default_trend_months
    points = calculate_trend(snapshot, property_id, Period(req.month, req.year), months_back)
    return TrendResponse(
        property_id=property_id,
        points=[TrendPointResponse.model_validate(p) for p in points],
    )
