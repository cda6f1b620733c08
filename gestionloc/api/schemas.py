"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from gestionloc.data.snapshot import parse_snapshot
from gestionloc.models.entities import EntitySnapshot


# ---- Request schemas ----

class SnapshotIn(BaseModel):
    """Entity records as stored by the web app (camelCase keys)."""
    properties: list[dict[str, Any]] = []
    units: list[dict[str, Any]] = []
    tenants: list[dict[str, Any]] = []
    payments: list[dict[str, Any]] = []
    expenses: list[dict[str, Any]] = []

    def to_entities(self) -> EntitySnapshot:
        return parse_snapshot(self.model_dump())


class PeriodRequest(BaseModel):
    snapshot: SnapshotIn = Field(default_factory=SnapshotIn)
    month: int = Field(..., ge=0, le=11, description="Zero-based month (0 = January)")
    year: int = Field(..., ge=1900, le=9999)


class ProjectionRequest(PeriodRequest):
    months_ahead: int | None = Field(None, ge=0, le=120)


class TrendRequest(PeriodRequest):
    months_back: int | None = Field(None, ge=0, le=120)


class DashboardRequest(BaseModel):
    snapshot: SnapshotIn = Field(default_factory=SnapshotIn)
    today: date | None = Field(None, description="Reference date, defaults to today")


class GeneratePaymentsRequest(DashboardRequest):
    pass


class ReminderRequest(DashboardRequest):
    days_before: list[int] | None = Field(None, description="Override configured offsets")


# ---- Response schemas ----

class _FromEngine(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PeriodResponse(_FromEngine):
    month: int
    year: int


class RevenuesResponse(_FromEngine):
    total_rent: Decimal
    paid_rent: Decimal
    pending_rent: Decimal
    occupancy_rate: Decimal


class ExpensesResponse(_FromEngine):
    mortgage: Decimal
    fixed_charges: Decimal
    maintenance: Decimal
    other: Decimal
    total: Decimal


class NetProfitResponse(_FromEngine):
    gross: Decimal
    net: Decimal
    margin: Decimal


class ROIResponse(_FromEngine):
    monthly: Decimal
    annual: Decimal


class PropertyProfitResponse(_FromEngine):
    property_id: str
    property_name: str
    period: PeriodResponse
    revenues: RevenuesResponse
    expenses: ExpensesResponse
    net_profit: NetProfitResponse
    cash_flow: Decimal
    roi: ROIResponse


class PortfolioProfitResponse(_FromEngine):
    period: PeriodResponse
    total_revenues: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    average_margin: Decimal
    total_cash_flow: Decimal
    properties: list[PropertyProfitResponse]
    top_performers: list[PropertyProfitResponse]
    under_performers: list[PropertyProfitResponse]


class RecommendationsResponse(BaseModel):
    property_id: str
    period: PeriodResponse
    recommendations: list[str]


class ProjectionPointResponse(_FromEngine):
    month: int
    year: int
    projected_profit: Decimal
    projected_cash_flow: Decimal


class ProjectionsResponse(BaseModel):
    property_id: str
    projections: list[ProjectionPointResponse]


class TrendPointResponse(_FromEngine):
    month: int
    year: int
    net_profit: Decimal
    margin: Decimal
    cash_flow: Decimal


class TrendResponse(BaseModel):
    property_id: str
    points: list[TrendPointResponse]


class PropertyRevenueResponse(_FromEngine):
    property_id: str
    property_name: str
    total_revenue: Decimal
    paid_revenue: Decimal
    completion_rate: Decimal
    tenant_count: int


class DashboardResponse(_FromEngine):
    period: PeriodResponse
    total_properties: int
    potential_revenue: Decimal
    actual_revenue: Decimal
    pending_revenue: Decimal
    payment_completion_rate: Decimal
    revenue_by_property: list[PropertyRevenueResponse]
    total_units: int
    occupied_units: int
    available_units: int
    occupancy_rate: Decimal
    late_payments: int
    overdue_payments: int
    pending_payments: int
    expiring_leases: list[str]


class PaymentResponse(BaseModel):
    id: str
    tenant_id: str
    amount: Decimal
    due_date: date
    status: str


class ReminderCandidateResponse(_FromEngine):
    payment_id: str
    tenant_id: str
    amount: Decimal
    due_date: date
    days_until_due: int
    kind: str
    urgency: str
    history: str
