from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Period:
    """A calendar month. ``month`` is zero-based (0 = January)."""
    month: int
    year: int

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise ValueError(f"month must be in 0..11, got {self.month}")

    @classmethod
    def of(cls, d: date) -> "Period":
        return cls(month=d.month - 1, year=d.year)

    def contains(self, d: date) -> bool:
        return d.year == self.year and d.month - 1 == self.month

    def shift(self, months: int) -> "Period":
        """Period ``months`` later (negative for earlier), rolling the year over."""
        index = self.year * 12 + self.month + months
        return Period(month=index % 12, year=index // 12)


@dataclass
class Revenues:
    total_rent: Decimal = Decimal("0")
    paid_rent: Decimal = Decimal("0")
    pending_rent: Decimal = Decimal("0")
    occupancy_rate: Decimal = Decimal("0")  # 0..100


@dataclass
class ExpenseBreakdown:
    mortgage: Decimal = Decimal("0")
    fixed_charges: Decimal = Decimal("0")
    maintenance: Decimal = Decimal("0")
    other: Decimal = Decimal("0")
    total: Decimal = Decimal("0")


@dataclass
class NetProfit:
    gross: Decimal = Decimal("0")  # Paid rent - mortgage - fixed charges
    net: Decimal = Decimal("0")  # Paid rent - all expenses
    margin: Decimal = Decimal("0")  # Net / paid rent, percent


@dataclass
class ReturnOnInvestment:
    monthly: Decimal = Decimal("0")  # Percent of purchase price
    annual: Decimal = Decimal("0")  # Monthly x 12, not compounded


@dataclass
class PropertyProfitAnalysis:
    property_id: str
    property_name: str
    period: Period
    revenues: Revenues = field(default_factory=Revenues)
    expenses: ExpenseBreakdown = field(default_factory=ExpenseBreakdown)
    net_profit: NetProfit = field(default_factory=NetProfit)
    cash_flow: Decimal = Decimal("0")
    roi: ReturnOnInvestment = field(default_factory=ReturnOnInvestment)


@dataclass
class PortfolioProfitSummary:
    period: Period
    total_revenues: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    net_profit: Decimal = Decimal("0")
    average_margin: Decimal = Decimal("0")
    total_cash_flow: Decimal = Decimal("0")
    properties: list[PropertyProfitAnalysis] = field(default_factory=list)
    top_performers: list[PropertyProfitAnalysis] = field(default_factory=list)
    under_performers: list[PropertyProfitAnalysis] = field(default_factory=list)

    def find(self, property_id: str) -> PropertyProfitAnalysis | None:
        for analysis in self.properties:
            if analysis.property_id == property_id:
                return analysis
        return None


@dataclass(frozen=True)
class ProjectionPoint:
    month: int
    year: int
    projected_profit: Decimal
    projected_cash_flow: Decimal


@dataclass(frozen=True)
class TrendPoint:
    month: int
    year: int
    net_profit: Decimal
    margin: Decimal
    cash_flow: Decimal


@dataclass
class PropertyRevenue:
    property_id: str
    property_name: str
    total_revenue: Decimal = Decimal("0")
    paid_revenue: Decimal = Decimal("0")
    completion_rate: Decimal = Decimal("0")
    tenant_count: int = 0


@dataclass
class DashboardOverview:
    period: Period
    total_properties: int = 0

    # Current month rent
    potential_revenue: Decimal = Decimal("0")
    actual_revenue: Decimal = Decimal("0")
    pending_revenue: Decimal = Decimal("0")  # Pending + late + overdue
    payment_completion_rate: Decimal = Decimal("0")
    revenue_by_property: list[PropertyRevenue] = field(default_factory=list)

    # Units (entire property = one unit)
    total_units: int = 0
    occupied_units: int = 0
    available_units: int = 0
    occupancy_rate: Decimal = Decimal("0")

    # Alerts, all periods
    late_payments: int = 0
    overdue_payments: int = 0
    pending_payments: int = 0
    expiring_leases: list[str] = field(default_factory=list)  # Tenant ids


@dataclass(frozen=True)
class ReminderCandidate:
    payment_id: str
    tenant_id: str
    amount: Decimal
    due_date: date
    days_until_due: int
    kind: str  # "advance" or "same_day"
    urgency: str  # "medium" or "high"
    history: str  # "new", "excellent", "good", "average"
