from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class PropertyType(Enum):
    ENTIRE = "entire"
    SHARED = "shared"


class UnitStatus(Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    LATE = "late"
    OVERDUE = "overdue"


class ExpenseType(Enum):
    MAINTENANCE = "maintenance"
    RENOVATION = "renovation"
    UTILITIES = "utilities"
    INSURANCE = "insurance"
    TAXES = "taxes"
    OTHER = "other"


@dataclass(frozen=True)
class Property:
    id: str
    name: str
    type: PropertyType = PropertyType.ENTIRE
    monthly_mortgage: Decimal = Decimal("0")
    monthly_fixed_charges: Decimal = Decimal("0")
    purchase_price: Decimal | None = None
    rent: Decimal | None = None  # Entire properties only
    address: str = ""


@dataclass(frozen=True)
class Unit:
    id: str
    property_id: str
    name: str = ""
    rent: Decimal = Decimal("0")
    status: UnitStatus = UnitStatus.AVAILABLE


@dataclass(frozen=True)
class Tenant:
    """An active occupancy: the row existing is what marks the slot as occupied."""
    id: str
    property_id: str
    unit_id: str | None = None
    user_id: str | None = None
    monthly_rent: Decimal = Decimal("0")
    payment_due_day: int = 1  # Day of month
    lease_start: date | None = None
    lease_end: date | None = None


@dataclass(frozen=True)
class Payment:
    id: str
    tenant_id: str
    amount: Decimal
    due_date: date
    status: PaymentStatus = PaymentStatus.PENDING
    paid_date: date | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class Expense:
    id: str
    amount: Decimal
    date: date
    type: ExpenseType = ExpenseType.OTHER
    property_id: str | None = None
    unit_id: str | None = None
    issue_id: str | None = None
    description: str = ""


@dataclass(frozen=True)
class EntitySnapshot:
    """Read-only view of the entity store at one point in time."""
    properties: list[Property] = field(default_factory=list)
    units: list[Unit] = field(default_factory=list)
    tenants: list[Tenant] = field(default_factory=list)
    payments: list[Payment] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)

    def get_property(self, property_id: str) -> Property | None:
        for prop in self.properties:
            if prop.id == property_id:
                return prop
        return None
