"""Owner dashboard: current-month collection figures, unit occupancy, alerts.

Pure functions. ``today`` is passed in so results are reproducible.
"""

from datetime import date
from decimal import Decimal

from gestionloc.engine.indexes import SnapshotIndex
from gestionloc.engine.occupancy import capacity
from gestionloc.engine.profit import percent_of
from gestionloc.models.entities import EntitySnapshot, Payment, PaymentStatus, Tenant
from gestionloc.models.results import DashboardOverview, Period, PropertyRevenue

ZERO = Decimal("0")
OUTSTANDING = (PaymentStatus.PENDING, PaymentStatus.LATE, PaymentStatus.OVERDUE)


def _collection(payments: list[Payment]) -> tuple[Decimal, Decimal, Decimal]:
    """(total amount, paid amount, paid count as % of count)."""
    paid = [p for p in payments if p.status is PaymentStatus.PAID]
    total = sum((p.amount for p in payments), ZERO)
    paid_amount = sum((p.amount for p in paid), ZERO)
    rate = percent_of(Decimal(len(paid)), Decimal(len(payments)))
    return total, paid_amount, rate


def expiring_leases(tenants: list[Tenant], today: date, window_days: int = 60) -> list[str]:
    """Ids of tenants whose lease ends 1..window_days days after today."""
    expiring = []
    for tenant in tenants:
        if tenant.lease_end is None:
            continue
        days_left = (tenant.lease_end - today).days
        if 0 < days_left <= window_days:
            expiring.append(tenant.id)
    return expiring


def build_dashboard(
    snapshot: EntitySnapshot, today: date, lease_window_days: int = 60
) -> DashboardOverview:
    period = Period.of(today)
    index = SnapshotIndex.build(snapshot.units, snapshot.tenants)
    month_payments = [p for p in snapshot.payments if period.contains(p.due_date)]

    potential, actual, completion = _collection(month_payments)
    pending = sum((p.amount for p in month_payments if p.status in OUTSTANDING), ZERO)

    revenue_by_property = []
    total_units = 0
    occupied_units = 0
    for prop in snapshot.properties:
        tenant_ids = {t.id for t in index.tenants_of(prop.id)}
        prop_payments = [p for p in month_payments if p.tenant_id in tenant_ids]
        total, paid, rate = _collection(prop_payments)
        revenue_by_property.append(
            PropertyRevenue(
                property_id=prop.id,
                property_name=prop.name,
                total_revenue=total,
                paid_revenue=paid,
                completion_rate=rate,
                tenant_count=len(tenant_ids),
            )
        )
        units, occupied = capacity(prop, index)
        total_units += units
        occupied_units += occupied

    statuses = [p.status for p in snapshot.payments]

    return DashboardOverview(
        period=period,
        total_properties=len(snapshot.properties),
        potential_revenue=potential,
        actual_revenue=actual,
        pending_revenue=pending,
        payment_completion_rate=completion,
        revenue_by_property=revenue_by_property,
        total_units=total_units,
        occupied_units=occupied_units,
        available_units=total_units - occupied_units,
        occupancy_rate=percent_of(Decimal(occupied_units), Decimal(total_units)),
        late_payments=sum(
            1 for s in statuses if s in (PaymentStatus.LATE, PaymentStatus.OVERDUE)
        ),
        overdue_payments=statuses.count(PaymentStatus.OVERDUE),
        pending_payments=statuses.count(PaymentStatus.PENDING),
        expiring_leases=expiring_leases(snapshot.tenants, today, lease_window_days),
    )
