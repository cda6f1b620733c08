"""Monthly rent ledger: the payment each tenant owes for the current month."""

import calendar
import uuid
from datetime import date, datetime
from typing import Callable

from gestionloc.models.entities import Payment, PaymentStatus, Tenant
from gestionloc.models.results import Period


def due_date_for(tenant: Tenant, period: Period) -> date:
    """Tenant's due day in the period, clamped to the month's last day."""
    last_day = calendar.monthrange(period.year, period.month + 1)[1]
    day = min(max(tenant.payment_due_day, 1), last_day)
    return date(period.year, period.month + 1, day)


def generate_monthly_payments(
    tenants: list[Tenant],
    payments: list[Payment],
    today: date,
    id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
) -> list[Payment]:
    """New payments for tenants not yet billed in today's month.

    Returns only the new records; existing payments are left untouched.
    A payment created after its due date starts out late.
    """
    period = Period.of(today)
    billed = {p.tenant_id for p in payments if period.contains(p.due_date)}

    created = []
    for tenant in tenants:
        if tenant.id in billed:
            continue
        due = due_date_for(tenant, period)
        created.append(
            Payment(
                id=id_factory(),
                tenant_id=tenant.id,
                amount=tenant.monthly_rent,
                due_date=due,
                status=PaymentStatus.LATE if today > due else PaymentStatus.PENDING,
                created_at=datetime.combine(today, datetime.min.time()),
            )
        )
        billed.add(tenant.id)
    return created
