"""Which pending payments are due a reminder today.

Selection only: composing and sending the message belongs to the caller.
Configuration is an immutable value passed to every call.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from gestionloc.models.entities import Payment, PaymentStatus, Tenant
from gestionloc.models.results import ReminderCandidate


@dataclass(frozen=True)
class ReminderConfig:
    days_before: tuple[int, ...] = (2, 0)  # 2 days ahead and on the due date
    enabled: bool = True


def days_until_due(payment: Payment, today: date) -> int:
    return (payment.due_date - today).days


def payment_history_rating(tenant_id: str, payments: list[Payment]) -> str:
    """Coarse payment track record: new, excellent, good or average."""
    own = [p for p in payments if p.tenant_id == tenant_id]
    if not own:
        return "new"
    paid_share = Decimal(sum(1 for p in own if p.status is PaymentStatus.PAID)) / len(own)
    if paid_share > Decimal("0.9"):
        return "excellent"
    if paid_share > Decimal("0.7"):
        return "good"
    return "average"


def select_due_reminders(
    payments: list[Payment],
    tenants: list[Tenant],
    today: date,
    config: ReminderConfig = ReminderConfig(),
) -> list[ReminderCandidate]:
    if not config.enabled:
        return []

    tenant_ids = {t.id for t in tenants}
    candidates = []
    for payment in payments:
        if payment.status is not PaymentStatus.PENDING:
            continue
        if payment.tenant_id not in tenant_ids:
            continue
        days = days_until_due(payment, today)
        if days not in config.days_before:
            continue
        same_day = days == 0
        candidates.append(
            ReminderCandidate(
                payment_id=payment.id,
                tenant_id=payment.tenant_id,
                amount=payment.amount,
                due_date=payment.due_date,
                days_until_due=days,
                kind="same_day" if same_day else "advance",
                urgency="high" if same_day else "medium",
                history=payment_history_rating(payment.tenant_id, payments),
            )
        )
    return candidates
