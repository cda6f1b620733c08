"""Rent ledger routes: monthly payment generation and reminder selection."""

import logging
from datetime import date

from fastapi import APIRouter, Depends

from gestionloc.api.deps import get_reminder_config, to_entities
from gestionloc.api.schemas import (
    GeneratePaymentsRequest,
    PaymentResponse,
    ReminderCandidateResponse,
    ReminderRequest,
)
from gestionloc.engine.billing import generate_monthly_payments
from gestionloc.engine.reminders import ReminderConfig, select_due_reminders

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/payments", tags=["payments"])


@router.post("/generate", response_model=list[PaymentResponse])
async def generate_payments(req: GeneratePaymentsRequest):
    """Payments to create for tenants not yet billed this month. Nothing is persisted."""
    snapshot = to_entities(req.snapshot)
    created = generate_monthly_payments(
        snapshot.tenants, snapshot.payments, req.today or date.today()
    )
    logger.info("Generated %d monthly payment(s)", len(created))
    return [
        PaymentResponse(
            id=p.id,
            tenant_id=p.tenant_id,
            amount=p.amount,
            due_date=p.due_date,
            status=p.status.value,
        )
        for p in created
    ]


@router.post("/reminders", response_model=list[ReminderCandidateResponse])
async def due_reminders(
    req: ReminderRequest,
    config: ReminderConfig = Depends(get_reminder_config),
):
    """Pending payments that should get a reminder on the reference date."""
    snapshot = to_entities(req.snapshot)
    if req.days_before is not None:
        config = ReminderConfig(days_before=tuple(req.days_before), enabled=config.enabled)
    candidates = select_due_reminders(
        snapshot.payments, snapshot.tenants, req.today or date.today(), config
    )
    return [ReminderCandidateResponse.model_validate(c) for c in candidates]
