"""Entity snapshot ingestion from the web app's local-storage export.

The export is a JSON object keyed by storage key (``gestionloc_properties``,
``gestionloc_payments``, ...) with camelCase records. Bare keys
(``properties``, ``payments``, ...) are accepted too. Optional numeric fields
are defaulted here, once, so the engine never sees a missing amount.
"""

import json
import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Callable

from gestionloc.models.entities import (
    EntitySnapshot,
    Expense,
    ExpenseType,
    Payment,
    PaymentStatus,
    Property,
    PropertyType,
    Tenant,
    Unit,
    UnitStatus,
)

logger = logging.getLogger(__name__)

STORAGE_PREFIX = "gestionloc_"


class SnapshotError(ValueError):
    """A record in the export cannot be turned into an entity."""


def _decimal(value: Any, default: Decimal | None = Decimal("0")) -> Decimal | None:
    if value is None or value == "":
        return default
    try:
        number = Decimal(str(value))
    except InvalidOperation as e:
        raise SnapshotError(f"not a number: {value!r}") from e
    if not number.is_finite():
        raise SnapshotError(f"not a finite number: {value!r}")
    return number


def _int(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"not an integer: {value!r}") from e


def _date(value: Any) -> date | None:
    """ISO date or datetime string to its calendar date, as written (no tz shift)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as e:
        raise SnapshotError(f"not a date: {value!r}") from e


def _datetime(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as e:
        raise SnapshotError(f"not a datetime: {value!r}") from e


def _required_date(record: dict, key: str) -> date:
    value = _date(record.get(key))
    if value is None:
        raise SnapshotError(f"record {record.get('id')!r} has no {key}")
    return value


def _enum(enum_cls, value: Any, default):
    if value is None or value == "":
        return default
    try:
        return enum_cls(value)
    except ValueError as e:
        raise SnapshotError(f"invalid {enum_cls.__name__}: {value!r}") from e


def _address(value: Any) -> str:
    if isinstance(value, dict):
        parts = [value.get("street"), value.get("apartment"), value.get("city"),
                 value.get("province"), value.get("postalCode")]
        return ", ".join(str(p) for p in parts if p)
    return str(value or "")


def parse_property(record: dict) -> Property:
    return Property(
        id=str(record["id"]),
        name=record.get("name") or "",
        type=_enum(PropertyType, record.get("type"), PropertyType.ENTIRE),
        monthly_mortgage=_decimal(record.get("monthlyMortgage")),
        monthly_fixed_charges=_decimal(record.get("monthlyFixedCharges")),
        purchase_price=_decimal(record.get("purchasePrice"), default=None),
        rent=_decimal(record.get("rent"), default=None),
        address=_address(record.get("address")),
    )


def parse_unit(record: dict) -> Unit:
    return Unit(
        id=str(record["id"]),
        property_id=str(record.get("propertyId", "")),
        name=record.get("name") or "",
        rent=_decimal(record.get("rent")),
        status=_enum(UnitStatus, record.get("status"), UnitStatus.AVAILABLE),
    )


def parse_tenant(record: dict) -> Tenant:
    unit_id = record.get("unitId")
    user_id = record.get("userId")
    return Tenant(
        id=str(record["id"]),
        property_id=str(record.get("propertyId", "")),
        unit_id=str(unit_id) if unit_id else None,
        user_id=str(user_id) if user_id else None,
        monthly_rent=_decimal(record.get("monthlyRent")),
        payment_due_day=_int(record.get("paymentDueDate"), 1),
        lease_start=_date(record.get("leaseStart")),
        lease_end=_date(record.get("leaseEnd")),
    )


def parse_payment(record: dict) -> Payment:
    return Payment(
        id=str(record["id"]),
        tenant_id=str(record.get("tenantId", "")),
        amount=_decimal(record.get("amount")),
        due_date=_required_date(record, "dueDate"),
        status=_enum(PaymentStatus, record.get("status"), PaymentStatus.PENDING),
        paid_date=_date(record.get("paidDate")),
        created_at=_datetime(record.get("createdAt")),
    )


def parse_expense(record: dict) -> Expense:
    raw_type = record.get("type")
    try:
        expense_type = ExpenseType(raw_type) if raw_type else ExpenseType.OTHER
    except ValueError:
        # Anything that is not maintenance is costed as "other" anyway
        logger.debug("Unknown expense type %r on %s, using other", raw_type, record.get("id"))
        expense_type = ExpenseType.OTHER

    property_id = record.get("propertyId")
    unit_id = record.get("unitId")
    issue_id = record.get("issueId")
    return Expense(
        id=str(record["id"]),
        amount=_decimal(record.get("amount")),
        date=_required_date(record, "date"),
        type=expense_type,
        property_id=str(property_id) if property_id else None,
        unit_id=str(unit_id) if unit_id else None,
        issue_id=str(issue_id) if issue_id else None,
        description=record.get("description") or "",
    )


def _records(raw: dict, name: str) -> list[dict]:
    """Valid records under ``gestionloc_<name>`` or ``<name>``; corrupt ones are dropped."""
    items = raw.get(STORAGE_PREFIX + name, raw.get(name)) or []
    if not isinstance(items, list):
        raise SnapshotError(f"{name} must be a list")
    kept = [item for item in items if isinstance(item, dict) and item.get("id")]
    if len(kept) < len(items):
        logger.warning("Dropped %d corrupt %s record(s)", len(items) - len(kept), name)
    return kept


def _parse_all(raw: dict, name: str, parser: Callable[[dict], Any]) -> list:
    return [parser(record) for record in _records(raw, name)]


def parse_snapshot(raw: dict) -> EntitySnapshot:
    if not isinstance(raw, dict):
        raise SnapshotError("snapshot must be a JSON object")
    snapshot = EntitySnapshot(
        properties=_parse_all(raw, "properties", parse_property),
        units=_parse_all(raw, "units", parse_unit),
        tenants=_parse_all(raw, "tenants", parse_tenant),
        payments=_parse_all(raw, "payments", parse_payment),
        expenses=_parse_all(raw, "expenses", parse_expense),
    )
    logger.debug(
        "Parsed snapshot: %d properties, %d units, %d tenants, %d payments, %d expenses",
        len(snapshot.properties),
        len(snapshot.units),
        len(snapshot.tenants),
        len(snapshot.payments),
        len(snapshot.expenses),
    )
    return snapshot


def load_snapshot(path: str | Path) -> EntitySnapshot:
    """Read a local-storage export from disk."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise SnapshotError(f"{path} is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotError(f"{path} is not valid JSON: {e}") from e
    logger.info("Loading snapshot from %s", path)
    return parse_snapshot(raw)
