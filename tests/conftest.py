"""Canonical test fixtures used across engine and API tests.

Fixture portfolio, March 2025 (month index 2):
  - "Maple" entire house: mortgage 800, charges 200, purchase 240K,
    one tenant paying 2000 (paid), one maintenance expense 150, one tax bill 50.
  - "Oak" shared house: 4 rooms, 3 tenants, rents 600 paid / 600 paid / 500 pending.
"""

from datetime import date
from decimal import Decimal

import pytest

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
)

MARCH = 2
YEAR = 2025


@pytest.fixture
def maple() -> Property:
    return Property(
        id="maple",
        name="Maple",
        type=PropertyType.ENTIRE,
        monthly_mortgage=Decimal("800"),
        monthly_fixed_charges=Decimal("200"),
        purchase_price=Decimal("240000"),
    )


@pytest.fixture
def oak() -> Property:
    return Property(
        id="oak",
        name="Oak",
        type=PropertyType.SHARED,
        monthly_mortgage=Decimal("900"),
        monthly_fixed_charges=Decimal("100"),
    )


@pytest.fixture
def oak_units() -> list[Unit]:
    return [
        Unit(id=f"oak-{n}", property_id="oak", name=f"Room {n}", rent=Decimal("600"))
        for n in range(1, 5)
    ]


@pytest.fixture
def tenants() -> list[Tenant]:
    return [
        Tenant(id="t-maple", property_id="maple", monthly_rent=Decimal("2000"), payment_due_day=1),
        Tenant(id="t-oak-1", property_id="oak", unit_id="oak-1", monthly_rent=Decimal("600")),
        Tenant(id="t-oak-2", property_id="oak", unit_id="oak-2", monthly_rent=Decimal("600")),
        Tenant(id="t-oak-3", property_id="oak", unit_id="oak-3", monthly_rent=Decimal("500")),
    ]


@pytest.fixture
def payments() -> list[Payment]:
    march = date(YEAR, 3, 1)
    return [
        Payment(id="p1", tenant_id="t-maple", amount=Decimal("2000"), due_date=march,
                status=PaymentStatus.PAID),
        Payment(id="p2", tenant_id="t-oak-1", amount=Decimal("600"), due_date=march,
                status=PaymentStatus.PAID),
        Payment(id="p3", tenant_id="t-oak-2", amount=Decimal("600"), due_date=march,
                status=PaymentStatus.PAID),
        Payment(id="p4", tenant_id="t-oak-3", amount=Decimal("500"), due_date=march,
                status=PaymentStatus.PENDING),
        # February, outside the fixture period
        Payment(id="p0", tenant_id="t-maple", amount=Decimal("2000"), due_date=date(YEAR, 2, 1),
                status=PaymentStatus.PAID),
    ]


@pytest.fixture
def expenses() -> list[Expense]:
    return [
        Expense(id="e1", amount=Decimal("150"), date=date(YEAR, 3, 10),
                type=ExpenseType.MAINTENANCE, property_id="maple"),
        Expense(id="e2", amount=Decimal("50"), date=date(YEAR, 3, 20),
                type=ExpenseType.TAXES, property_id="maple"),
        # Not linked to a property: never counted
        Expense(id="e3", amount=Decimal("999"), date=date(YEAR, 3, 5), type=ExpenseType.OTHER),
    ]


@pytest.fixture
def snapshot(maple, oak, oak_units, tenants, payments, expenses) -> EntitySnapshot:
    return EntitySnapshot(
        properties=[maple, oak],
        units=oak_units,
        tenants=tenants,
        payments=payments,
        expenses=expenses,
    )


@pytest.fixture
def raw_snapshot() -> dict:
    """The same portfolio as the web app stores it (camelCase, ISO strings)."""
    return {
        "properties": [
            {"id": "maple", "name": "Maple", "type": "entire", "monthlyMortgage": 800,
             "monthlyFixedCharges": 200, "purchasePrice": 240000},
            {"id": "oak", "name": "Oak", "type": "shared", "monthlyMortgage": 900,
             "monthlyFixedCharges": 100},
        ],
        "units": [
            {"id": f"oak-{n}", "propertyId": "oak", "name": f"Room {n}", "rent": 600,
             "status": "occupied"}
            for n in range(1, 5)
        ],
        "tenants": [
            {"id": "t-maple", "propertyId": "maple", "monthlyRent": 2000, "paymentDueDate": 1,
             "leaseStart": "2024-07-01T00:00:00.000Z", "leaseEnd": "2025-04-15T00:00:00.000Z"},
            {"id": "t-oak-1", "propertyId": "oak", "unitId": "oak-1", "monthlyRent": 600},
            {"id": "t-oak-2", "propertyId": "oak", "unitId": "oak-2", "monthlyRent": 600},
            {"id": "t-oak-3", "propertyId": "oak", "unitId": "oak-3", "monthlyRent": 500},
        ],
        "payments": [
            {"id": "p1", "tenantId": "t-maple", "amount": 2000, "dueDate": "2025-03-01T00:00:00.000Z",
             "status": "paid"},
            {"id": "p2", "tenantId": "t-oak-1", "amount": 600, "dueDate": "2025-03-01", "status": "paid"},
            {"id": "p3", "tenantId": "t-oak-2", "amount": 600, "dueDate": "2025-03-01", "status": "paid"},
            {"id": "p4", "tenantId": "t-oak-3", "amount": 500, "dueDate": "2025-03-01",
             "status": "pending"},
        ],
        "expenses": [
            {"id": "e1", "amount": 150, "date": "2025-03-10", "type": "maintenance",
             "propertyId": "maple"},
            {"id": "e2", "amount": 50, "date": "2025-03-20", "type": "taxes", "propertyId": "maple"},
        ],
    }
