"""Occupancy: share of a property's lettable capacity held by a tenant record.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from gestionloc.engine.indexes import SnapshotIndex
from gestionloc.models.entities import Property, PropertyType

FOUR_PLACES = Decimal("0.0001")
HUNDRED = Decimal("100")


def occupancy_rate(prop: Property, index: SnapshotIndex) -> Decimal:
    """Occupancy as a percentage (0..100).

    Entire properties are all-or-nothing. Shared properties count tenants
    against units; two tenants on one unit both count.
    """
    tenant_count = len(index.tenants_of(prop.id))
    if prop.type is PropertyType.ENTIRE:
        return HUNDRED if tenant_count > 0 else Decimal("0")

    unit_count = len(index.units_of(prop.id))
    if unit_count == 0:
        return Decimal("0")
    return (Decimal(tenant_count) / Decimal(unit_count) * HUNDRED).quantize(
        FOUR_PLACES, ROUND_HALF_UP
    )


def capacity(prop: Property, index: SnapshotIndex) -> tuple[int, int]:
    """(total units, occupied units) with an entire property counted as one unit."""
    tenant_count = len(index.tenants_of(prop.id))
    if prop.type is PropertyType.ENTIRE:
        return 1, (1 if tenant_count > 0 else 0)
    return len(index.units_of(prop.id)), tenant_count
