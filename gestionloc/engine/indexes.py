"""Call-scoped foreign-key indexes over an entity snapshot.

Built once per engine call and dropped with it; never cached between calls.
"""

from collections import defaultdict
from dataclasses import dataclass, field

from gestionloc.models.entities import Payment, Tenant, Unit


@dataclass
class SnapshotIndex:
    tenant_by_id: dict[str, Tenant] = field(default_factory=dict)
    tenants_by_property: dict[str, list[Tenant]] = field(default_factory=dict)
    units_by_property: dict[str, list[Unit]] = field(default_factory=dict)

    @classmethod
    def build(cls, units: list[Unit], tenants: list[Tenant]) -> "SnapshotIndex":
        by_property: dict[str, list[Tenant]] = defaultdict(list)
        for tenant in tenants:
            by_property[tenant.property_id].append(tenant)

        units_by_property: dict[str, list[Unit]] = defaultdict(list)
        for unit in units:
            units_by_property[unit.property_id].append(unit)

        return cls(
            tenant_by_id={t.id: t for t in tenants},
            tenants_by_property=dict(by_property),
            units_by_property=dict(units_by_property),
        )

    def tenants_of(self, property_id: str) -> list[Tenant]:
        return self.tenants_by_property.get(property_id, [])

    def units_of(self, property_id: str) -> list[Unit]:
        return self.units_by_property.get(property_id, [])

    def property_of_payment(self, payment: Payment) -> str | None:
        """Property a payment belongs to, through its tenant. None if the tenant is gone."""
        tenant = self.tenant_by_id.get(payment.tenant_id)
        return tenant.property_id if tenant is not None else None
