from dataclasses import replace
from datetime import date
from decimal import Decimal

from gestionloc.engine.dashboard import build_dashboard, expiring_leases
from gestionloc.models.entities import EntitySnapshot, Payment, PaymentStatus, Tenant
from gestionloc.models.results import Period

TODAY = date(2025, 3, 10)


class TestCollection:
    def test_current_month_totals(self, snapshot):
        d = build_dashboard(snapshot, TODAY)
        assert d.period == Period(2, 2025)
        assert d.total_properties == 2
        assert d.potential_revenue == Decimal("3700")
        assert d.actual_revenue == Decimal("3200")
        assert d.pending_revenue == Decimal("500")
        assert d.payment_completion_rate == Decimal("75")

    def test_revenue_by_property(self, snapshot):
        maple, oak = build_dashboard(snapshot, TODAY).revenue_by_property
        assert (maple.property_id, maple.total_revenue, maple.paid_revenue) == (
            "maple", Decimal("2000"), Decimal("2000"),
        )
        assert maple.completion_rate == Decimal("100")
        assert maple.tenant_count == 1
        assert oak.total_revenue == Decimal("1700")
        assert oak.paid_revenue == Decimal("1200")
        assert oak.completion_rate == Decimal("66.6667")
        assert oak.tenant_count == 3

    def test_late_counts_as_pending_revenue(self, snapshot):
        payments = [
            replace(p, status=PaymentStatus.LATE) if p.id == "p4" else p
            for p in snapshot.payments
        ]
        d = build_dashboard(replace(snapshot, payments=payments), TODAY)
        assert d.pending_revenue == Decimal("500")
        assert d.late_payments == 1
        assert d.pending_payments == 0

    def test_month_without_payments(self, snapshot):
        d = build_dashboard(snapshot, date(2025, 6, 1))
        assert d.potential_revenue == 0
        assert d.payment_completion_rate == 0


class TestUnits:
    def test_counts(self, snapshot):
        d = build_dashboard(snapshot, TODAY)
        assert d.total_units == 5
        assert d.occupied_units == 4
        assert d.available_units == 1
        assert d.occupancy_rate == Decimal("80")

    def test_empty_snapshot(self):
        d = build_dashboard(EntitySnapshot(), TODAY)
        assert d.total_properties == 0
        assert d.total_units == 0
        assert d.occupancy_rate == 0
        assert d.revenue_by_property == []


class TestAlerts:
    def test_status_counts_span_all_periods(self):
        payments = [
            Payment(id="a", tenant_id="t", amount=Decimal("1"), due_date=date(2024, 1, 1),
                    status=PaymentStatus.OVERDUE),
            Payment(id="b", tenant_id="t", amount=Decimal("1"), due_date=date(2025, 3, 1),
                    status=PaymentStatus.LATE),
            Payment(id="c", tenant_id="t", amount=Decimal("1"), due_date=date(2025, 5, 1),
                    status=PaymentStatus.PENDING),
        ]
        d = build_dashboard(EntitySnapshot(payments=payments), TODAY)
        assert d.late_payments == 2
        assert d.overdue_payments == 1
        assert d.pending_payments == 1

    def test_expiring_leases_window(self):
        tenants = [
            Tenant(id="today", property_id="x", lease_end=TODAY),
            Tenant(id="soon", property_id="x", lease_end=date(2025, 3, 11)),
            Tenant(id="edge", property_id="x", lease_end=date(2025, 5, 9)),
            Tenant(id="later", property_id="x", lease_end=date(2025, 5, 10)),
            Tenant(id="past", property_id="x", lease_end=date(2025, 1, 1)),
            Tenant(id="open", property_id="x"),
        ]
        assert expiring_leases(tenants, TODAY) == ["soon", "edge"]
        assert expiring_leases(tenants, TODAY, window_days=1) == ["soon"]

    def test_dashboard_lists_expiring_tenants(self, snapshot):
        tenants = [
            replace(t, lease_end=date(2025, 4, 15)) if t.id == "t-maple" else t
            for t in snapshot.tenants
        ]
        d = build_dashboard(replace(snapshot, tenants=tenants), TODAY)
        assert d.expiring_leases == ["t-maple"]
