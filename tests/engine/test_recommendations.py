from decimal import Decimal

from gestionloc.engine.profit import calculate_property_profit
from gestionloc.engine.recommendations import (
    HIGH_MAINTENANCE,
    LOW_MARGIN,
    LOW_OCCUPANCY,
    PENDING_PAYMENTS,
    STRONG_PERFORMANCE,
    generate_recommendations,
)
from gestionloc.models.results import (
    ExpenseBreakdown,
    NetProfit,
    Period,
    PropertyProfitAnalysis,
    Revenues,
)


def _analysis(
    margin="10", occupancy="100", paid="1000", pending="0", maintenance="0"
) -> PropertyProfitAnalysis:
    return PropertyProfitAnalysis(
        property_id="p",
        property_name="P",
        period=Period(0, 2025),
        revenues=Revenues(
            paid_rent=Decimal(paid),
            pending_rent=Decimal(pending),
            occupancy_rate=Decimal(occupancy),
        ),
        expenses=ExpenseBreakdown(maintenance=Decimal(maintenance)),
        net_profit=NetProfit(
            net=Decimal(margin) * Decimal(paid) / 100,
            margin=Decimal(margin),
        ),
    )


class TestRules:
    def test_healthy_property_gets_nothing(self):
        assert generate_recommendations(_analysis()) == []

    def test_low_margin(self):
        assert generate_recommendations(_analysis(margin="4.99")) == [LOW_MARGIN]

    def test_margin_boundaries(self):
        assert generate_recommendations(_analysis(margin="5")) == []
        assert generate_recommendations(_analysis(margin="20")) == []

    def test_strong_margin(self):
        assert generate_recommendations(_analysis(margin="20.01")) == [STRONG_PERFORMANCE]

    def test_low_occupancy(self):
        assert generate_recommendations(_analysis(occupancy="75")) == [LOW_OCCUPANCY]
        assert generate_recommendations(_analysis(occupancy="90")) == []

    def test_high_maintenance(self):
        assert generate_recommendations(_analysis(maintenance="100.01")) == [HIGH_MAINTENANCE]
        assert generate_recommendations(_analysis(maintenance="100")) == []

    def test_low_margin_uses_unrounded_figure(self):
        # 4.99996% is stored as 5.0000 but is still below the threshold
        analysis = _analysis(margin="5", paid="100")
        analysis.net_profit.net = Decimal("4.99996")
        assert analysis.net_profit.margin == Decimal("5")
        assert generate_recommendations(analysis) == [LOW_MARGIN]

    def test_strong_margin_uses_unrounded_figure(self):
        analysis = _analysis(margin="20", paid="100")
        analysis.net_profit.net = Decimal("20.00004")
        assert generate_recommendations(analysis) == [STRONG_PERFORMANCE]

    def test_pending_rent(self):
        assert generate_recommendations(_analysis(pending="1")) == [PENDING_PAYMENTS]

    def test_rules_fire_together_in_order(self):
        recs = generate_recommendations(
            _analysis(margin="-10", occupancy="50", paid="0", pending="800", maintenance="40")
        )
        assert recs == [LOW_MARGIN, LOW_OCCUPANCY, HIGH_MAINTENANCE, PENDING_PAYMENTS]


class TestOnFixturePortfolio:
    def test_maple(self, maple, snapshot):
        a = calculate_property_profit(
            maple, snapshot.units, snapshot.tenants, snapshot.payments, snapshot.expenses, 2, 2025
        )
        assert generate_recommendations(a) == [STRONG_PERFORMANCE]

    def test_oak(self, oak, snapshot):
        a = calculate_property_profit(
            oak, snapshot.units, snapshot.tenants, snapshot.payments, snapshot.expenses, 2, 2025
        )
        assert generate_recommendations(a) == [LOW_OCCUPANCY, PENDING_PAYMENTS]
