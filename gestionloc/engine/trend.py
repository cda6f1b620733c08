"""Single-property lookups over a snapshot: one period, or a run of past periods."""

from gestionloc.engine.indexes import SnapshotIndex
from gestionloc.engine.profit import calculate_property_profit
from gestionloc.models.entities import EntitySnapshot
from gestionloc.models.results import Period, PropertyProfitAnalysis, TrendPoint


def calculate_for_property(
    snapshot: EntitySnapshot, property_id: str, period: Period
) -> PropertyProfitAnalysis | None:
    """Analysis of one property by id; None when the id is unknown."""
    prop = snapshot.get_property(property_id)
    if prop is None:
        return None
    return calculate_property_profit(
        prop,
        snapshot.units,
        snapshot.tenants,
        snapshot.payments,
        snapshot.expenses,
        period.month,
        period.year,
    )


def calculate_trend(
    snapshot: EntitySnapshot,
    property_id: str,
    as_of: Period,
    months_back: int = 6,
) -> list[TrendPoint]:
    """Net profit, margin and cash flow for ``months_back`` months up to ``as_of``.

    Oldest first, ``months_back + 1`` points. Empty for an unknown property.
    """
    if months_back < 0:
        raise ValueError(f"months_back must be >= 0, got {months_back}")

    prop = snapshot.get_property(property_id)
    if prop is None:
        return []

    index = SnapshotIndex.build(snapshot.units, snapshot.tenants)
    points = []
    for offset in range(months_back, -1, -1):
        period = as_of.shift(-offset)
        analysis = calculate_property_profit(
            prop,
            snapshot.units,
            snapshot.tenants,
            snapshot.payments,
            snapshot.expenses,
            period.month,
            period.year,
            index=index,
        )
        points.append(
            TrendPoint(
                month=period.month,
                year=period.year,
                net_profit=analysis.net_profit.net,
                margin=analysis.net_profit.margin,
                cash_flow=analysis.cash_flow,
            )
        )
    return points
