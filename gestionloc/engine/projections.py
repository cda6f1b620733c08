"""Flat monthly projection of a property's current performance.

No seasonality, inflation or compounding: every future month applies the same
occupancy-derived factor to the base period's figures.
"""

from decimal import Decimal, ROUND_HALF_UP

from gestionloc.models.results import ProjectionPoint, PropertyProfitAnalysis

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")


def occupancy_factor(analysis: PropertyProfitAnalysis) -> Decimal:
    return 1 + analysis.revenues.occupancy_rate / HUNDRED


def calculate_projections(
    analysis: PropertyProfitAnalysis, months_ahead: int = 12
) -> list[ProjectionPoint]:
    """One point per month for ``months_ahead`` months after the analysis period."""
    if months_ahead < 0:
        raise ValueError(f"months_ahead must be >= 0, got {months_ahead}")

    factor = occupancy_factor(analysis)
    profit = (analysis.net_profit.net * factor).quantize(TWO_PLACES, ROUND_HALF_UP)
    cash_flow = (analysis.cash_flow * factor).quantize(TWO_PLACES, ROUND_HALF_UP)

    projections = []
    for offset in range(1, months_ahead + 1):
        period = analysis.period.shift(offset)
        projections.append(
            ProjectionPoint(
                month=period.month,
                year=period.year,
                projected_profit=profit,
                projected_cash_flow=cash_flow,
            )
        )
    return projections
