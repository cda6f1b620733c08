"""Threshold rules turning one property analysis into advice strings.

Rules are independent; several can fire for the same analysis.
"""

from decimal import Decimal

from gestionloc.models.results import PropertyProfitAnalysis

LOW_MARGIN_PCT = Decimal("5")
LOW_OCCUPANCY_PCT = Decimal("90")
HIGH_MAINTENANCE_SHARE = Decimal("0.1")  # Of paid rent
STRONG_MARGIN_PCT = Decimal("20")

LOW_MARGIN = "Very low margin - consider raising the rent or reducing expenses"
LOW_OCCUPANCY = "Low occupancy rate - improve the property's marketing"
HIGH_MAINTENANCE = "High maintenance costs - plan preventive maintenance"
STRONG_PERFORMANCE = "Excellent profitability - consider expanding the portfolio"
PENDING_PAYMENTS = "Outstanding payments - enable automatic reminders"


def _exact_margin(analysis: PropertyProfitAnalysis) -> Decimal:
    """Net over paid rent, in percent, before the 4-place rounding of the stored margin."""
    paid_rent = analysis.revenues.paid_rent
    if paid_rent <= 0:
        return Decimal("0")
    return analysis.net_profit.net / paid_rent * 100


def generate_recommendations(analysis: PropertyProfitAnalysis) -> list[str]:
    margin = _exact_margin(analysis)
    revenues = analysis.revenues
    recommendations: list[str] = []

    if margin < LOW_MARGIN_PCT:
        recommendations.append(LOW_MARGIN)
    if revenues.occupancy_rate < LOW_OCCUPANCY_PCT:
        recommendations.append(LOW_OCCUPANCY)
    if analysis.expenses.maintenance > revenues.paid_rent * HIGH_MAINTENANCE_SHARE:
        recommendations.append(HIGH_MAINTENANCE)
    if margin > STRONG_MARGIN_PCT:
        recommendations.append(STRONG_PERFORMANCE)
    if revenues.pending_rent > 0:
        recommendations.append(PENDING_PAYMENTS)

    return recommendations
