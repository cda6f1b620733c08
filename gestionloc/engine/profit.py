"""Profitability: per-property analysis and portfolio aggregation for one month.

Pure functions: entity lists in, analysis dataclasses out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from gestionloc.engine.indexes import SnapshotIndex
from gestionloc.engine.occupancy import occupancy_rate
from gestionloc.models.entities import (
    Expense,
    ExpenseType,
    Payment,
    PaymentStatus,
    Property,
    Tenant,
    Unit,
)
from gestionloc.models.results import (
    ExpenseBreakdown,
    NetProfit,
    Period,
    PortfolioProfitSummary,
    PropertyProfitAnalysis,
    ReturnOnInvestment,
    Revenues,
)

FOUR_PLACES = Decimal("0.0001")
HUNDRED = Decimal("100")
ZERO = Decimal("0")

PERFORMER_COUNT = 3
UNDER_PERFORMER_MARGIN = Decimal("10")


def percent_of(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator as a percentage; 0 when the denominator is not positive."""
    if denominator <= 0:
        return ZERO
    return (numerator / denominator * HUNDRED).quantize(FOUR_PLACES, ROUND_HALF_UP)


def period_payments(
    prop: Property, payments: list[Payment], period: Period, index: SnapshotIndex
) -> list[Payment]:
    """Payments due in the period whose tenant belongs to the property."""
    return [
        p
        for p in payments
        if period.contains(p.due_date) and index.property_of_payment(p) == prop.id
    ]


def period_expenses(prop: Property, expenses: list[Expense], period: Period) -> list[Expense]:
    """Expenses dated in the period and linked directly to the property."""
    return [e for e in expenses if period.contains(e.date) and e.property_id == prop.id]


def calculate_property_profit(
    prop: Property,
    units: list[Unit],
    tenants: list[Tenant],
    payments: list[Payment],
    expenses: list[Expense],
    month: int,
    year: int,
    *,
    index: SnapshotIndex | None = None,
) -> PropertyProfitAnalysis:
    """Profitability of one property for one calendar month (``month`` zero-based).

    ``index`` lets a caller reuse lookups already built over the same
    units/tenants; it is built here otherwise.
    """
    period = Period(month=month, year=year)
    if index is None:
        index = SnapshotIndex.build(units, tenants)

    selected_payments = period_payments(prop, payments, period, index)
    selected_expenses = period_expenses(prop, expenses, period)

    # Revenues
    total_rent = sum((p.amount for p in selected_payments), ZERO)
    paid_rent = sum(
        (p.amount for p in selected_payments if p.status is PaymentStatus.PAID), ZERO
    )
    revenues = Revenues(
        total_rent=total_rent,
        paid_rent=paid_rent,
        pending_rent=total_rent - paid_rent,
        occupancy_rate=occupancy_rate(prop, index),
    )

    # Expenses
    maintenance = sum(
        (e.amount for e in selected_expenses if e.type is ExpenseType.MAINTENANCE), ZERO
    )
    other = sum(
        (e.amount for e in selected_expenses if e.type is not ExpenseType.MAINTENANCE), ZERO
    )
    mortgage = prop.monthly_mortgage
    fixed_charges = prop.monthly_fixed_charges
    expense_breakdown = ExpenseBreakdown(
        mortgage=mortgage,
        fixed_charges=fixed_charges,
        maintenance=maintenance,
        other=other,
        total=mortgage + fixed_charges + maintenance + other,
    )

    # Profit; gross ignores variable expenses
    net = paid_rent - expense_breakdown.total
    net_profit = NetProfit(
        gross=paid_rent - mortgage - fixed_charges,
        net=net,
        margin=percent_of(net, paid_rent),
    )

    # ROI against purchase price
    monthly_roi = percent_of(net, prop.purchase_price) if prop.purchase_price else ZERO
    roi = ReturnOnInvestment(monthly=monthly_roi, annual=monthly_roi * 12)

    return PropertyProfitAnalysis(
        property_id=prop.id,
        property_name=prop.name,
        period=period,
        revenues=revenues,
        expenses=expense_breakdown,
        net_profit=net_profit,
        cash_flow=net,
        roi=roi,
    )


def rank_performers(
    analyses: list[PropertyProfitAnalysis],
) -> tuple[list[PropertyProfitAnalysis], list[PropertyProfitAnalysis]]:
    """(top, under) performers by margin.

    Top: best three with a positive margin. Under: the three lowest margins,
    kept only below 10%. With fewer than six properties the two can overlap.
    """
    by_margin = sorted(analyses, key=lambda a: a.net_profit.margin, reverse=True)
    top = [a for a in by_margin[:PERFORMER_COUNT] if a.net_profit.margin > 0]
    under = [
        a for a in by_margin[-PERFORMER_COUNT:] if a.net_profit.margin < UNDER_PERFORMER_MARGIN
    ]
    return top, under


def calculate_portfolio_profit(
    properties: list[Property],
    units: list[Unit],
    tenants: list[Tenant],
    payments: list[Payment],
    expenses: list[Expense],
    month: int,
    year: int,
) -> PortfolioProfitSummary:
    """Aggregate every property's analysis for the month, in input order."""
    period = Period(month=month, year=year)
    index = SnapshotIndex.build(units, tenants)

    analyses = [
        calculate_property_profit(
            prop, units, tenants, payments, expenses, month, year, index=index
        )
        for prop in properties
    ]

    total_revenues = sum((a.revenues.paid_rent for a in analyses), ZERO)
    total_expenses = sum((a.expenses.total for a in analyses), ZERO)
    net_profit = total_revenues - total_expenses
    top, under = rank_performers(analyses)

    return PortfolioProfitSummary(
        period=period,
        total_revenues=total_revenues,
        total_expenses=total_expenses,
        net_profit=net_profit,
        average_margin=percent_of(net_profit, total_revenues),
        total_cash_flow=sum((a.cash_flow for a in analyses), ZERO),
        properties=analyses,
        top_performers=top,
        under_performers=under,
    )
