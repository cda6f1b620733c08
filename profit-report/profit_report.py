"""CLI client for the GestionLoc API: posts a snapshot export and prints a terminal report.

Usage:
    python profit-report/profit_report.py export.json --month 2 --year 2025
    python profit-report/profit_report.py export.json --property prop-1 --months-ahead 6
"""

import argparse
import asyncio
import json
import sys
from datetime import date

import httpx

STORAGE_KEYS = ("properties", "units", "tenants", "payments", "expenses")


# ── Helpers ──────────────────────────────────────────────────────────────────

def _pct(v) -> str:
    """Format an API percentage (already 0..100) for display."""
    return f"{float(v):.2f}%"


def _dollar(v) -> str:
    return f"${float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def load_export(path: str) -> dict:
    """Read a local-storage export and keep the entity lists the API needs."""
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return {key: raw.get(f"gestionloc_{key}", raw.get(key, [])) for key in STORAGE_KEYS}


# ── Report sections ──────────────────────────────────────────────────────────

def print_portfolio_summary(data: dict) -> None:
    period = data["period"]
    _header(f"Portfolio {period['year']}-{period['month'] + 1:02d}")
    print(f"  Revenues (paid):  {_dollar(data['total_revenues'])}")
    print(f"  Expenses:         {_dollar(data['total_expenses'])}")
    print(f"  Net Profit:       {_dollar(data['net_profit'])}")
    print(f"  Average Margin:   {_pct(data['average_margin'])}")
    print(f"  Cash Flow:        {_dollar(data['total_cash_flow'])}")


def print_property_table(data: dict) -> None:
    properties = data.get("properties", [])
    if not properties:
        return
    _header("Properties")
    print(f"  {'Name':<20}  {'Paid Rent':>11}  {'Expenses':>11}  {'Net':>11}  {'Margin':>8}  {'Occ.':>8}")
    print(f"  {'-' * 20}  {'-' * 11}  {'-' * 11}  {'-' * 11}  {'-' * 8}  {'-' * 8}")
    for p in properties:
        print(
            f"  {p['property_name'][:20]:<20}  {_dollar(p['revenues']['paid_rent']):>11}  "
            f"{_dollar(p['expenses']['total']):>11}  {_dollar(p['net_profit']['net']):>11}  "
            f"{_pct(p['net_profit']['margin']):>8}  {_pct(p['revenues']['occupancy_rate']):>8}"
        )


def print_performers(data: dict) -> None:
    _header("Performers")
    top = ", ".join(p["property_name"] for p in data.get("top_performers", [])) or "none"
    under = ", ".join(p["property_name"] for p in data.get("under_performers", [])) or "none"
    print(f"  Top:              {top}")
    print(f"  Under:            {under}")


def print_recommendations(data: dict) -> None:
    _header(f"Recommendations: {data['property_id']}")
    for line in data["recommendations"] or ["No recommendation"]:
        print(f"  - {line}")


def print_projections(data: dict) -> None:
    points = data.get("projections", [])
    if not points:
        return
    _header(f"Projections: {data['property_id']}")
    for p in points:
        print(
            f"  {p['year']}-{p['month'] + 1:02d}  profit {_dollar(p['projected_profit']):>12}  "
            f"cash flow {_dollar(p['projected_cash_flow']):>12}"
        )


# ── Main ─────────────────────────────────────────────────────────────────────

async def _post(client: httpx.AsyncClient, url: str, payload: dict) -> dict:
    resp = await client.post(url, json=payload)
    if resp.status_code != 200:
        print(f"Error: API returned {resp.status_code}", file=sys.stderr)
        try:
            detail = resp.json().get("detail", resp.text)
        except ValueError:
            detail = resp.text
        print(f"  {detail}", file=sys.stderr)
        sys.exit(1)
    return resp.json()


async def main() -> None:
    today = date.today()
    parser = argparse.ArgumentParser(
        description="Print a profitability report via the GestionLoc API"
    )
    parser.add_argument("export", help="Local-storage JSON export")
    parser.add_argument("--month", type=int, default=today.month - 1, help="Zero-based month")
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--property", help="Property id for recommendations and projections")
    parser.add_argument("--months-ahead", type=int, default=12, help="Projection horizon")
    parser.add_argument(
        "--api-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )

    args = parser.parse_args()

    try:
        snapshot = load_export(args.export)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: could not read {args.export}: {e}", file=sys.stderr)
        sys.exit(1)

    payload = {"snapshot": snapshot, "month": args.month, "year": args.year}
    base = f"{args.api_url}/api/v1/profit"

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            summary = await _post(client, f"{base}/portfolio", payload)
            advice = projections = None
            if args.property:
                prop_url = f"{base}/property/{args.property}"
                advice = await _post(client, f"{prop_url}/recommendations", payload)
                projections = await _post(
                    client,
                    f"{prop_url}/projections",
                    {**payload, "months_ahead": args.months_ahead},
                )
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn gestionloc.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)

    print_portfolio_summary(summary)
    print_property_table(summary)
    print_performers(summary)
    if advice:
        print_recommendations(advice)
    if projections:
        print_projections(projections)
    print()


if __name__ == "__main__":
    asyncio.run(main())
