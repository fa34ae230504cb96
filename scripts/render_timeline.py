#!/usr/bin/env python3
"""
Render the government uptime timeline in the terminal.

Prints the uptime headline and one row of month markers per year:
    #  constitutional crisis (critical)
    !  service outage (warning)
    .  no elevating incident (normal)

Usage:
    python scripts/render_timeline.py
    python scripts/render_timeline.py --start 2015-01-01 --end 2022-12-31
    python scripts/render_timeline.py --incidents    # also list incidents, newest first
"""

import argparse
import sys
from datetime import date
from itertools import groupby
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from govstatus.catalog import get_catalog
from govstatus.config import get_settings
from govstatus.engine import MonthlyGridBuilder, TimelineError, UptimeCalculator
from govstatus.models.enums import MonthSeverity

MARKERS = {
    MonthSeverity.CRITICAL: "#",
    MonthSeverity.WARNING: "!",
    MonthSeverity.NORMAL: ".",
}


def main(argv=None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Render the uptime timeline")
    parser.add_argument(
        "--start",
        type=date.fromisoformat,
        default=settings.tracking_start,
        help="Window start (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--end", type=date.fromisoformat, default=date.today(), help="Window end (YYYY-MM-DD)"
    )
    parser.add_argument("--incidents", action="store_true", help="List incidents, newest first")
    args = parser.parse_args(argv)

    catalog = get_catalog()
    try:
        uptime = UptimeCalculator(catalog, settings.empty_window_policy).calculate_uptime(
            args.start, args.end
        )
        cells = MonthlyGridBuilder(catalog).generate_monthly_data(args.start, args.end)
    except TimelineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    precision = settings.uptime_display_precision
    print("=" * 60)
    print(f"{settings.app_name}: {uptime.uptime_percentage:.{precision}f}% uptime")
    print(
        f"{uptime.downtime_days} downtime days over {uptime.total_days} days "
        f"({args.start.isoformat()} to {args.end.isoformat()})"
    )
    print("=" * 60)

    for year, year_cells in groupby(cells, key=lambda c: c.year):
        year_cells = list(year_cells)
        # Pad partial first/last years so columns line up by month
        row = " " * year_cells[0].month + "".join(MARKERS[c.severity] for c in year_cells)
        print(f"{year}  {row}")

    print("\n      # critical   ! warning   . normal")

    if args.incidents:
        print()
        for incident in catalog.sorted_by_recency():
            print(
                f"[{incident.severity.value.upper():8}] {incident.start_date.isoformat()} "
                f"{incident.name} ({incident.type.value}, {incident.duration}d)"
            )

    return 0


if __name__ == "__main__":
    sys.exit(main())
