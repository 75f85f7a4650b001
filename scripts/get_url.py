#!/usr/bin/env python3

from __future__ import annotations

import argparse

from chart_args import add_chart_args, client_from_args
from quickchart.errors import QuickChartError


def main() -> int:
    p = argparse.ArgumentParser(description="Print a QuickChart GET URL for a chart config.")
    add_chart_args(p)
    args = p.parse_args()

    try:
        url = client_from_args(args).get_url()
    except QuickChartError as err:
        print(f"Failed to build chart URL: {err}")
        return 1

    print(f"Chart URL: {url}")
    print("\nOpen this URL in a browser to view the chart.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
