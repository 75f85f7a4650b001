#!/usr/bin/env python3

from __future__ import annotations

import argparse

from chart_args import add_chart_args, client_from_args
from quickchart.errors import QuickChartError


def main() -> int:
    p = argparse.ArgumentParser(description="Create a short, shareable QuickChart link.")
    add_chart_args(p)
    args = p.parse_args()

    try:
        short_url = client_from_args(args).get_short_url()
    except QuickChartError as err:
        print(f"Failed to create short URL: {err}")
        return 1

    print(f"Short URL: {short_url}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
