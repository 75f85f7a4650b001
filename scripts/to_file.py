#!/usr/bin/env python3

from __future__ import annotations

import argparse
import os

from chart_args import PROJECT_ROOT, add_chart_args, client_from_args
from quickchart.errors import QuickChartError


def main() -> int:
    p = argparse.ArgumentParser(description="Render a chart through QuickChart and save the image.")
    add_chart_args(p)
    p.add_argument("--out", type=str, default=os.path.join(PROJECT_ROOT, "output", "chart.png"))
    p.add_argument("--show", action="store_true", help="Open the saved image afterwards.")
    args = p.parse_args()

    os.makedirs(os.path.dirname(os.path.abspath(args.out)), exist_ok=True)

    try:
        path = client_from_args(args).to_file(args.out)
    except QuickChartError as err:
        print(f"Error writing chart to file: {err}")
        return 1

    print(f"Saved chart to {path}")

    is_svg = path.suffix.lower() == ".svg" or (args.format or "").lower() == "svg"
    if args.show and not is_svg:
        from PIL import Image

        img = Image.open(path)
        width, height = img.size
        print(f"Image size: {width}x{height}")
        img.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
