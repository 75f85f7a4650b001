from __future__ import annotations

import argparse
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from quickchart.client import QuickChartClient
from quickchart.config import load_client_config

SAMPLE_CHART = """{
    type: 'bar',
    data: {
        labels: ['January', 'February', 'March', 'April'],
        datasets: [{
            label: 'Sales',
            data: [50, 60, 70, 80]
        }]
    }
}"""


def add_chart_args(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group()
    src.add_argument("--chart", type=str, default=None, help="Chart.js config (JSON or JS object literal).")
    src.add_argument("--chart-file", type=str, default=None, help="Read the chart config from a file.")
    p.add_argument("--width", type=int, default=800)
    p.add_argument("--height", type=int, default=400)
    p.add_argument("--dpr", type=float, default=None)
    p.add_argument("--bkg", type=str, default=None)
    p.add_argument("--version", type=str, default=None)
    p.add_argument("--format", type=str, default=None)
    p.add_argument("--config", type=str, default=None, help="Path to quickchart.yml.")


def client_from_args(args: argparse.Namespace) -> QuickChartClient:
    if args.chart_file:
        with open(args.chart_file, "r", encoding="utf-8") as f:
            chart = f.read()
    else:
        chart = args.chart or SAMPLE_CHART

    client = QuickChartClient(config=load_client_config(args.config)).set_chart(chart)
    if args.width is not None:
        client.set_width(args.width)
    if args.height is not None:
        client.set_height(args.height)
    if args.dpr is not None:
        client.set_device_pixel_ratio(args.dpr)
    if args.bkg is not None:
        client.set_background_color(args.bkg)
    if args.version is not None:
        client.set_version(args.version)
    if args.format is not None:
        client.set_format(args.format)
    return client
