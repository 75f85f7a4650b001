from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote, urlencode, urlparse

import requests

from quickchart.chart_text import compact_chart, parse_chart, strip_quotes
from quickchart.config import (
    CHART_ENDPOINT,
    CREATE_ENDPOINT,
    ClientConfig,
    load_client_config,
)
from quickchart.errors import (
    FileWriteError,
    HttpStatusError,
    MissingFieldError,
    ResponseParseError,
    TransportError,
    UrlBuildError,
)

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def _fmt_number(x: float) -> str:
    f = float(x)
    if f.is_integer():
        return str(int(f))
    return repr(f)


def _parse_base_url(base_url: str) -> str:
    parsed = urlparse(base_url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise UrlBuildError(f"Failed to parse base URL: {base_url!r}")
    return base_url.rstrip("/")


class QuickChartClient:
    """
    Builder for QuickChart.io requests.

    Configure with the chained ``set_*`` methods, then call one of the
    terminal operations: ``get_url()`` (no I/O), ``post()`` / ``to_file()``
    for image bytes, or ``get_short_url()`` for a shareable link. Terminal
    operations never change the configuration, so a client can be reused.

        url = (
            QuickChartClient()
            .set_chart('{"type":"bar","data":{"labels":["A","B"],"datasets":[{"data":[1,2]}]}}')
            .set_width(800)
            .set_height(400)
            .get_url()
        )
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or ClientConfig()
        self.base_url = _parse_base_url(self.config.base_url)

        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.config.user_agent
        self.session = session

        self.chart: str = ""
        self.width: Optional[int] = None
        self.height: Optional[int] = None
        self.device_pixel_ratio: Optional[float] = None
        self.background_color: Optional[str] = None
        self.version: Optional[str] = None
        self.format: Optional[str] = None

    @classmethod
    def from_config_file(cls, path: str | os.PathLike | None = None) -> "QuickChartClient":
        return cls(config=load_client_config(path))

    # --- configuration ---

    def set_chart(self, chart: str) -> "QuickChartClient":
        """Chart.js config as JSON or as a JavaScript object literal."""
        self.chart = chart
        return self

    def set_width(self, width: int) -> "QuickChartClient":
        self.width = width
        return self

    def set_height(self, height: int) -> "QuickChartClient":
        self.height = height
        return self

    def set_device_pixel_ratio(self, dpr: float) -> "QuickChartClient":
        self.device_pixel_ratio = dpr
        return self

    def set_background_color(self, color: str) -> "QuickChartClient":
        """
        Named ("transparent", "white"), HEX ("#fff", "#ffffff"),
        "rgb(255, 0, 0)" or "hsl(0, 100%, 50%)". Sent as-is.
        """
        self.background_color = color
        return self

    def set_version(self, version: str) -> "QuickChartClient":
        self.version = version
        return self

    def set_format(self, fmt: str) -> "QuickChartClient":
        self.format = fmt
        return self

    # --- serialisation ---

    def _endpoint(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def build_url(self) -> str:
        params: List[Tuple[str, str]] = [("c", compact_chart(self.chart))]
        if self.width is not None:
            params.append(("w", str(self.width)))
        if self.height is not None:
            params.append(("h", str(self.height)))
        if self.device_pixel_ratio is not None:
            params.append(("devicePixelRatio", _fmt_number(self.device_pixel_ratio)))
        if self.background_color is not None:
            params.append(("bkg", self.background_color))
        if self.version is not None:
            params.append(("v", self.version))
        if self.format is not None:
            params.append(("f", self.format))

        return f"{self._endpoint(CHART_ENDPOINT)}?{urlencode(params, quote_via=quote)}"

    def build_request_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"chart": parse_chart(self.chart)}
        if self.width is not None:
            body["width"] = self.width
        if self.height is not None:
            body["height"] = self.height
        if self.device_pixel_ratio is not None:
            body["devicePixelRatio"] = float(self.device_pixel_ratio)
        if self.background_color is not None:
            body["backgroundColor"] = self.background_color
        if self.version is not None:
            body["version"] = self.version
        if self.format is not None:
            body["format"] = self.format
        return body

    # --- terminal operations ---

    def get_url(self) -> str:
        return self.build_url()

    def _post_json(self, path: str, body: Dict[str, Any]) -> requests.Response:
        url = self._endpoint(path)
        payload = json.dumps(body)
        logger.debug("POST %s (%d bytes)", url, len(payload))

        try:
            r = self.session.post(
                url,
                data=payload,
                headers=JSON_HEADERS,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as err:
            raise TransportError(f"Request to {url} failed: {err}") from err

        if not 200 <= r.status_code < 300:
            logger.warning("QuickChart returned HTTP %s for %s", r.status_code, url)
            raise HttpStatusError(r.status_code, url, body=r.text)
        return r

    def get_short_url(self) -> str:
        r = self._post_json(CREATE_ENDPOINT, self.build_request_body())

        try:
            data = r.json()
        except ValueError as err:
            raise ResponseParseError(f"Failed to parse JSON response: {err}") from err

        url = data.get("url") if isinstance(data, dict) else None
        if not isinstance(url, str):
            raise MissingFieldError("url")
        return strip_quotes(url)

    def post(self) -> bytes:
        r = self._post_json(CHART_ENDPOINT, self.build_request_body())
        return r.content

    def to_file(self, path: str | os.PathLike) -> Path:
        image_bytes = self.post()
        out = Path(path)
        try:
            with open(out, "wb") as f:
                f.write(image_bytes)
        except OSError as err:
            raise FileWriteError(str(out), str(err)) from err
        logger.debug("Wrote %d bytes to %s", len(image_bytes), out)
        return out
