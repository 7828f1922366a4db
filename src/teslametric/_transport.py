"""JSON-over-HTTP transport shared by the Tesla and LaMetric endpoints."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from teslametric._redact import redact_for_log
from teslametric.exceptions import TeslaMetricTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Endpoint modules only depend on this protocol so tests can pass a
    fake transport while production uses :class:`HttpTransport`.
    """

    async def request_json(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json_body: Any = None,
    ) -> dict[str, Any]:
        ...

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json_body: Any = None,
    ) -> str:
        ...


class HttpTransport:
    """aiohttp-backed transport that maps every failure to :class:`TeslaMetricTransportError`."""

    def __init__(self, http_session: aiohttp.ClientSession, *, timeout: float) -> None:
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json_body: Any = None,
    ) -> str:
        """Send a request and return the response text.

        Raises
        ------
        TeslaMetricTransportError
            On network errors, timeouts, non-2xx statuses and undecodable bodies.
        """
        data = None if json_body is None else json.dumps(json_body, separators=(",", ":"))

        _logger.debug("%s %s headers=%s body=%s", method, url, redact_for_log(dict(headers)), redact_for_log(json_body))

        try:
            async with self._http.request(
                method,
                url,
                data=data,
                headers=dict(headers),
                timeout=self._timeout,
            ) as resp:
                try:
                    text = await resp.text()
                except UnicodeDecodeError as exc:
                    raise TeslaMetricTransportError(
                        f"Invalid body from {method} {url}: {exc}",
                        status_code=resp.status,
                        method=method,
                        url=url,
                    ) from exc
                if not 200 <= resp.status < 300:
                    raise TeslaMetricTransportError(
                        f"HTTP {resp.status} from {method} {url}: {text[:200]}",
                        status_code=resp.status,
                        method=method,
                        url=url,
                    )
        except TeslaMetricTransportError:
            raise
        except TimeoutError as exc:
            raise TeslaMetricTransportError(
                f"{method} {url} timed out",
                method=method,
                url=url,
            ) from exc
        except aiohttp.ClientError as exc:
            raise TeslaMetricTransportError(
                f"{method} {url} failed: {exc}",
                method=method,
                url=url,
            ) from exc

        _logger.debug("%s %s -> HTTP %d", method, url, resp.status)
        return text

    async def request_json(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json_body: Any = None,
    ) -> dict[str, Any]:
        """Send a request and decode the JSON object it returns."""
        text = await self.request(method, url, headers=headers, json_body=json_body)

        try:
            body_json = json.loads(text)
        except json.JSONDecodeError as exc:
            raise TeslaMetricTransportError(
                f"Invalid JSON from {method} {url}: {text[:200]}",
                method=method,
                url=url,
            ) from exc

        if not isinstance(body_json, dict):
            raise TeslaMetricTransportError(
                f"Expected a JSON object from {method} {url}, got {type(body_json).__name__}",
                method=method,
                url=url,
            )
        return body_json
