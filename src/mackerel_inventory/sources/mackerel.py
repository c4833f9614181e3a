# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""
Mackerel host source

Fetches hosts from the Mackerel API (``GET /api/v0/hosts``).
"""

import http.client
import json
import socket
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, List, Optional

from mackerel_inventory.display import Display
from mackerel_inventory.engine.errors import SourceUnavailableError
from mackerel_inventory.engine.results import HostRecord, SourceResult
from mackerel_inventory.release import __version__
from mackerel_inventory.sources.base import HostSource


DEFAULT_API_BASE = "https://api.mackerelio.com"
DEFAULT_TIMEOUT = 30
HOSTS_PATH = "/api/v0/hosts"


class MackerelHostSource(HostSource):
    """
    Host source backed by the Mackerel REST API.

    Every query is a single request; the connection is closed before the
    records are handed back.
    """

    def __init__(
        self,
        api_key: str,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        display: Optional[Display] = None,
    ):
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.display = display or Display()

    def hosts_url(self, name: Optional[str] = None) -> str:
        """Build the host list URL, with a name filter if given."""
        url = self.api_base + HOSTS_PATH
        if name:
            url += "?" + urllib.parse.urlencode({"name": name})
        return url

    def find_hosts(self, name: Optional[str] = None) -> SourceResult:
        url = self.hosts_url(name)
        try:
            payload = self._get_json(url)
            hosts = self._parse_hosts(payload, url)
        except SourceUnavailableError as e:
            return SourceResult.failure(e)

        self.display.debug(f"Mackerel returned {len(hosts)} host(s)", level=2)
        return SourceResult.success(hosts)

    def _build_request(self, url: str) -> urllib.request.Request:
        request = urllib.request.Request(url, method="GET")
        request.add_header("X-Api-Key", self.api_key)
        request.add_header("Accept", "application/json")
        request.add_header("User-Agent", f"mackerel-inventory/{__version__}")
        return request

    def _get_json(self, url: str) -> Any:
        """Perform the GET request and decode the JSON body."""
        self.display.debug(f"GET {url}", level=2)

        try:
            request = self._build_request(url)
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                content = response.read().decode("utf-8", errors="replace")
        except urllib.error.HTTPError as e:
            body = ""
            try:
                body = e.read().decode("utf-8", errors="replace")
            except OSError:
                pass
            raise SourceUnavailableError(
                str(e.reason),
                url=url,
                status=e.code,
                details=body[:200] or None,
            ) from e
        except urllib.error.URLError as e:
            raise SourceUnavailableError(str(e.reason), url=url) from e
        except socket.timeout as e:
            raise SourceUnavailableError(
                f"Request timed out after {self.timeout} seconds", url=url
            ) from e
        except OSError as e:
            raise SourceUnavailableError(str(e), url=url) from e
        except http.client.HTTPException as e:
            raise SourceUnavailableError(
                f"Bad HTTP response: {e!r}", url=url
            ) from e
        except ValueError as e:
            # Raised by Request for URLs without a usable scheme
            raise SourceUnavailableError(f"Invalid URL: {e}", url=url) from e
        except Exception as e:
            raise SourceUnavailableError(f"Request failed: {e}", url=url) from e

        try:
            return json.loads(content)
        except (json.JSONDecodeError, ValueError) as e:
            raise SourceUnavailableError(
                "Response is not valid JSON", url=url, details=str(e)
            ) from e

    def _parse_hosts(self, payload: Any, url: str) -> List[HostRecord]:
        """Turn a ``{"hosts": [...]}`` response into host records."""
        if not isinstance(payload, dict) or not isinstance(payload.get("hosts"), list):
            raise SourceUnavailableError("Response has no 'hosts' list", url=url)

        try:
            return [HostRecord.from_dict(item) for item in payload["hosts"]]
        except ValueError as e:
            raise SourceUnavailableError("Malformed host entry", url=url, details=str(e)) from e
