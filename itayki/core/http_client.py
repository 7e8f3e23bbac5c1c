"""HTTP client and URL helpers for the itayki API."""

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

import requests

logger = logging.getLogger(__name__)

# Constants
API_URL = "https://api.itayki.com"
DEFAULT_TIMEOUT = 15
UA = "itayki-api/0.1"
SCHEMA = "1.0.0"


def build_url(path: str, params: Optional[Mapping[str, Any]] = None, base_url: str = API_URL) -> str:
    """Resolve `path` against `base_url` and set every truthy param on the query."""
    url = urljoin(base_url, path)
    if not params:
        return url

    scheme, netloc, url_path, query, fragment = urlsplit(url)
    query_params = dict(parse_qsl(query, keep_blank_values=True))
    for key, value in params.items():
        if value:
            query_params[key] = str(value)
    return urlunsplit((scheme, netloc, url_path, urlencode(query_params), fragment))


def _req(method: str, url: str, **kw) -> requests.Response:
    """Internal request function. Single attempt, errors propagate."""
    timeout = kw.pop("timeout", DEFAULT_TIMEOUT)
    headers = {"User-Agent": UA, **kw.pop("headers", {})}
    logger.debug("%s %s", method, url)
    return requests.request(method, url, timeout=timeout, headers=headers, **kw)


def http_get(url: str, **kw) -> requests.Response:
    return _req("GET", url, **kw)


def err_payload(source: str, code: str, message: str) -> Dict[str, Any]:
    return {"schemaVersion": SCHEMA, "error": {"code": code, "message": message, "source": source}}


class ApiClient:
    """Binds a base origin and timeout; runs the blocking GET off the event loop."""

    def __init__(self, base_url: str = API_URL, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url
        self.timeout = timeout

    def url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return build_url(path, params, base_url=self.base_url)

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> requests.Response:
        return await asyncio.to_thread(http_get, self.url(path, params), timeout=self.timeout)

    async def get_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        r = await self.get(path, params)
        try:
            return r.json()
        except requests.JSONDecodeError:
            # an error page in place of a payload: report the status, not the body
            raise_for_upstream(r)
            raise


def raise_for_upstream(r: requests.Response) -> None:
    """Raise `requests.HTTPError` when `r` carries a 4xx/5xx status."""
    if r.status_code >= 400:
        r.raise_for_status()
