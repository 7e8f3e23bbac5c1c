"""Helper functions for the itayki MCP tools."""

import logging
from typing import Any, Awaitable

import requests

from ..core.http_client import err_payload

logger = logging.getLogger(__name__)

SOURCE = "itayki"


async def upstream_call(call: Awaitable[Any]) -> Any:
    """Await an endpoint call, turning transport failures into an error payload."""
    try:
        return await call
    except requests.Timeout:
        logger.warning("itayki timed out")
        return err_payload(SOURCE, "TIMEOUT", "Upstream timed out")
    except requests.HTTPError as e:
        sc = e.response.status_code if e.response is not None else 0
        logger.warning("itayki answered %s", sc)
        return err_payload(SOURCE, f"UPSTREAM_{sc}", str(e))
    except requests.JSONDecodeError as e:
        logger.warning("itayki sent an undecodable body: %s", e)
        return err_payload(SOURCE, "BAD_JSON", str(e))
    except requests.RequestException as e:
        logger.warning("itayki unreachable: %s", e)
        return err_payload(SOURCE, "NETWORK", str(e))
