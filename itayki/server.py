# SPDX-License-Identifier: MIT
"""
itayki MCP server entrypoint.

Wires FastMCP with all tool modules under itayki/tools/, sharing one client.
"""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .client import ItaykiClient
# Import tool modules (each provides register_tools(mcp, client))
from .tools import code, text, web, paste, meta


def create_app(client: Optional[ItaykiClient] = None) -> FastMCP:
    client = client or ItaykiClient()
    mcp = FastMCP("itayki")

    # Register tools from each module
    code.register_tools(mcp, client)
    text.register_tools(mcp, client)
    web.register_tools(mcp, client)
    paste.register_tools(mcp, client)
    meta.register_tools(mcp, client)

    return mcp


def main():
    logging.basicConfig(level=logging.INFO)
    create_app().run()


if __name__ == "__main__":
    main()
