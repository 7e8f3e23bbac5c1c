"""Paste tools (nekobin.com) for itayki."""

from typing import Optional

from ..client import ItaykiClient
from ..utils.helpers import upstream_call


def register_tools(mcp, client: ItaykiClient):
    async def paste(content: str, title: Optional[str] = None, author: Optional[str] = None):
        """Pega `content` en nekobin.com."""
        return await upstream_call(client.paste(content, title, author))

    async def get_paste(paste: str):
        """Contenido de un paste de nekobin.com."""
        return await upstream_call(client.get_paste(paste))

    mcp.tool()(paste)
    mcp.tool()(get_paste)
