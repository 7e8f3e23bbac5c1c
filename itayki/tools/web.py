"""Web tools for itayki: screenshots, random numbers and PyPI search."""

from mcp.server.fastmcp import Image

from ..client import ItaykiClient
from ..utils.helpers import upstream_call


def register_tools(mcp, client: ItaykiClient):
    async def webshot(url: str, width: int = 1280, height: int = 720):
        """Captura de pantalla del sitio `url` (PNG)."""
        shot = await upstream_call(client.webshot(url, width, height))
        if isinstance(shot, bytes):
            return Image(data=shot, format="png")
        return shot

    async def random_number(min: int = 1, max: int = 100):
        """Random number between `min` and `max`."""
        return await upstream_call(client.random_number(min, max))

    async def pypi_search(package_name: str):
        """Busca paquetes de python en PyPI."""
        return await upstream_call(client.pypi_search(package_name))

    mcp.tool()(webshot)
    mcp.tool()(random_number)
    mcp.tool()(pypi_search)
