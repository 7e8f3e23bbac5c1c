"""Code execution tools (tio.run) for itayki."""

from ..client import ItaykiClient
from ..utils.helpers import upstream_call


def register_tools(mcp, client: ItaykiClient):
    async def exec_langs():
        """Languages supported by exec_code."""
        return await upstream_call(client.get_exec_langs())

    async def exec_code(lang: str, code: str):
        """Ejecuta `code` en el lenguaje `lang` vía tio.run y devuelve resultados y estadísticas."""
        return await upstream_call(client.exec_code(lang, code))

    mcp.tool()(exec_langs)
    mcp.tool()(exec_code)
