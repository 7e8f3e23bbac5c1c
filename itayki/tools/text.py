"""Text tools for itayki: OCR, translation and Urban Dictionary."""

from typing import Optional

from ..client import ItaykiClient
from ..utils.helpers import upstream_call


def register_tools(mcp, client: ItaykiClient):
    async def ocr(url: str):
        """Text found in the image at `url`."""
        return await upstream_call(client.ocr(url))

    async def translate(text: str, from_lang: Optional[str] = None, to_lang: str = "en"):
        """
        Traduce `text`.
        from_lang: código del idioma de origen (auto si se omite).
        to_lang: código del idioma destino (default 'en').
        """
        return await upstream_call(client.translate(text, from_lang, to_lang))

    async def urban(query: str):
        """Definiciones de Urban Dictionary para `query`."""
        return await upstream_call(client.urban(query))

    mcp.tool()(ocr)
    mcp.tool()(translate)
    mcp.tool()(urban)
