"""Metadata and help tools for itayki."""

from importlib.metadata import version, PackageNotFoundError

from ..core.http_client import SCHEMA, DEFAULT_TIMEOUT

# Version info
try:
    __VERSION__ = version("itayki-api")   # nombre del paquete en pyproject
except PackageNotFoundError:
    __VERSION__ = "0.0.0+dev"


def health():
    """Health check endpoint."""
    return {"schemaVersion": SCHEMA, "ok": True, "sources": ["itayki"]}


def help_text():
    """Versión en texto plano de la ayuda (útil para hosts minimalistas)."""
    return (
        "itayki · Qué puedo hacer:\n"
        "- exec_langs / exec_code(lang, code): ejecutar código vía tio.run.\n"
        "- ocr(url): texto de una imagen.\n"
        "- translate(text, from_lang, to_lang='en'): traducir texto.\n"
        "- urban(query): Urban Dictionary.\n"
        "- webshot(url, width=1280, height=720): captura de un sitio.\n"
        "- random_number(min=1, max=100): número aleatorio.\n"
        "- pypi_search(package_name): buscar paquetes en PyPI.\n"
        "- paste(content, title, author) / get_paste(paste): nekobin.com.\n"
    )


def make_about(base_url: str, timeout: float = DEFAULT_TIMEOUT):
    def about():
        """About information for the service."""
        return {
            "schemaVersion": SCHEMA,
            "name": "itayki",
            "version": __VERSION__,
            "endpoints": {"itayki": base_url},
            "limits": {"timeoutSec": timeout, "retries": 0}
        }
    return about


def register_tools(mcp, client):
    """Register meta/help tools with FastMCP."""
    mcp.tool()(health)
    mcp.tool()(help_text)
    mcp.tool()(make_about(client.api.base_url, client.api.timeout))
