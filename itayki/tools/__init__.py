"""MCP tools for itayki."""

# Import all tools to register them with FastMCP
from . import code
from . import text
from . import web
from . import paste
from . import meta

__all__ = [
    "code",
    "text",
    "web",
    "paste",
    "meta"
]
