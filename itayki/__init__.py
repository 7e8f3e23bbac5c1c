"""itayki package.

Async client for api.itayki.com. The module-level functions share one
default `ItaykiClient`; build your own client to point at another host.
Also exports the FastMCP app factory `create_app`.
"""
from .client import ItaykiClient
from .server import create_app

_default = ItaykiClient()

get_exec_langs = _default.get_exec_langs
exec_code = _default.exec_code
ocr = _default.ocr
translate = _default.translate
urban = _default.urban
webshot = _default.webshot
random_number = _default.random_number
pypi_search = _default.pypi_search
paste = _default.paste
get_paste = _default.get_paste

__all__ = [
    "ItaykiClient", "create_app",
    "get_exec_langs", "exec_code", "ocr", "translate", "urban",
    "webshot", "random_number", "pypi_search", "paste", "get_paste",
]
