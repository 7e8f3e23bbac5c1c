"""Core functionality for the itayki client."""

from .http_client import API_URL, ApiClient, build_url, http_get, err_payload
from .formatters import format_exec, format_ocr, format_translation, try_json

__all__ = [
    "API_URL", "ApiClient", "build_url", "http_get", "err_payload",
    "format_exec", "format_ocr", "format_translation", "try_json"
]
