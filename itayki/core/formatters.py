"""Shaping of raw itayki payloads into display strings."""

from typing import Any, Dict, List, Optional, Union

import requests

from ..models.types import ExecResult, Translation


def as_object(data: Any) -> Dict[str, Any]:
    """`data` when it is a JSON object, else an empty one (lists, strings, numbers)."""
    return data if isinstance(data, dict) else {}


def format_exec(data: ExecResult) -> Union[str, List[str], None]:
    head = f"Language: {data.get('Language')}\n\nCode: {data.get('Code')}\n\nResults: {data.get('Results')}"
    if "Errors" in data:
        return f"{head}\n\nErrors: {data.get('Errors')}"
    if "Stats" in data:
        return f"{head}\n\nStats: {data.get('Stats')}"
    # /exec answers with the language list when it did not run anything
    return data.get("langs")


def format_ocr(data: Dict[str, Any]) -> Optional[str]:
    if "ocr" in data:
        return f"ocr: {data['ocr']}"
    if "error" in data:
        return f"Error: {data['error']}"
    return None


def format_translation(data: Translation) -> str:
    return (
        f"Text: {data.get('text')}\n\n"
        f"From language: {data.get('from_language')}\n\n"
        f"To language: {data.get('to_language')}"
    )


def try_json(r: requests.Response) -> Optional[Dict[str, Any]]:
    """First step of the webshot decode: the body as a JSON object, or None.

    Reading `r.json()` leaves `r.content` intact, so the caller can still
    hand out the raw bytes afterwards.
    """
    try:
        data = r.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
