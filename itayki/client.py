"""Async wrappers around the api.itayki.com endpoints.

Every method returns a plain instructional string instead of raising when a
required argument is missing, so a chat frontend can show the result as is.

The shape of a remote error is not uniform across endpoints: ocr and webshot
format it as ``Error: <msg>``, translate returns the raw payload, exec_code
folds ``Errors`` into its text block and the rest pass the payload through.
Callers depend on each of these, so they are kept per endpoint.
"""

from typing import Any, Dict, List, Optional, Union

from .core.formatters import as_object, format_exec, format_ocr, format_translation, try_json
from .core.http_client import API_URL, DEFAULT_TIMEOUT, ApiClient, raise_for_upstream
from .models.types import PasteResult, UrbanEntry


class ItaykiClient:
    def __init__(self, base_url: str = API_URL, timeout: float = DEFAULT_TIMEOUT):
        self.api = ApiClient(base_url, timeout)

    async def get_exec_langs(self) -> Optional[List[str]]:
        """Languages tio.run can execute."""
        data = as_object(await self.api.get_json("/execlangs"))
        return data.get("langs")

    async def exec_code(self, lang: str, code: str) -> Union[str, List[str], None]:
        """Execute `code` written in `lang` through tio.run."""
        if not lang or not code:
            return "please specify the code or the language"

        data = as_object(await self.api.get_json("/exec", {"lang": lang, "code": code}))
        return format_exec(data)

    async def ocr(self, url: str) -> Optional[str]:
        """Text found in the image at `url`."""
        if not url:
            return "please specify the url"

        data = as_object(await self.api.get_json("/ocr", {"url": url}))
        return format_ocr(data)

    async def translate(self, text: str, from_lang: Optional[str] = None, to_lang: str = "en") -> Union[str, Dict[str, Any]]:
        """
        Translate `text`.
        from_lang: source language code, auto detected when omitted.
        to_lang: target language code (default: english).
        """
        if not text:
            return "please specify the text"

        data = await self.api.get_json("/tr", {"text": text, "fromlang": from_lang, "lang": to_lang})
        if isinstance(data, dict) and "error" in data:
            return data
        return format_translation(as_object(data))

    async def urban(self, query: str) -> Union[str, List[UrbanEntry], None]:
        """Urban Dictionary results for `query`."""
        if not query:
            return "please specify the query"

        data = as_object(await self.api.get_json("/ud", {"query": query}))
        return data.get("results")

    async def webshot(self, url: str, width: int = 1280, height: int = 720) -> Union[str, bytes, None]:
        """
        Screenshot of the site at `url`.
        Returns the image bytes, or `Error: <msg>` when the API answers with JSON.
        """
        if not url:
            return "please specify the url"

        r = await self.api.get("/print", {"url": url, "width": width, "height": height})
        data = try_json(r)
        if data is None:
            raise_for_upstream(r)
            return r.content
        if "error" in data:
            return f"Error: {data['error']}"
        # JSON without an error is neither an image nor a failure
        return None

    async def random_number(self, min: int = 1, max: int = 100) -> Union[str, int, None]:
        """Random number between `min` and `max`."""
        if not min or not max:
            return "please specify the min and max"

        data = as_object(await self.api.get_json("/random", {"min": min, "max": max}))
        return data.get("number")

    async def pypi_search(self, package_name: str) -> Any:
        """Search python packages on pypi."""
        if not package_name:
            return "please specify the package name"

        return await self.api.get_json("/pypi", {"package": package_name})

    async def paste(self, content: str, title: Optional[str] = None, author: Optional[str] = None) -> Union[str, PasteResult]:
        """Paste `content` on nekobin.com."""
        if not content:
            return "please specify the content"

        return await self.api.get_json("/paste", {"content": content, "title": title, "author": author})

    async def get_paste(self, paste: str) -> Union[str, PasteResult]:
        """Paste data from nekobin.com."""
        if not paste:
            return "please specify the paste"

        return await self.api.get_json("/get_paste", {"paste": paste})
