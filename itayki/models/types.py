"""Type definitions for the itayki payloads."""

from typing import TypedDict, Optional, List


class ExecResult(TypedDict, total=False):
    Language: str
    Code: str
    Results: str
    Stats: str                     # present on a clean run
    Errors: str                    # present when the program wrote to stderr
    langs: List[str]


class Translation(TypedDict, total=False):
    text: str
    from_language: str
    to_language: str
    error: str


class UrbanEntry(TypedDict, total=False):
    word: str
    definition: str
    example: Optional[str]
    author: Optional[str]
    thumbs_up: int
    thumbs_down: int
    permalink: str


class PasteResult(TypedDict, total=False):
    key: str
    url: str
    title: Optional[str]
    author: Optional[str]
    content: str
    error: str
