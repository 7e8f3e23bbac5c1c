"""Data models for the itayki client."""

from .types import ExecResult, Translation, UrbanEntry, PasteResult

__all__ = ["ExecResult", "Translation", "UrbanEntry", "PasteResult"]
