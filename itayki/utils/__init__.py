"""Utilities for the itayki MCP tools."""

from .helpers import upstream_call

__all__ = ["upstream_call"]
