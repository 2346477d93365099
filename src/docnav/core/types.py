"""Core type definitions."""

from typing import NewType

# URL path of a page (e.g., "/docs", "/docs/guides/intro")
URLPath = NewType("URLPath", str)
