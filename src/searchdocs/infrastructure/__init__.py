"""
Infrastructure Layer - external API clients and rendering backends.

Submodules:
    sources: DuckDuckGo / Wikipedia HTTP clients
    rendering: document canvas protocol and the fpdf2 backend
"""

from .sources import DuckDuckGoClient, WikipediaClient

__all__ = ["DuckDuckGoClient", "WikipediaClient"]
