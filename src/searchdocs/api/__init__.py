"""
HTTP API for SearchDocs.

Provides REST endpoints for searching and exporting documentation without an
MCP client.
"""

from .server import create_api_server, run_api_server

__all__ = ["create_api_server", "run_api_server"]
