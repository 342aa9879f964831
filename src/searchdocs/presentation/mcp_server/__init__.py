"""
SearchDocs MCP Server

Usage as standalone server:
    python -m searchdocs.presentation.mcp_server

Or in mcp.json:
    {
        "servers": {
            "searchdocs": {
                "type": "stdio",
                "command": "searchdocs-mcp"
            }
        }
    }

Usage for integration:
    from searchdocs.presentation.mcp_server import create_server

    server = create_server()
    server.run()
"""

from __future__ import annotations

from .server import create_server, get_container, main
from .tools import register_all_tools

__all__ = ["create_server", "get_container", "main", "register_all_tools"]
