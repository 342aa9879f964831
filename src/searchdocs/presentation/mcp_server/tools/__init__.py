"""
SearchDocs MCP Tools

- search_web_sources: Aggregated reference search
- generate_documentation: Markdown quick guide + detailed guide
- export_documentation: PDF / text export to disk

Usage:
    from .tools import register_all_tools
    register_all_tools(mcp, workflow_factory, output_dir)
"""

from mcp.server.fastmcp import FastMCP

from ._common import WorkflowFactory
from .documentation import register_documentation_tools


def register_all_tools(mcp: FastMCP, workflow_factory: WorkflowFactory, output_dir: str) -> list[str]:
    """Register every SearchDocs tool; returns the tool names."""
    register_documentation_tools(mcp, workflow_factory, output_dir)
    return ["search_web_sources", "generate_documentation", "export_documentation"]


__all__ = ["register_all_tools", "register_documentation_tools"]
