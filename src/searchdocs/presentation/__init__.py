"""Presentation Layer - MCP server and command line entry points."""
