"""
SearchDocs MCP Server Instructions

Shown to AI agents when they connect to the server.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
SearchDocs turns a topic into a short documentation package built from public
reference sources (DuckDuckGo instant answers and Wikipedia summaries).

## Tools
- search_web_sources(query): raw aggregated results (at most 8)
- generate_documentation(query): Markdown quick guide and detailed guide
- export_documentation(query, text_only=False): writes a PDF (or .txt fallback)
  and returns its path

## Notes
- Results may include placeholder entries (sources Google/Bing/Yahoo/Baidu,
  example.com URLs) when the real sources return fewer than 3 results.
- totalResults and searchTime are display values, not measurements.
- The guides are templated prose; verify facts against the listed sources.
"""
