"""Shared helpers for the SearchDocs MCP tools."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeAlias

from searchdocs.application.notifications import CollectingNotifier, Notifier
from searchdocs.application.workflow import SearchDocsWorkflow
from searchdocs.shared.exceptions import SearchDocsError

WorkflowFactory: TypeAlias = Callable[[Notifier], SearchDocsWorkflow]


def success_response(payload: dict[str, Any], notifier: CollectingNotifier) -> str:
    return json.dumps(
        {"status": "success", **payload, "notifications": notifier.to_list()},
        ensure_ascii=False,
        indent=2,
    )


def error_response(error: SearchDocsError, notifier: CollectingNotifier) -> str:
    return json.dumps(
        {"status": "error", **error.to_dict(), "notifications": notifier.to_list()},
        ensure_ascii=False,
        indent=2,
    )
