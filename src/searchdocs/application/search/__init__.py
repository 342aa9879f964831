"""
Search Application Module

Provides:
- validate_query: Blank-query guard run before any network call
- ResultAggregator: Concurrent multi-source search with filler backfill
"""

from .query_validator import is_blank, validate_query
from .result_aggregator import (
    BACKFILL_TARGET,
    MIN_REAL_RESULTS,
    ProgressCallback,
    ResultAggregator,
    SearchSource,
    generate_filler_results,
)

__all__ = [
    "validate_query",
    "is_blank",
    "ResultAggregator",
    "SearchSource",
    "ProgressCallback",
    "generate_filler_results",
    "MIN_REAL_RESULTS",
    "BACKFILL_TARGET",
]
