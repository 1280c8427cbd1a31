"""enro core: constants and result aggregation."""

from .result_aggregator import Summary, fold, merge, merge_all, summarize

__all__ = ["Summary", "fold", "merge", "merge_all", "summarize"]
