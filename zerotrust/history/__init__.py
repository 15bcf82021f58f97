"""History views: filtering, sorting, bucketing, stats and export."""

from .age import UNKNOWN_AGE_MINUTES, age_in_minutes, age_sort_key, format_age, reconstruct_timestamp
from .export import CSV_HEADER, export_csv, export_json, export_text
from .grouping import HistoryGroups, group_records, grouped_history
from .query import ALL_STATUSES, HistoryQuery, SortKey, filter_records, query_history, sort_records
from .stats import HistoryStats, summarize

__all__ = [
    "UNKNOWN_AGE_MINUTES",
    "age_in_minutes",
    "age_sort_key",
    "format_age",
    "reconstruct_timestamp",
    "CSV_HEADER",
    "export_csv",
    "export_json",
    "export_text",
    "HistoryGroups",
    "group_records",
    "grouped_history",
    "ALL_STATUSES",
    "HistoryQuery",
    "SortKey",
    "filter_records",
    "query_history",
    "sort_records",
    "HistoryStats",
    "summarize",
]
