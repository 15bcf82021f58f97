"""Tests for history filtering, sorting and bucketing."""

from datetime import datetime, timedelta

import pytest

from zerotrust.history import (
    UNKNOWN_AGE_MINUTES,
    HistoryQuery,
    SortKey,
    age_in_minutes,
    filter_records,
    format_age,
    group_records,
    grouped_history,
    query_history,
    reconstruct_timestamp,
    sort_records,
)
from zerotrust.storage import ScanRecord


def _ids(records):
    return [r.id for r in records]


class TestFilter:
    """Status and text filters."""

    def test_all(self, mixed_records):
        assert _ids(filter_records(mixed_records)) == [1, 2, 3, 4, 5, 6]

    def test_status_only(self, mixed_records):
        result = filter_records(mixed_records, status_filter="blocked")
        assert _ids(result) == [1, 3]
        assert all(r.status == "blocked" for r in result)

    def test_text_matches_subject_case_insensitively(self, mixed_records):
        assert _ids(filter_records(mixed_records, text_filter="AMAZON")) == [3]

    def test_text_matches_type(self, mixed_records):
        assert _ids(filter_records(mixed_records, text_filter="email")) == [2, 5]

    def test_blank_text_is_no_filter(self, mixed_records):
        assert len(filter_records(mixed_records, text_filter="   ")) == 6

    def test_surrounding_spaces_are_part_of_the_search(self, mixed_records):
        assert _ids(filter_records(mixed_records, text_filter="login")) == [3]
        assert filter_records(mixed_records, text_filter="login ") == []
        assert _ids(filter_records(mixed_records, text_filter=" message")) == [2]

    def test_status_and_text_intersect(self, mixed_records):
        assert _ids(filter_records(mixed_records, "blocked", "amazon")) == [3]
        assert filter_records(mixed_records, "flagged", "paypal") == []

    def test_unknown_status_matches_nothing(self, mixed_records):
        assert filter_records(mixed_records, status_filter="quarantined") == []


class TestSort:
    """Comparator-based orderings."""

    def test_name(self, mixed_records):
        assert _ids(sort_records(mixed_records, "name")) == [3, 5, 2, 1, 4, 6]

    def test_status(self, mixed_records):
        assert _ids(sort_records(mixed_records, "status")) == [1, 3, 2, 5, 4, 6]

    def test_threat_descending_unknown_last(self, mixed_records):
        assert _ids(sort_records(mixed_records, "threat")) == [1, 3, 2, 5, 4, 6]

    def test_date_by_parsed_age(self, mixed_records, now):
        shuffled = list(reversed(mixed_records))
        result = sort_records(shuffled, "date", now)
        # Parseable ages first, then unparseable ones in their incoming order.
        assert _ids(result) == [1, 2, 6, 5, 4, 3]

    def test_date_with_timestamps(self, now):
        records = [
            ScanRecord("old", "url", "low", "safe", now - timedelta(hours=5), id=1),
            ScanRecord("new", "url", "low", "safe", now - timedelta(minutes=1), id=2),
            ScanRecord("legacy", "url", "low", "safe", "30 min ago", id=3),
        ]
        assert _ids(sort_records(records, SortKey.DATE, now)) == [2, 3, 1]

    def test_very_old_timestamp_sorts_before_unparseable(self, now):
        records = [
            ScanRecord("unknown", "url", "low", "safe", "sometime", id=1),
            ScanRecord("ancient", "url", "low", "safe", now - timedelta(days=730), id=2),
        ]
        assert age_in_minutes(records[1].occurred_at, now) > UNKNOWN_AGE_MINUTES
        assert _ids(sort_records(records, SortKey.DATE, now)) == [2, 1]

    def test_unknown_key_falls_back_to_date(self, mixed_records, now):
        assert sort_records(mixed_records, "bogus", now) == sort_records(mixed_records, "date", now)

    def test_sort_does_not_mutate_input(self, mixed_records):
        before = list(mixed_records)
        sort_records(mixed_records, "name")
        assert mixed_records == before


class TestQuery:
    def test_filter_then_sort(self, mixed_records, now):
        options = HistoryQuery(status_filter="flagged", sort_key="name")
        assert _ids(query_history(mixed_records, options, now)) == [5, 2]

    def test_defaults(self, mixed_records, now):
        assert _ids(query_history(mixed_records, now=now)) == [1, 2, 3, 4, 5, 6]

    def test_idempotent(self, sample_history, now):
        options = HistoryQuery(status_filter="blocked", text_filter="net", sort_key="threat")
        first = query_history(sample_history.list(), options, now)
        second = query_history(sample_history.list(), options, now)
        assert first == second
        assert _ids(first) == [3]


class TestAgeParsing:
    """Relative-age descriptors."""

    @pytest.mark.parametrize(
        "value, minutes",
        [
            ("2 min ago", 2),
            ("5 mins ago", 5),
            ("1 hour ago", 60),
            ("3 hours ago", 180),
            ("abc min ago", 0),
            ("3 days ago", UNKNOWN_AGE_MINUTES),
            ("just now", UNKNOWN_AGE_MINUTES),
            ("", UNKNOWN_AGE_MINUTES),
            (None, UNKNOWN_AGE_MINUTES),
        ],
    )
    def test_age_in_minutes(self, value, minutes):
        assert age_in_minutes(value) == minutes

    def test_age_of_timestamp(self, now):
        assert age_in_minutes(now - timedelta(minutes=90), now) == 90

    @pytest.mark.parametrize(
        "value, delta",
        [
            ("10 min ago", timedelta(minutes=10)),
            ("2 hours ago", timedelta(hours=2)),
            ("1 day ago", timedelta(days=1)),
            ("a day ago", timedelta(days=1)),
            ("5 days ago", timedelta(days=5)),
            ("few days ago", timedelta(days=3)),
            ("2 month ago", timedelta(days=60)),
            ("a month ago", timedelta(days=30)),
            ("last tuesday", timedelta(0)),
        ],
    )
    def test_reconstruct_timestamp(self, value, delta, now):
        assert reconstruct_timestamp(value, now) == now - delta

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (timedelta(seconds=30), "0 min ago"),
            (timedelta(minutes=59), "59 min ago"),
            (timedelta(hours=1), "1 hour ago"),
            (timedelta(hours=5), "5 hours ago"),
            (timedelta(days=1), "1 day ago"),
            (timedelta(days=3), "3 days ago"),
            (timedelta(days=45), "1 month ago"),
            (timedelta(days=90), "3 months ago"),
        ],
    )
    def test_format_age(self, delta, expected, now):
        assert format_age(now - delta, now) == expected

    def test_format_age_parses_back(self, now):
        for delta in (timedelta(minutes=7), timedelta(hours=3), timedelta(days=2)):
            text = format_age(now - delta, now)
            assert reconstruct_timestamp(text, now) == now - delta


class TestGrouping:
    """Day buckets."""

    def test_buckets(self, mixed_records, now):
        groups = group_records(mixed_records, now)
        assert _ids(groups.today) == [1, 2, 6]
        assert _ids(groups.yesterday) == [3]
        assert _ids(groups.this_week) == [4]
        assert _ids(groups.older) == [5]
        assert len(groups) == 6

    def test_hours_crossing_midnight_land_in_yesterday(self, now):
        record = ScanRecord("late", "url", "low", "safe", "20 hours ago", id=1)
        assert _ids(group_records([record], now).yesterday) == [1]

    def test_timestamps(self, now):
        records = [
            ScanRecord("a", "url", "low", "safe", datetime(2024, 6, 15, 0, 5), id=1),
            ScanRecord("b", "url", "low", "safe", datetime(2024, 6, 14, 23, 55), id=2),
            ScanRecord("c", "url", "low", "safe", datetime(2024, 6, 9, 8, 0), id=3),
            ScanRecord("d", "url", "low", "safe", datetime(2024, 5, 1, 8, 0), id=4),
        ]
        groups = group_records(records, now)
        assert _ids(groups.today) == [1]
        assert _ids(groups.yesterday) == [2]
        assert _ids(groups.this_week) == [3]
        assert _ids(groups.older) == [4]

    def test_sections_skip_empty_buckets(self, sample_history, now):
        sections = list(group_records(sample_history.list(), now).sections())
        assert [name for name, _ in sections] == ["today"]
        assert len(sections[0][1]) == 4

    def test_grouped_history_keeps_query_order(self, mixed_records, now):
        options = HistoryQuery(sort_key="threat")
        groups = grouped_history(mixed_records, options, now)
        assert _ids(groups.today) == [1, 2, 6]
        options = HistoryQuery(sort_key="name")
        groups = grouped_history(mixed_records, options, now)
        assert _ids(groups.today) == [2, 1, 6]

    def test_empty(self, now):
        groups = group_records([], now)
        assert len(groups) == 0
        assert list(groups.sections()) == []
