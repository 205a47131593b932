"""Tests for cursor parsing and feed row grouping."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from uuid import uuid4

from reelfeed.shared.utils.pagination import (
    as_utc,
    encode_cursor,
    group_rows,
    in_order,
    parse_cursor,
    split_window,
)


class TestParseCursor:
    def test_missing_cursor(self):
        assert parse_cursor(None) is None
        assert parse_cursor("") is None

    def test_zulu_suffix(self):
        parsed = parse_cursor("2024-01-15T10:30:00.123456Z")
        assert parsed == datetime(2024, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)

    def test_offset_is_converted_to_utc(self):
        parsed = parse_cursor("2024-01-15T12:30:00+02:00")
        assert parsed == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert parsed.utcoffset() == timedelta(0)

    def test_naive_timestamp_is_taken_as_utc(self):
        assert parse_cursor("2024-01-15T10:30:00") == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_garbage_means_no_cursor(self):
        assert parse_cursor("yesterday") is None
        assert parse_cursor("2024-13-45T99:00:00Z") is None

    def test_out_of_range_after_utc_shift_means_no_cursor(self):
        assert parse_cursor("9999-12-31T23:59:59-05:00") is None
        assert parse_cursor("0001-01-01T00:00:00+14:00") is None


class TestEncodeCursor:
    def test_format(self):
        value = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert encode_cursor(value) == "2024-01-15T10:30:00.000000Z"

    def test_naive_value(self):
        assert encode_cursor(datetime(2024, 1, 15, 10, 30, 0, 5)) == "2024-01-15T10:30:00.000005Z"

    def test_parse_accepts_encoded_cursor(self):
        value = datetime(2024, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)
        assert parse_cursor(encode_cursor(value)) == value


def test_as_utc_converts_offsets():
    plus_two = timezone(timedelta(hours=2))
    assert as_utc(datetime(2024, 1, 1, 2, 0, tzinfo=plus_two)) == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)


class TestSplitWindow:
    def test_extra_row_means_more(self):
        kept, has_more = split_window([1, 2, 3, 4, 5, 6], 5)
        assert kept == [1, 2, 3, 4, 5]
        assert has_more is True

    def test_exact_fit_is_last_page(self):
        kept, has_more = split_window([1, 2, 3, 4, 5], 5)
        assert kept == [1, 2, 3, 4, 5]
        assert has_more is False

    def test_empty(self):
        assert split_window([], 10) == ([], False)


def _video():
    return SimpleNamespace(id=uuid4())


def _relation(user_id=None):
    return SimpleNamespace(id=uuid4(), user_id=user_id or uuid4())


class TestGroupRows:
    def test_cross_product_is_counted_once(self):
        video, owner = _video(), SimpleNamespace(id=uuid4())
        likes = [_relation(), _relation()]
        bookmarks = [_relation(), _relation(), _relation()]
        rows = [(video, owner, like, bookmark) for like in likes for bookmark in bookmarks]

        grouped = group_rows(rows)

        assert list(grouped) == [video.id]
        assert len(grouped[video.id].likes) == 2
        assert len(grouped[video.id].bookmarks) == 3

    def test_unmatched_outer_joins(self):
        video, owner = _video(), SimpleNamespace(id=uuid4())
        like = _relation()

        grouped = group_rows([(video, owner, like, None)])

        assert grouped[video.id].owner is owner
        assert list(grouped[video.id].likes.values()) == [like]
        assert grouped[video.id].bookmarks == {}

    def test_in_order_follows_id_list(self):
        first, second, third = _video(), _video(), _video()
        owner = SimpleNamespace(id=uuid4())
        grouped = group_rows([(v, owner, None, None) for v in (third, first, second)])

        ordered = in_order([first.id, second.id, uuid4(), third.id], grouped)

        assert [entry.video for entry in ordered] == [first, second, third]
