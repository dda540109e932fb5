"""Tests for date parsing, tag stripping and the company sort key."""

from datetime import datetime, timedelta, timezone

from backend.utils.helpers import collation_key, days_since, parse_date, strip_html_tags


class TestStripHtmlTags:
    def test_removes_tags(self):
        assert strip_html_tags("<b>Senior</b> Engineer") == "Senior Engineer"

    def test_plain_text_unchanged(self):
        assert strip_html_tags("Senior Engineer") == "Senior Engineer"

    def test_unclosed_angle_left_alone(self):
        assert strip_html_tags("a < b") == "a < b"

    def test_adjacent_text_is_concatenated(self):
        assert strip_html_tags("line one<br>line two") == "line oneline two"

    def test_case_insensitive_and_attributes(self):
        text = '<P CLASS="x">Hello</P><a href="https://x.io">link</a>'
        assert strip_html_tags(text) == "Hellolink"

    def test_empty(self):
        assert strip_html_tags("") == ""
        assert strip_html_tags(None) == ""


class TestParseDate:
    def test_iso_with_z(self):
        dt = parse_date("2026-10-10T08:30:00.000Z")
        assert dt == datetime(2026, 10, 10, 8, 30, tzinfo=timezone.utc)

    def test_naive_treated_as_utc(self):
        assert parse_date("2026-10-10").tzinfo is not None

    def test_garbage_is_none(self):
        assert parse_date("not a date") is None
        assert parse_date("") is None
        assert parse_date(None) is None


class TestDaysSince:
    now = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)

    def test_rounds_up_partial_days(self):
        posted = (self.now - timedelta(days=6, hours=1)).isoformat()
        assert days_since(posted, self.now) == 7

    def test_exact_days(self):
        posted = (self.now - timedelta(days=7)).isoformat()
        assert days_since(posted, self.now) == 7

    def test_just_over_a_week(self):
        posted = (self.now - timedelta(days=7, seconds=1)).isoformat()
        assert days_since(posted, self.now) == 8

    def test_unparseable(self):
        assert days_since("sometime soon", self.now) is None


class TestCollationKey:
    def test_case_insensitive_primary_order(self):
        names = ["zeta", "Banana", "apple"]
        assert sorted(names, key=collation_key) == ["apple", "Banana", "zeta"]

    def test_accents_sort_with_base_letter(self):
        names = ["Zoo", "Émile", "Eagle", "Fox"]
        assert sorted(names, key=collation_key) == ["Eagle", "Émile", "Fox", "Zoo"]

    def test_lowercase_before_uppercase_on_tie(self):
        assert sorted(["Acme", "acme"], key=collation_key) == ["acme", "Acme"]
