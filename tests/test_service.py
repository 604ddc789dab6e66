"""End-to-end tests through DateService and DateField."""

from datetime import UTC, datetime

import pytest

from datefield import DateField, DateService, DateSettings, FixedClock, FormatError, InvalidFormatError


class TestCreate:
    def test_create_returns_bound_field(self, dates):
        field = dates.create("2003-03-04")
        assert isinstance(field, DateField)
        assert field.service is dates
        assert field.get_value() == "2003-03-04"
        assert str(field) == "2003-03-04"

    @pytest.mark.parametrize("raw", ["", None, False, [], "0000-00-00 00:00:00", "00/00/0000"])
    def test_null_and_absent_values(self, dates, raw):
        field = dates.create(raw)
        assert field.is_null
        assert field.get_value() is None

    @pytest.mark.parametrize("raw", ["0", 0])
    def test_zero_is_unix_epoch(self, dates, raw):
        assert dates.create(raw).get_value() == "1970-01-01"

    def test_ambiguous_input_raises(self, dates):
        with pytest.raises(InvalidFormatError, match="Use y-MM-dd"):
            dates.create("3/16/2003")

    def test_null_field_cannot_be_formatted(self, dates):
        with pytest.raises(FormatError):
            dates.create(None).nice()


class TestFormatting:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (1206968400, "Mar 31, 2008"),
            (1206882000, "Mar 30, 2008"),
            ("1206968400", "Mar 31, 2008"),
            ("4.3.2003", "Mar 4, 2003"),
            ("04.03.2003", "Mar 4, 2003"),
            ("2003-3-4", "Mar 4, 2003"),
            ("2003-03-04", "Mar 4, 2003"),
            ("04-03-2003", "Mar 4, 2003"),
        ],
    )
    def test_nice(self, dates, raw, expected):
        assert dates.create(raw).nice() == expected

    def test_long_and_full(self, dates):
        assert dates.create("1206882000").long() == "March 30, 2008"
        assert dates.create("3.4.2003").long() == "April 3, 2003"
        assert dates.create(1206968400).full() == "Monday, March 31, 2008"
        assert dates.create(1206968400).short() == "3/31/08"

    def test_components(self, dates):
        field = dates.create(1206968400)
        assert field.year() == "2008"
        assert field.month() == "March"
        assert field.short_month() == "Mar"
        assert field.day_of_week() == "Monday"

    def test_day_of_month_and_range(self, dates):
        field = dates.create("2000-10-10")
        assert field.day_of_month() == "10"
        assert field.day_of_month(True) == "10th"
        assert field.range_string(dates.create("2000-10-20")) == "10 - 20 Oct 2000"
        assert field.range_string(dates.create("2000-10-20"), True) == "10th - 20th Oct 2000"

    def test_format_pattern(self, dates):
        assert dates.create("2000-10-20").format("{o} MMMM YYYY") == "20th October 2000"
        assert dates.create("2000-10-20").format("Long") == "October 20, 2000"

    def test_wire_formats(self, dates):
        assert dates.create("2010-12-31").rfc3339() == "2010-12-31T00:00:00+00:00"
        assert dates.create("2010-12-31").url_date() == "2010-12-31"

    def test_datetime_field(self, clock):
        dates = DateService(DateSettings(keep_time=True), clock)
        field = dates.create("2008-03-31 13:00:00")
        assert field.get_value() == "2008-03-31 13:00:00"
        assert field.nice() == "Mar 31, 2008, 1:00 PM"
        assert field.time() == "1:00 PM"
        assert field.time12() == "1:00 PM"
        assert field.time24() == "13:00"

    def test_display_zone(self, clock):
        dates = DateService(DateSettings(keep_time=True, timezone="Europe/Berlin"), clock)
        assert dates.create("2018-01-24 14:05:53").rfc3339() == "2018-01-24T15:05:53+01:00"

    def test_locale_from_settings(self, clock):
        dates = DateService(DateSettings(locale="en_GB"), clock)
        assert dates.create("2008-03-31").nice() == "31 Mar 2008"


class TestRelative:
    def test_ago_in_past(self, dates):
        assert dates.create("2000-11-26").ago(True, 1) == "1 month ago"
        assert dates.create("2000-11-12").ago() == "50 days ago"
        assert dates.create("2000-10-27").ago() == "2 months ago"
        assert dates.create("2000-10-27").ago(True, 3) == "66 days ago"
        assert dates.create("1990-12-31").ago() == "10 years ago"

    def test_ago_in_future(self, clock):
        dates = DateService(clock=clock)
        with clock.mocked(datetime(2000, 12, 31, tzinfo=UTC)):
            assert dates.create("2010-12-31").ago() == "in 10 years"
            assert dates.create("2001-01-01").ago(True, 1) == "in 1 day"
            assert dates.create("2001-01-01").ago() == "in 24 hours"

    def test_default_significance_from_settings(self, clock):
        dates = DateService(DateSettings(significance=1), clock)
        assert dates.create("2000-11-26").ago() == "1 month ago"
        assert dates.create("2000-11-26").time_diff() == "1 month"

    def test_time_diff_helpers(self, dates):
        field = dates.create("2000-11-12")
        assert field.time_diff() == "50 days"
        assert field.time_diff_in("hours") == "1188 hours"
        assert field.in_past()
        assert not field.in_future()
        assert not field.is_today()
        assert dates.create("2000-12-31").is_today()

    def test_default_clock_is_system_clock(self):
        dates = DateService()
        assert dates.create("1990-01-01").in_past()
        assert dates.create("2999-01-01").in_future()


class TestModify:
    @pytest.mark.parametrize(
        "adjustment, expected",
        [("+1 day", "2019-03-04"), ("-24 hours", "2019-03-02"), ("+2 weeks", "2019-03-17"), ("-2 years", "2017-03-03")],
    )
    def test_modify(self, dates, adjustment, expected):
        assert dates.create("2019-03-03").modify(adjustment).url_date() == expected

    def test_modify_returns_new_field(self, dates):
        field = dates.create("2019-03-03")
        moved = field.modify("+1 month")
        assert moved is not field
        assert moved.service is dates
        assert field.get_value() == "2019-03-03"
        assert moved.get_value() == "2019-04-03"


def test_settings_and_clock_exposed():
    clock = FixedClock()
    settings = DateSettings(locale="de_DE")
    dates = DateService(settings, clock)
    assert dates.settings is settings
    assert dates.clock is clock
    assert dates.formatter.locale.code == "de_DE"
