"""Tests for the weekly opening hours adapter."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from seestadtbot.adapters.opening_hours import WeeklyOpeningHours, create_opening_hours
from seestadtbot.domain.errors import OpeningHoursFormatError
from seestadtbot.domain.ports import FoldOptions, WeekdayFormat

VIENNA = ZoneInfo("Europe/Vienna")
BAKERY = "Mo-Fr 08:00-18:00; Sa 09:00-12:00,13:00-17:00; Su off; PH off"


class TestFold:
    """Tests for folding a schedule into text."""

    def test_fold_groups_days_with_equal_hours(self) -> None:
        """Given a typical schedule, when folding, then weekdays are grouped into ranges."""
        hours = WeeklyOpeningHours(BAKERY, "Europe/Vienna")

        assert hours.fold(FoldOptions()) == (
            "Montag bis Freitag: von 08:00 bis 18:00\n"
            "Samstag: von 09:00 bis 12:00 und von 13:00 bis 17:00\n"
            "Sonntag: geschlossen\n"
            "Feiertags: geschlossen"
        )

    def test_fold_joins_short_runs_with_delimiter(self) -> None:
        """Given non-consecutive days, when folding, then they are joined instead of ranged."""
        hours = WeeklyOpeningHours("Mo,We 08:00-12:00", "Europe/Vienna")

        assert hours.fold(FoldOptions()) == (
            "Montag und Mittwoch: von 08:00 bis 12:00\n"
            "Dienstag und Donnerstag bis Sonntag: geschlossen"
        )

    def test_fold_with_short_english_names(self) -> None:
        """Given English short weekday names, when folding, then they are used."""
        hours = WeeklyOpeningHours("Mo-Su 10:00-22:00", "Europe/Vienna")
        options = FoldOptions(
            locale="en-GB",
            hyphen="-",
            time_frame_format="{start}-{end}",
            weekday_format=WeekdayFormat.SHORT,
        )

        assert hours.fold(options) == "Mon-Sun: 10:00-22:00"

    def test_later_rules_override_earlier_ones(self) -> None:
        """Given overlapping rules, when folding, then the later rule wins."""
        hours = WeeklyOpeningHours("Mo-Sa 08:00-18:00; Sa 08:00-12:00; Su off", "Europe/Vienna")

        assert hours.fold(FoldOptions()) == (
            "Montag bis Freitag: von 08:00 bis 18:00\n"
            "Samstag: von 08:00 bis 12:00\n"
            "Sonntag: geschlossen"
        )

    def test_always_open_folds_to_whole_week(self) -> None:
        """Given "24/7", when folding, then every day is open from 00:00 to 24:00."""
        hours = WeeklyOpeningHours("24/7", "Europe/Vienna")

        assert hours.fold(FoldOptions()) == "Montag bis Sonntag: von 00:00 bis 24:00"

    def test_always_open_can_be_narrowed_by_later_rules(self) -> None:
        """Given "24/7" followed by a closed Sunday, when folding, then Sunday is closed."""
        hours = WeeklyOpeningHours("24/7; Su off", "Europe/Vienna")

        assert hours.fold(FoldOptions()) == (
            "Montag bis Samstag: von 00:00 bis 24:00\n"
            "Sonntag: geschlossen"
        )

    def test_unknown_hours_fold_to_empty_text(self) -> None:
        """Given unknown hours, when folding, then the text is empty."""
        assert WeeklyOpeningHours("unknown", "Europe/Vienna").fold(FoldOptions()) == ""


class TestIsOpenAt:
    """Tests for checking the schedule at an instant."""

    def test_open_and_closed_in_local_time(self) -> None:
        """Given a Monday in Vienna, when checking, then local opening hours apply."""
        hours = WeeklyOpeningHours(BAKERY, "Europe/Vienna")

        assert hours.is_open_at(datetime(2024, 6, 3, 10, 0, tzinfo=VIENNA))
        assert not hours.is_open_at(datetime(2024, 6, 3, 7, 59, tzinfo=VIENNA))
        assert not hours.is_open_at(datetime(2024, 6, 3, 18, 0, tzinfo=VIENNA))

    def test_utc_instants_are_converted(self) -> None:
        """Given UTC instants in summer time, when checking, then they are converted to Vienna time."""
        hours = WeeklyOpeningHours(BAKERY, "Europe/Vienna")

        assert hours.is_open_at(datetime(2024, 6, 3, 15, 30, tzinfo=UTC))
        assert not hours.is_open_at(datetime(2024, 6, 3, 16, 30, tzinfo=UTC))

    def test_naive_instants_are_local(self) -> None:
        """Given a naive instant, when checking, then it is treated as local time."""
        hours = WeeklyOpeningHours(BAKERY, "Europe/Vienna")

        assert hours.is_open_at(datetime(2024, 6, 8, 12, 30)) is False
        assert hours.is_open_at(datetime(2024, 6, 8, 13, 30)) is True

    def test_frames_past_midnight(self) -> None:
        """Given a bar open past midnight, when checking after midnight, then it is open."""
        hours = WeeklyOpeningHours("Fr-Sa 20:00-02:00", "Europe/Vienna")

        assert hours.is_open_at(datetime(2024, 6, 7, 23, 0, tzinfo=VIENNA))
        assert hours.is_open_at(datetime(2024, 6, 8, 1, 0, tzinfo=VIENNA))
        assert hours.is_open_at(datetime(2024, 6, 9, 1, 59, tzinfo=VIENNA))
        assert not hours.is_open_at(datetime(2024, 6, 8, 3, 0, tzinfo=VIENNA))
        assert not hours.is_open_at(datetime(2024, 6, 10, 1, 0, tzinfo=VIENNA))

    def test_whole_day(self) -> None:
        """Given a frame ending at 24:00, when checking just before midnight, then it is open."""
        hours = WeeklyOpeningHours("Mo-Su 00:00-24:00", "Europe/Vienna")

        assert hours.is_open_at(datetime(2024, 6, 3, 23, 59, tzinfo=VIENNA))
        assert hours.is_open_at(datetime(2024, 6, 4, 0, 0, tzinfo=VIENNA))

    @pytest.mark.parametrize("specification", ["24/7", "24/7 "])
    def test_always_open(self, specification: str) -> None:
        """Given "24/7", when checking any instant, then the shop is open."""
        hours = WeeklyOpeningHours(specification, "Europe/Vienna")

        assert not hours.is_unknown()
        assert hours.is_open_at(datetime(2024, 6, 3, 10, 0, tzinfo=VIENNA))
        assert hours.is_open_at(datetime(2024, 6, 9, 3, 30, tzinfo=VIENNA))
        assert hours.is_open_at(datetime(2024, 6, 9, 23, 59, tzinfo=VIENNA))

    def test_spaces_around_the_hyphen(self) -> None:
        """Given "Mo-Fr 08:00 - 18:00", when checking Monday morning, then the shop is open."""
        hours = WeeklyOpeningHours("Mo-Fr 08:00 - 18:00", "Europe/Vienna")

        assert not hours.is_unknown()
        assert hours.is_open_at(datetime(2024, 6, 3, 10, 0, tzinfo=VIENNA))
        assert not hours.is_open_at(datetime(2024, 6, 3, 18, 30, tzinfo=VIENNA))

    def test_unknown_hours_are_never_open(self) -> None:
        """Given unknown hours, when checking, then the shop is not open."""
        hours = WeeklyOpeningHours(None, "Europe/Vienna")

        assert hours.is_unknown()
        assert not hours.is_open_at(datetime(2024, 6, 3, 10, 0, tzinfo=VIENNA))


class TestParsing:
    """Tests for parsing schedule specifications."""

    @pytest.mark.parametrize("specification", ["", "  ", "unknown", "?", None])
    def test_unknown_specifications(self, specification: str | None) -> None:
        """Given an empty or unknown specification, when parsing, then the hours are unknown."""
        assert WeeklyOpeningHours(specification, "Europe/Vienna").is_unknown()

    @pytest.mark.parametrize(
        "specification",
        ["whenever", "Xy 08:00-10:00", "Mo 25:00-26:00", "Mo 08:61-09:00", "Mo 8-10"],
    )
    def test_invalid_specifications_raise(self, specification: str) -> None:
        """Given an invalid specification, when parsing, then OpeningHoursFormatError is raised."""
        with pytest.raises(OpeningHoursFormatError):
            WeeklyOpeningHours(specification, "Europe/Vienna")

    def test_factory_treats_invalid_specification_as_unknown(self) -> None:
        """Given an invalid specification, when using the factory, then the hours are unknown."""
        hours = create_opening_hours("whenever", "Europe/Vienna")

        assert hours.is_unknown()

    def test_factory_parses_valid_specification(self) -> None:
        """Given a valid specification, when using the factory, then the hours are known."""
        assert not create_opening_hours(BAKERY, "Europe/Vienna").is_unknown()

    @pytest.mark.parametrize(
        "specification",
        ["24/7", "Mo-Fr 08:00 - 18:00", "Mo-Fr 08:00 - 12:00, 13:00 - 18:00; Sa off"],
    )
    def test_factory_accepts_common_variants(self, specification: str) -> None:
        """Given a common variant of a schedule, when using the factory, then the hours are known."""
        assert not create_opening_hours(specification, "Europe/Vienna").is_unknown()
