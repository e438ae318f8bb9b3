"""
tests/timezone/test_zone.py

Covers:
  - Aliases derived from the friendly-name mapping
  - Standard, current and DST offsets (plain and rational)
  - DST periods in both hemispheres, and zones without DST
  - Zones with negative DST (Europe/Dublin)
  - uses_dst with year and instant references
  - Display strings and their parameterized forms
"""

from datetime import datetime, timezone
from fractions import Fraction

import pytest

from datekit.reference import Moment, Year
from datekit.timezone import TimeZone, TimezoneError, ZoneInfoSource


# ── Fixtures ──────────────────────────────────────────────────────────────────

def winter_clock():
    return datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def source():
    return ZoneInfoSource()


@pytest.fixture
def zone_for(source):
    def build(name):
        return TimeZone(name, source, clock=winter_clock)
    return build


@pytest.fixture
def pacific(zone_for):
    return zone_for("Pacific Time (US & Canada)")


@pytest.fixture
def london(zone_for):
    return zone_for("London")


@pytest.fixture
def sydney(zone_for):
    return zone_for("Sydney")


@pytest.fixture
def tokyo(zone_for):
    return zone_for("Tokyo")


@pytest.fixture
def dublin(zone_for):
    return zone_for("Dublin")


# ── Aliases ───────────────────────────────────────────────────────────────────

class TestAliases:

    def test_us_canada_names_kept_verbatim(self, pacific):
        assert pacific.aliases == ["America/Los Angeles", "Pacific Time (US & Canada)"]

    def test_cities_substituted_into_reference_path(self, london):
        assert london.aliases == ["Europe/Edinburgh", "Europe/London"]

    def test_special_names_kept_verbatim(self, zone_for):
        assert zone_for("UTC").aliases == ["Etc/UTC", "UTC"]
        assert zone_for("International Date Line West").aliases == [
            "Etc/GMT+12",
            "International Date Line West",
        ]

    def test_nested_reference_path(self, zone_for):
        assert zone_for("Buenos Aires").aliases == [
            "America/Argentina/Buenos Aires",
            "America/Buenos Aires",
        ]

    def test_aliases_are_shared_by_zones_of_the_same_identifier(self, zone_for):
        assert zone_for("Osaka").aliases == zone_for("Tokyo").aliases

    def test_current_alias_matches_identifier(self, london):
        assert london.current_alias == "Europe/London"

    def test_current_alias_falls_back_to_first(self, pacific):
        assert pacific.current_alias == "America/Los Angeles"

    def test_small_mapping(self):
        source = ZoneInfoSource(mapping={"Rome": "Europe/Rome", "Vatican": "Europe/Rome"})
        zone = TimeZone("Rome", source)
        assert zone.aliases == ["Europe/Rome", "Europe/Vatican"]


# ── Offsets ───────────────────────────────────────────────────────────────────

class TestOffsets:

    def test_standard_offset(self, pacific, sydney):
        assert pacific.offset() == -28800
        assert pacific.offset(True) == Fraction(-1, 3)
        # Sydney is in DST on the clock's date; the standard offset excludes it.
        assert sydney.offset() == 36000

    def test_formatted_offset(self, pacific, zone_for):
        assert pacific.formatted_offset() == "-08:00"
        assert zone_for("Newfoundland").formatted_offset(False) == "-0330"

    def test_current_offset_outside_dst(self, pacific):
        assert pacific.current_offset() == -28800

    def test_current_offset_inside_dst(self, pacific, sydney):
        summer = datetime(2024, 7, 1, tzinfo=timezone.utc)
        assert pacific.current_offset(date=summer) == -25200
        assert sydney.current_offset() == 39600
        assert sydney.current_offset(True) == Fraction(39600, 86400)

    def test_current_offset_inside_dst_missed_by_yearly_sample(self, zone_for):
        # Cairo observed DST in June 2014 but not on Jul 15 (Ramadan pause).
        cairo = zone_for("Cairo")
        assert cairo.dst_period(2014) is None
        june = datetime(2014, 6, 1, 12, 0, tzinfo=timezone.utc)
        assert cairo.current_offset(date=june) == 10800

    def test_dst_offset_and_correction(self, pacific):
        assert pacific.dst_offset(year=2024) == -25200
        assert pacific.dst_correction(year=2024) == 3600
        assert pacific.dst_correction(True, 2024) == Fraction(1, 24)

    def test_no_dst_gives_zero(self, tokyo):
        assert tokyo.dst_offset() == 0
        assert tokyo.dst_correction() == 0

    def test_unknown_identifier_raises(self, source):
        zone = TimeZone("Atlantis", source, clock=winter_clock, identifier="Atlantis/Nowhere")
        with pytest.raises(TimezoneError):
            zone.offset()


# ── DST periods ───────────────────────────────────────────────────────────────

class TestDstPeriod:

    def test_northern_hemisphere(self, pacific):
        period = pacific.dst_period(2024)
        assert period.start == datetime(2024, 3, 10, 10, 0, tzinfo=timezone.utc)
        assert period.end == datetime(2024, 11, 3, 9, 0, tzinfo=timezone.utc)
        assert period.utc_offset == -28800
        assert period.std_offset == 3600
        assert period.utc_total_offset == -25200

    def test_europe(self, london):
        period = london.dst_period(2024)
        assert period.start == datetime(2024, 3, 31, 1, 0, tzinfo=timezone.utc)
        assert period.end == datetime(2024, 10, 27, 1, 0, tzinfo=timezone.utc)

    def test_southern_hemisphere(self, sydney):
        period = sydney.dst_period(2024)
        assert period.start == datetime(2023, 9, 30, 16, 0, tzinfo=timezone.utc)
        assert period.end == datetime(2024, 4, 6, 16, 0, tzinfo=timezone.utc)
        assert period.utc_total_offset == 39600

    def test_zone_without_dst(self, tokyo, zone_for):
        assert tokyo.dst_period(2024) is None
        assert zone_for("Arizona").dst_period(2024) is None

    def test_year_defaults_to_clock(self, pacific):
        assert pacific.dst_period() == pacific.dst_period(2024)

    def test_period_is_memoized_per_year(self, pacific):
        assert pacific.dst_period(2024) is pacific.dst_period(2024)

    def test_bounds_are_located_on_first_access(self, source):
        class CountingSource:
            mapping = source.mapping

            def __init__(self):
                self.calls = 0

            def period_for_instant(self, identifier, instant):
                self.calls += 1
                return source.period_for_instant(identifier, instant)

        counting = CountingSource()
        zone = TimeZone("Pacific Time (US & Canada)", counting, clock=winter_clock)
        period = zone.dst_period(2024)
        assert counting.calls <= 2
        assert period.start == datetime(2024, 3, 10, 10, 0, tzinfo=timezone.utc)
        assert counting.calls > 2
        calls = counting.calls
        assert period.start == datetime(2024, 3, 10, 10, 0, tzinfo=timezone.utc)
        assert counting.calls == calls


# ── Negative DST ──────────────────────────────────────────────────────────────

class TestNegativeDst:
    """Europe/Dublin encodes winter as a negative correction from summer time."""

    def test_winter_is_standard_time(self, dublin):
        assert dublin.offset() == 0
        assert dublin.to_str() == "(GMT+00:00) Europe/Dublin"
        assert dublin.current_offset() == 0

    def test_summer_is_reported_as_dst(self, dublin):
        assert dublin.dst_correction(year=2024) == 3600
        assert dublin.dst_offset(year=2024) == 3600
        assert dublin.to_str_with_dst() == "(GMT+01:00) Europe/Dublin (DST)"
        summer = datetime(2024, 7, 1, tzinfo=timezone.utc)
        assert dublin.current_offset(date=summer) == 3600

    def test_period_bounds(self, dublin):
        period = dublin.dst_period(2024)
        assert period.start == datetime(2024, 3, 31, 1, 0, tzinfo=timezone.utc)
        assert period.end == datetime(2024, 10, 27, 1, 0, tzinfo=timezone.utc)

    def test_source_periods(self, source):
        winter = source.period_for_instant("Europe/Dublin", datetime(2024, 1, 15, tzinfo=timezone.utc))
        summer = source.period_for_instant("Europe/Dublin", datetime(2024, 7, 15, tzinfo=timezone.utc))
        assert (winter.utc_offset, winter.std_offset) == (0, 0)
        assert (summer.utc_offset, summer.std_offset) == (0, 3600)
        assert not winter.is_dst
        assert summer.is_dst


# ── uses_dst ──────────────────────────────────────────────────────────────────

class TestUsesDst:

    def test_by_year(self, pacific, tokyo):
        assert pacific.uses_dst(Year(2024))
        assert not tokyo.uses_dst(Year(2024))

    def test_default_is_current_year(self, pacific):
        assert pacific.uses_dst()

    def test_by_moment(self, pacific):
        assert pacific.uses_dst(Moment(datetime(2024, 7, 1, tzinfo=timezone.utc)))
        assert not pacific.uses_dst(Moment(datetime(2024, 1, 1, tzinfo=timezone.utc)))

    def test_dst_name(self, pacific, tokyo):
        assert pacific.dst_name() == "Pacific Time (US & Canada) (DST)"
        assert pacific.dst_name("[S]", 2024, "LA") == "LA [S]"
        assert tokyo.dst_name() is None


# ── Display strings ───────────────────────────────────────────────────────────

class TestRepresentations:

    def test_to_str(self, pacific):
        assert pacific.to_str() == "(GMT-08:00) America/Los Angeles"
        assert pacific.to_str("Pacific Time (US & Canada)", False) == "(GMT-0800) Pacific Time (US & Canada)"

    def test_str_uses_friendly_name(self, pacific):
        assert str(pacific) == "(GMT-08:00) Pacific Time (US & Canada)"

    def test_to_str_with_dst(self, pacific, tokyo):
        assert pacific.to_str_with_dst() == "(GMT-07:00) America/Los Angeles (DST)"
        assert pacific.to_str_with_dst("[S]", 2024, "LA") == "(GMT-07:00) LA [S]"
        assert tokyo.to_str_with_dst() is None

    def test_to_str_parameterized(self, pacific):
        assert pacific.to_str_parameterized() == "-0800@america-los-angeles"
        assert pacific.to_str_parameterized(False) == "america-los-angeles"
        assert (
            pacific.to_str_parameterized(True, "(GMT-08:00) Pacific Time (US & Canada)")
            == "-0800@pacific-time-us-canada"
        )

    def test_to_str_with_dst_parameterized(self, pacific, tokyo):
        assert pacific.to_str_with_dst_parameterized() == "-0700@america-los-angeles-dst"
        assert pacific.to_str_with_dst_parameterized(with_offset=False) == "america-los-angeles-dst"
        assert tokyo.to_str_with_dst_parameterized() is None
