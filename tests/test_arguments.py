"""Tests for call-time binding: defaults, null checks, unit values, intervals."""

from __future__ import annotations

import pytest

from conftest import categories, deferred

_FULL = ["string", "string", "string", "string", "boolean", "string"]
_VALUES = ["MONTH", "2011-01-22", "yyyy-MM-dd", "dd/MM/yyyy", True, "23:22:22"]
_NAMES = ["unit", "date", "input_format", "output_format", "include_interval", "interval"]


def _signature(count: int):
    from calendar_boundaries.schema import check_signature

    return check_signature(categories(_FULL[:count]))


def _bind(values: list, defaults=None):
    from calendar_boundaries.arguments import bind_arguments

    return bind_arguments(_signature(len(values)), deferred(values), defaults)


class TestDefaults:
    """Positions left out keep their defaults."""

    def test_two_arguments(self):
        from calendar_boundaries.types import CalendarUnit

        bound = _bind(_VALUES[:2])
        assert bound.unit is CalendarUnit.MONTH
        assert bound.date == "2011-01-22"
        assert bound.input_format == "yyyy-MM-dd"
        assert bound.output_format == "yyyy-MM-dd"
        assert bound.include_interval is False
        assert bound.interval is None

    def test_four_arguments(self):
        bound = _bind(_VALUES[:4])
        assert bound.output_format == "dd/MM/yyyy"
        assert bound.include_interval is False

    def test_six_arguments(self):
        from calendar_boundaries.types import IntervalSpec

        bound = _bind(_VALUES)
        assert bound.include_interval is True
        assert bound.interval == IntervalSpec(23, 22, 22)

    def test_custom_format_defaults(self):
        from calendar_boundaries.types import FormatDefaults

        defaults = FormatDefaults(input_format="dd-MM-yyyy", output_format="dd/MM/yyyy")
        bound = _bind(["YEAR", "02-08-2011"], defaults)
        assert bound.input_format == "dd-MM-yyyy"
        assert bound.output_format == "dd/MM/yyyy"

    def test_call_arguments_frozen(self):
        bound = _bind(_VALUES[:2])
        with pytest.raises(AttributeError):
            bound.unit = None  # type: ignore[misc]


class TestNullArguments:

    @pytest.mark.parametrize("position", range(1, 7), ids=lambda p: _NAMES[p - 1])
    def test_null_value_names_parameter(self, position):
        from calendar_boundaries.types import NullArgumentError

        values = list(_VALUES)
        values[position - 1] = None
        with pytest.raises(NullArgumentError) as exc_info:
            _bind(values)
        assert str(exc_info.value) == f"{_NAMES[position - 1]} cannot be null"
        assert exc_info.value.parameter == _NAMES[position - 1]

    def test_earliest_null_wins(self):
        from calendar_boundaries.types import NullArgumentError

        with pytest.raises(NullArgumentError) as exc_info:
            _bind(["MONTH", None, None, "yyyy-MM-dd"])
        assert exc_info.value.parameter == "date"

    def test_values_read_lazily_in_position_order(self):
        """Later positions are not read once an earlier one fails."""
        from calendar_boundaries.arguments import bind_arguments
        from calendar_boundaries.types import NullArgumentError

        reads: list[int] = []

        class Recording:
            def __init__(self, position, value):
                self.position = position
                self.value = value

            def get(self):
                reads.append(self.position)
                return self.value

        arguments = [
            Recording(1, "MONTH"),
            Recording(2, "2011-01-22"),
            Recording(3, None),
            Recording(4, "yyyy-MM-dd"),
        ]
        with pytest.raises(NullArgumentError):
            bind_arguments(_signature(4), arguments)
        assert reads == [1, 2, 3]


class TestUnitValues:

    @pytest.mark.parametrize("text", ["WEEk", " week ", "week", "\tWEEK\n"])
    def test_case_insensitive_and_trimmed(self, text):
        from calendar_boundaries.types import CalendarUnit

        assert _bind([text, "2011-01-22"]).unit is CalendarUnit.WEEK

    @pytest.mark.parametrize("text", ["FORTNIGHT", "", "weeks", "QTR"])
    def test_unknown_unit(self, text):
        from calendar_boundaries.types import UnitValueError

        with pytest.raises(UnitValueError) as exc_info:
            _bind([text, "2011-01-22"])
        assert str(exc_info.value) == "unit can only be one of DAY, WEEK, MONTH, QUARTER, YEAR"

    def test_unit_checked_before_later_nulls(self):
        from calendar_boundaries.types import UnitValueError

        with pytest.raises(UnitValueError):
            _bind(["FORTNIGHT", None])


class TestIntervalBinding:

    def test_interval_validated_even_when_not_included(self):
        from calendar_boundaries.types import FormatError

        values = list(_VALUES)
        values[4] = False
        values[5] = "72:22:22"
        with pytest.raises(FormatError):
            _bind(values)

    def test_interval_kept_when_not_included(self):
        from calendar_boundaries.types import IntervalSpec

        values = list(_VALUES)
        values[4] = False
        bound = _bind(values)
        assert bound.include_interval is False
        assert bound.interval == IntervalSpec(23, 22, 22)

    def test_five_arguments_leave_interval_absent(self):
        bound = _bind(_VALUES[:5])
        assert bound.include_interval is True
        assert bound.interval is None


class TestArityAtCallTime:

    def test_count_must_match_signature(self):
        from calendar_boundaries.arguments import bind_arguments
        from calendar_boundaries.types import ArityError

        with pytest.raises(ArityError):
            bind_arguments(_signature(4), deferred(_VALUES[:3]))
