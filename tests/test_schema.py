"""Tests for schema-time validation: arity and per-position categories.

Test data loaded from: data/fixtures/scenarios/signatures.json
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from conftest import categories, load_scenarios

_data = load_scenarios("signatures")
VALID = _data["valid"]
INVALID = _data["invalid"]


class TestCheckArity:

    @pytest.mark.parametrize("count", [0, 1, 7, 10])
    def test_out_of_range(self, count):
        from calendar_boundaries.schema import check_arity
        from calendar_boundaries.types import FUNCTION_USAGE, ArityError

        with pytest.raises(ArityError) as exc_info:
            check_arity(count)
        assert str(exc_info.value) == FUNCTION_USAGE
        assert exc_info.value.count == count

    @pytest.mark.parametrize("count", [2, 3, 4, 5, 6])
    def test_in_range(self, count):
        from calendar_boundaries.schema import check_arity

        check_arity(count)


class TestCheckSignature:

    @pytest.mark.parametrize("spec", VALID, ids=lambda s: s["id"])
    def test_valid(self, spec):
        from calendar_boundaries.schema import check_signature

        signature = check_signature(categories(spec["categories"]))
        assert signature.arity == len(spec["categories"])
        assert signature.date_category.value == spec["categories"][1]

    @pytest.mark.parametrize("spec", INVALID, ids=lambda s: s["id"])
    def test_invalid(self, spec):
        """The first mismatching position raises with an ordinal-word message."""
        from calendar_boundaries.schema import check_signature
        from calendar_boundaries.types import ArgumentTypeError

        with pytest.raises(ArgumentTypeError) as exc_info:
            check_signature(categories(spec["categories"]))
        assert str(exc_info.value) == spec["message"]
        assert exc_info.value.position == spec["position"]

    def test_type_error_is_builtin_type_error(self):
        from calendar_boundaries.schema import check_signature

        with pytest.raises(TypeError):
            check_signature(categories(["bigint", "string"]))

    def test_arity_checked_before_types(self):
        from calendar_boundaries.schema import check_signature
        from calendar_boundaries.types import ArityError

        with pytest.raises(ArityError):
            check_signature(categories(["bigint"]))

    def test_null_constant_category_rejected(self):
        from calendar_boundaries.schema import check_signature
        from calendar_boundaries.types import ArgumentTypeError

        with pytest.raises(ArgumentTypeError) as exc_info:
            check_signature(categories(["string", "void"]))
        assert exc_info.value.parameter == "date"


class TestInferCategory:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("MONTH", "string"),
            (True, "boolean"),
            (7, "bigint"),
            (1.5, "double"),
            (Decimal("1.5"), "decimal"),
            (datetime(2011, 1, 22, 10), "timestamp"),
            (date(2011, 1, 22), "date"),
            (b"raw", "binary"),
        ],
    )
    def test_python_values(self, value, expected):
        from calendar_boundaries.schema import infer_category
        from calendar_boundaries.types import ArgumentCategory

        assert infer_category(value, ArgumentCategory.STRING).value == expected

    def test_none_takes_default(self):
        from calendar_boundaries.schema import infer_category
        from calendar_boundaries.types import ArgumentCategory

        assert infer_category(None, ArgumentCategory.BOOLEAN) is ArgumentCategory.BOOLEAN

    def test_unknown_value_type(self):
        from calendar_boundaries.schema import infer_category
        from calendar_boundaries.types import ArgumentCategory

        with pytest.raises(TypeError):
            infer_category(object(), ArgumentCategory.STRING)

    def test_infer_signature_uses_parameter_defaults_for_none(self):
        from calendar_boundaries.schema import infer_signature
        from calendar_boundaries.types import ArgumentCategory

        signature = infer_signature(["MONTH", "2011-01-22", None, None, None, None])
        assert signature.categories[4] is ArgumentCategory.BOOLEAN
        assert signature.categories[5] is ArgumentCategory.STRING
