"""Tests for printf-style message rendering."""

import pytest

from grading.formatter import format_message


class TestPlaceholders:

    def test_integer_truncates_and_plain_float_is_shortest(self):
        assert format_message("Score: %d/%f", 7.9, 3.14159) == "Score: 7/3.14159"

    def test_integer_truncates_toward_zero(self):
        assert format_message("%d", -7.9) == "-7"
        assert format_message("%d", -0.5) == "0"

    def test_plain_float_drops_trailing_zero(self):
        assert format_message("%f", 7.0) == "7"
        assert format_message("%f", 0.1 + 0.2) == "0.30000000000000004"

    def test_plain_float_exponent_form(self):
        assert format_message("%f", 1e21) == "1e+21"
        assert format_message("%f", 1e-7) == "1e-7"

    @pytest.mark.parametrize(
        "value, expected",
        [(0.125, "0.13"), (-0.125, "-0.13"), (2.675, "2.67"), (1.5, "1.50")],
    )
    def test_precision_rounds_exact_value_half_up(self, value, expected):
        assert format_message("%.2f", value) == expected

    def test_negative_zero_renders_unsigned(self):
        assert format_message("%.2f", -0.0) == "0.00"

    def test_width_is_ignored(self):
        assert format_message("[%8.3f]", 1.5) == "[1.500]"
        assert format_message("[%5d]", 42) == "[42]"

    def test_string_placeholder(self):
        assert format_message("%s: %s", "Takeoff", 2.5) == "Takeoff: 2.5"

    def test_mixed_types_consume_args_in_order(self):
        out = format_message("%s %d %.1f %f", "Leg", 3, 2.25, 0.5)
        assert out == "Leg 3 2.3 0.5"


class TestNaN:

    def test_none_and_non_finite_render_nan(self):
        assert format_message("%d %f %s", None, float("inf"), float("nan")) == "NaN NaN NaN"

    def test_missing_argument_renders_nan(self):
        assert format_message("alt=%.1f, AB=%.1f", 500) == "alt=500.0, AB=NaN"

    def test_precision_does_not_apply_to_nan(self):
        assert format_message("%.3f", float("-inf")) == "NaN"


class TestLiterals:

    def test_percent_without_type_is_literal(self):
        assert format_message("at least 25% of the chord") == "at least 25% of the chord"

    def test_trailing_percent(self):
        assert format_message("100%") == "100%"

    def test_template_without_placeholders_ignores_args(self):
        assert format_message("No deduction", 1, 2) == "No deduction"
