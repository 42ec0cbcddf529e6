"""Tests for selector dispatch, result schema and number formatting."""

import json
import math

import pytest

from menucalc.observability import set_log_level
from menucalc.operations import CalculationResult, evaluate, format_number


class TestEvaluate:
    """Tests for evaluate function."""

    @pytest.mark.parametrize(
        "selector,operands,expected",
        [
            ("+", [2, 3], 5),
            ("-", [2, 3], -1),
            ("*", [-2, 3], -6),
            ("/", [1, 4], 0.25),
            ("%", [10, 4], 2),
            ("^", [3, 2], 9),
            ("a", [-7], 7),
            ("s", [1.5], 2.25),
            ("r", [81], 9),
            ("l", [1], 0),
            ("L", [100], 2),
            ("f", [4], 24),
        ],
    )
    def test_each_operation(self, selector, operands, expected):
        result = evaluate(selector, operands)
        assert result.ok
        assert result.value == pytest.approx(expected)
        assert result.error is None

    @pytest.mark.parametrize(
        "selector,operands,message",
        [
            ("/", [1, 0], "Division by zero!"),
            ("%", [1, 0], "Division by zero in modulus!"),
            ("r", [-4], "Square root of negative number!"),
            ("l", [0], "Logarithm of non-positive number!"),
            ("L", [-1], "Logarithm of non-positive number!"),
            ("f", [-3], "Factorial is only defined for non-negative integers!"),
            ("f", [2.5], "Factorial is only defined for non-negative integers!"),
            ("%", [math.inf, 2], "Modulus of an infinite number!"),
        ],
    )
    def test_domain_errors_are_reported(self, selector, operands, message):
        result = evaluate(selector, operands)
        assert not result.ok
        assert result.value is None
        assert result.error == message

    def test_unknown_selector(self):
        result = evaluate("x", [1, 2])
        assert result.error == "Unknown operation!"
        assert result.operation is None

    def test_wrong_operand_count(self):
        result = evaluate("+", [1])
        assert result.operation == "Addition"
        assert result.error == "Addition expects 2 operands, got 1"

        result = evaluate("r", [1, 2])
        assert result.error == "Square root expects 1 operand, got 2"

    def test_records_operands(self):
        result = evaluate("*", [2, 3])
        assert result.selector == "*"
        assert result.operation == "Multiplication"
        assert result.operands == [2.0, 3.0]

    def test_json_round_trip(self):
        result = evaluate("/", [9, 3])
        data = json.loads(result.model_dump_json())
        assert data["value"] == 3.0
        assert data["error"] is None
        assert CalculationResult.model_validate(data).ok

    def test_debug_logging_goes_to_stderr(self, capsys):
        set_log_level("debug")
        evaluate("+", [1, 1])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[evaluate]" in captured.err
        assert "Completed" in captured.err

    def test_default_level_is_quiet(self, capsys):
        evaluate("/", [1, 0])
        assert capsys.readouterr().err == ""


class TestFormatNumber:
    """Tests for format_number function."""

    def test_integers_drop_decimal_point(self):
        assert format_number(5.0) == "5"
        assert format_number(-12.0) == "-12"

    def test_default_six_significant_digits(self):
        assert format_number(math.pi) == "3.14159"
        assert format_number(1 / 3) == "0.333333"

    def test_large_values_use_exponent(self):
        assert format_number(3628800.0) == "3.6288e+06"

    def test_custom_precision(self):
        assert format_number(math.pi, 10) == "3.141592654"

    def test_special_values(self):
        assert format_number(math.inf) == "inf"
        assert format_number(-math.inf) == "-inf"
        assert format_number(math.nan) == "nan"
        assert format_number(-0.0) == "0"
