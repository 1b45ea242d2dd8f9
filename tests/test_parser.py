"""Тесты для парсера инженерной записи."""

import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from base.errors import ParseError
from ohms_law.parser import parse


class TestResistorShorthand:
    """Тесты маркировки резисторов."""

    def test_marker_as_decimal_point(self):
        """Тест маркера вместо десятичной точки."""
        test_cases = [
            ("4R7", 4.7),
            ("4r7", 4.7),
            ("2K2", 2200.0),
            ("4k7", 4700.0),
            ("1M0", 1e6),
            ("1m5", 0.0015),
            ("R47", 0.47),
        ]

        for input_text, expected in test_cases:
            assert parse(input_text) == pytest.approx(expected), f"Failed for input: {input_text}"

    def test_trailing_marker(self):
        """Тест маркера в конце строки: правая часть равна нулю."""
        assert parse("47k") == pytest.approx(47000.0)
        assert parse("10R") == pytest.approx(10.0)
        assert parse("100m") == pytest.approx(0.1)

    def test_decimal_left_falls_back_to_suffix(self):
        """Тест дробной левой части: резисторная запись не собирается, работает суффикс."""
        assert parse("1.5m") == pytest.approx(0.0015)
        assert parse("4.7k") == pytest.approx(4700.0)
        assert parse("2.2M") == pytest.approx(2.2e6)

    def test_repeated_marker_is_not_shorthand(self):
        """Тест повторяющегося маркера."""
        with pytest.raises(ParseError):
            parse("1k5k")


class TestSuffix:
    """Тесты SI суффиксов."""

    def test_all_suffixes(self):
        """Тест всех поддерживаемых суффиксов."""
        test_cases = [
            ("3p", 3e-12),
            ("3n", 3e-9),
            ("3u", 3e-6),
            ("3µ", 3e-6),
            ("3.3m", 3.3e-3),
            ("3.3k", 3.3e3),
            ("3.3K", 3.3e3),
            ("3.3M", 3.3e6),
            ("3G", 3e9),
        ]

        for input_text, expected in test_cases:
            assert parse(input_text) == pytest.approx(expected), f"Failed for input: {input_text}"

    def test_units_are_ignored(self):
        """Тест отбрасывания единиц измерения."""
        assert parse("5V") == pytest.approx(5.0)
        assert parse("150mA") == pytest.approx(0.15)
        assert parse("2.5 W") == pytest.approx(2.5)
        assert parse("10 Ω") == pytest.approx(10.0)
        assert parse("10 ohms") == pytest.approx(10.0)
        assert parse("4.7 kOhm") == pytest.approx(4700.0)

    def test_missing_number(self):
        """Тест суффикса без числа."""
        with pytest.raises(ParseError):
            parse("xk")


class TestPlainNumbers:
    """Тесты обычных чисел."""

    def test_plain_values(self):
        """Тест десятичных чисел."""
        assert parse("12") == 12.0
        assert parse("-0.25") == -0.25
        assert parse(".5") == 0.5
        assert parse("1e-3") == 0.001
        assert parse("  42  ") == 42.0

    def test_thousands_separator(self):
        """Тест разделителя тысяч."""
        assert parse("2,200") == 2200.0

    def test_invalid_input(self):
        """Тест некорректного ввода."""
        for input_text in ["", "   ", None, "abc", "1.2.3", "inf", "nan", "1_000", "V"]:
            with pytest.raises(ParseError):
                parse(input_text)
