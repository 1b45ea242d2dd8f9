"""Модуль общих утилит для всего проекта.

Содержит функции сравнения чисел с допуском и текстовые помощники,
используемые парсером, форматтером и решателем.
"""

import math
import re

import numpy as np


# Десятичное число: 12, -1.5, .5, 3., 1e-3
DECIMAL_PATTERN = re.compile(r'^[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?$')

DEFAULT_RELATIVE_TOLERANCE = 1e-9
DEFAULT_ABSOLUTE_TOLERANCE = 1e-12


def is_finite_number(value) -> bool:
    """Проверяет, что значение является конечным вещественным числом."""
    if isinstance(value, bool) or not isinstance(value, (int, float, np.floating, np.integer)):
        return False
    return math.isfinite(value)


def parse_decimal(text: str) -> float:
    """Преобразует строку с десятичным числом в float.

    В отличие от float() не принимает "inf", "nan", "1_000" и пустые строки.

    Args:
        text: Строка с числом (без суффиксов и единиц)

    Returns:
        Конечное число

    Raises:
        ValueError: Если строка не является конечным десятичным числом
    """
    if not DECIMAL_PATTERN.match(text):
        raise ValueError(f"not a decimal number: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def nearly_equal(
    a,
    b,
    rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
    abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE
) -> bool:
    """Сравнивает числа (или векторы поэлементно) с допуском.

    Формула: |a - b| <= max(abs_tol, rel_tol * max(|a|, |b|)).
    Для векторов результат True только если равны все элементы.

    Args:
        a: Число или массив
        b: Число или массив той же формы
        rel_tol: Относительная погрешность
        abs_tol: Абсолютная погрешность

    Returns:
        True если значения равны в пределах допуска

    Example:
        >>> nearly_equal(0.1 + 0.2, 0.3)
        True
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    tolerance = np.maximum(abs_tol, rel_tol * np.maximum(np.abs(a), np.abs(b)))
    return bool(np.all(np.abs(a - b) <= tolerance))


def strip_trailing_zeros(text: str) -> str:
    """Убирает незначащие нули дробной части: "1.2500" -> "1.25", "3.000" -> "3"."""
    if "." not in text:
        return text
    text = re.sub(r'(\.\d*?[1-9])0+$', r'\1', text)
    return re.sub(r'\.0+$', '', text)


def fix_leading_point(text: str) -> str:
    """Дописывает ноль перед голой точкой: ".5" -> "0.5", "-.5" -> "-0.5"."""
    if text.startswith("."):
        return "0" + text
    if text.startswith("-."):
        return "-0." + text[2:]
    return text


def to_scientific(value: float, significant_digits: int) -> str:
    """Записывает число в научной форме с заданным числом значащих цифр.

    Порядок пишется без ведущих нулей: 0.0005 при 8 цифрах -> "5.0000000E-4".
    """
    mantissa, exponent = f"{value:.{significant_digits - 1}E}".split("E")
    return f"{mantissa}E{int(exponent)}"


def to_precision(value: float, significant_digits: int) -> str:
    """Записывает число с заданным числом значащих цифр, сохраняя нули.

    Обычная запись используется для порядков от -6 до significant_digits - 1,
    иначе научная: 1e-5 при 10 цифрах -> "0.00001000000000",
    1e-7 -> "1.000000000e-7".
    """
    mantissa, exponent = f"{value:.{significant_digits - 1}e}".split("e")
    exponent = int(exponent)
    if -6 <= exponent < significant_digits:
        return f"{value:.{significant_digits - 1 - exponent}f}"
    return f"{mantissa}e{exponent:+d}"
