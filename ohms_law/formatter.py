"""Форматирование величин для отображения.

Три независимые политики:
- инженерная запись с SI приставкой (напряжение, сопротивление)
- ток: мА для |I| < 1 А, иначе инженерная запись в амперах
- мощность: всегда десятичные ватты без приставок
"""

import math
import re
from typing import NamedTuple, Optional

from base.utils import fix_leading_point, is_finite_number, strip_trailing_zeros, to_scientific
from config import FormatConfig


SI_PREFIXES = {
    -12: "p",
    -9: "n",
    -6: "µ",
    -3: "m",
    0: "",
    3: "k",
    6: "M",
    9: "G",
}


class EngValue(NamedTuple):
    """Число в инженерной записи без единицы измерения."""
    value_text: str
    prefix: str


class CurrentText(NamedTuple):
    """Отображение тока: текст, единица (A или mA) и сырое значение в амперах."""
    text: str
    unit: str
    raw: str


_DEFAULT_CONFIG = FormatConfig()


def _decimals_for(magnitude: float, bands) -> int:
    for limit, decimals in bands:
        if magnitude < limit:
            return decimals
    return bands[-1][1]


def _format_significant(value: float, digits: int) -> str:
    """Округляет до digits значащих цифр без экспоненциальной записи."""
    text = f"{value:.{digits}g}"
    if "e" in text:
        exponent = int(text.split("e")[1])
        if exponent >= 0:
            text = f"{float(text):.0f}"
        else:
            text = f"{value:.{digits - 1 - exponent}f}"
    return strip_trailing_zeros(text)


def format_engineering(
    x: float,
    significant_digits: Optional[int] = None,
    config: FormatConfig = None
) -> EngValue:
    """Инженерная запись: мантисса и SI приставка (степени 10^3).

    Порядок ограничен диапазоном пико..гига, за его пределами мантисса
    выходит за [1, 1000).

    Args:
        x: Значение
        significant_digits: Число значащих цифр (по умолчанию 4)
        config: Конфигурация форматирования

    Returns:
        EngValue(value_text, prefix); для нечисловых значений ("—", "")

    Example:
        >>> format_engineering(0.0047)
        EngValue(value_text='4.7', prefix='m')
    """
    config = config or _DEFAULT_CONFIG
    digits = significant_digits or config.significant_digits
    if not is_finite_number(x):
        return EngValue(config.placeholder, "")
    if x == 0:
        return EngValue("0", "")

    sign = "-" if x < 0 else ""
    magnitude = abs(x)

    exponent = math.floor(math.log10(magnitude) / 3) * 3
    exponent = max(config.min_exponent, min(config.max_exponent, exponent))
    if exponent >= 0:
        scaled = magnitude / 10 ** exponent
    else:
        scaled = magnitude * 10 ** -exponent

    return EngValue(sign + _format_significant(scaled, digits), SI_PREFIXES.get(exponent, ""))


def format_eng(x: float, unit: str = "", significant_digits: Optional[int] = None) -> str:
    """Инженерная запись одной строкой: "4.7k Ω", "12 V", "3.3m"."""
    value = format_engineering(x, significant_digits)
    text = value.value_text + value.prefix
    return f"{text} {unit}" if unit else text


def format_current_smart(current: float, config: FormatConfig = None) -> CurrentText:
    """Отображение тока.

    При 0 < |I| < 1 А ток переводится в миллиамперы с фиксированным числом
    знаков (3/2/1/0 при |mA| < 10/100/1000/больше); отбрасывается только
    полностью нулевая дробная часть, так что "0.500" остается как есть.
    Иначе используется инженерная запись в амперах.

    Args:
        current: Ток в амперах
        config: Конфигурация форматирования

    Returns:
        CurrentText(text, unit, raw), где raw всегда в амперах,
        например "5.0000000E-4 A"
    """
    config = config or _DEFAULT_CONFIG
    if not is_finite_number(current):
        return CurrentText(config.placeholder, "A", config.placeholder)

    raw = f"{to_scientific(current, config.raw_current_digits)} A"
    magnitude = abs(current)

    if 0 < magnitude < 1:
        milliamps = current * 1000
        decimals = _decimals_for(abs(milliamps), config.milliamp_decimals)
        text = re.sub(r'\.0+$', '', f"{milliamps:.{decimals}f}")
        return CurrentText(fix_leading_point(text), "mA", raw)

    value = format_engineering(current, config=config)
    return CurrentText(value.value_text + value.prefix, "A", raw)


def format_watts_decimal(power: float, config: FormatConfig = None) -> str:
    """Мощность всегда в ваттах обычной десятичной дробью (0.5, 12.3, 250).

    Число знаков зависит от величины: 6 при |P| < 0.001, 4 при < 0.01,
    3 при < 1, 2 при < 10, 1 при < 100, иначе 0. Незначащие нули убираются.
    """
    config = config or _DEFAULT_CONFIG
    if not is_finite_number(power):
        return config.placeholder

    decimals = _decimals_for(abs(power), config.watt_decimals)
    text = strip_trailing_zeros(f"{power:.{decimals}f}")
    return fix_leading_point(text)
