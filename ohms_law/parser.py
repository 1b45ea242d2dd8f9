"""Парсер инженерной записи чисел.

Поддерживает:
- SI суффиксы: p n u/µ m k/K M G (1e-12 ... 1e9)
- маркировку резисторов: 4R7, 2K2, 1M0, 1m5
- обычные десятичные числа
Единицы V, A, W, Ω и слово "ohm(s)" игнорируются.
"""

import logging
import re
from typing import Optional

from base.errors import ParseError
from base.utils import parse_decimal

logger = logging.getLogger(__name__)


# Суффикс -> десятичный порядок
SI_EXPONENTS = {
    "p": -12,
    "n": -9,
    "u": -6,
    "µ": -6,
    "m": -3,
    "k": 3,
    "K": 3,
    "M": 6,
    "G": 9,
}

# Маркеры резисторной записи в порядке проверки
RESISTOR_MARKERS = (
    ("R", 0),
    ("r", 0),
    ("K", 3),
    ("k", 3),
    ("M", 6),
    ("m", -3),
)

_LEFT_PATTERN = re.compile(r'^[-+]?[0-9]+(?:\.[0-9]+)?$')
_RIGHT_PATTERN = re.compile(r'^[0-9]+$')
_OHM_WORD_PATTERN = re.compile(r'ohms?', re.IGNORECASE)
_UNIT_LETTERS_PATTERN = re.compile(r'[VvAaWw]')


def _scale(value: float, exponent: int) -> float:
    # Для отрицательного порядка делим на точную степень десяти
    if exponent >= 0:
        return value * 10 ** exponent
    return value / 10 ** -exponent


def _clean(text: str) -> str:
    """Убирает разделители тысяч и обозначения единиц."""
    text = text.strip().replace(",", "")
    text = _OHM_WORD_PATTERN.sub("", text)
    text = text.replace("\u03a9", "").replace("\u2126", "")
    text = _UNIT_LETTERS_PATTERN.sub("", text)
    return text.strip()


def _parse_resistor_shorthand(text: str) -> Optional[float]:
    """Пробует разобрать маркировку резистора (4R7, 2K2, 1m5).

    Маркер должен встречаться в строке ровно один раз. Если левая и правая
    части прошли проверку, но вместе не дают числа ("1.5m" -> "1.5.0"),
    дальнейшие маркеры не проверяются.

    Returns:
        Значение или None, если запись не резисторная
    """
    for marker, exponent in RESISTOR_MARKERS:
        if text.count(marker) != 1:
            continue
        left, right = text.split(marker)
        left = left or "0"
        right = right or "0"
        if not (_LEFT_PATTERN.match(left) and _RIGHT_PATTERN.match(right)):
            continue
        try:
            base = parse_decimal(f"{left}.{right}")
        except ValueError:
            break
        logger.debug("resistor shorthand %r: marker %r", text, marker)
        return _scale(base, exponent)
    return None


def parse(text: str) -> float:
    """Разбирает текстовое значение величины.

    Порядок разбора: очистка от единиц, резисторная запись, SI суффикс,
    обычное число. Резисторная запись имеет приоритет над суффиксом, поэтому
    "47k" читается как 47K0, а "4.7k" (две точки после сборки) как суффикс.

    Args:
        text: Строка ввода, например "4k7", "1.5 mA", "10 Ω", "2,200"

    Returns:
        Числовое значение в базовых единицах

    Raises:
        ParseError: Если строка пустая или не является числом

    Example:
        >>> parse("4R7")
        4.7
        >>> parse("2K2")
        2200.0
    """
    if text is None or not str(text).strip():
        raise ParseError("Empty value.")

    cleaned = _clean(str(text))
    if not cleaned:
        raise ParseError(f"Invalid number: {text!r}")

    value = _parse_resistor_shorthand(cleaned)
    if value is not None:
        return value

    # Суффикс в конце строки
    if len(cleaned) >= 2 and cleaned[-1] in SI_EXPONENTS:
        number = cleaned[:-1].strip()
        if not number:
            raise ParseError(f"Invalid number: {text!r}")
        try:
            base = parse_decimal(number)
        except ValueError:
            raise ParseError(f"Invalid number: {text!r}") from None
        return _scale(base, SI_EXPONENTS[cleaned[-1]])

    try:
        return parse_decimal(cleaned)
    except ValueError:
        raise ParseError(f"Invalid number: {text!r}") from None
