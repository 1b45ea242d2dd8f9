"""Текстовые представления результатов.

Строки для выбора ветви, итоговый отчёт (текст для копирования) и краткие
сводки для истории. Номер выбранной ветви хранит вызывающий код.
"""

from typing import Dict, List, Optional, Sequence

from base.utils import is_finite_number, strip_trailing_zeros, to_precision
from config import FormatConfig
from ohms_law.formatter import format_current_smart, format_eng, format_watts_decimal
from ohms_law.quantities import KnownSet, Solution

_DEFAULT_CONFIG = FormatConfig()


def _raw(value: float, unit: str, config: FormatConfig) -> str:
    if not is_finite_number(value):
        return config.placeholder
    return f"{to_precision(value, config.raw_report_digits)} {unit}"


def select_branch(solutions: Sequence[Solution], index: int = 0) -> Solution:
    """Возвращает решение выбранной ветви.

    Raises:
        IndexError: Если номер ветви вне диапазона
    """
    if not 0 <= index < len(solutions):
        raise IndexError(f"Branch #{index + 1} does not exist ({len(solutions)} solution(s)).")
    return solutions[index]


def format_branch_label(index: int, solution: Solution) -> str:
    """Подпись ветви: "#1: V 5 V | I 500m A | R 10 Ω | P 2.5 W"."""
    return (
        f"#{index + 1}: V {format_eng(solution.V, 'V')} | I {format_eng(solution.I, 'A')} | "
        f"R {format_eng(solution.R, 'Ω')} | P {format_eng(solution.P, 'W')}"
    )


def branch_labels(solutions: Sequence[Solution]) -> List[str]:
    return [format_branch_label(index, solution) for index, solution in enumerate(solutions)]


def solution_notes(solutions: Sequence[Solution]) -> str:
    """Пояснение к результату: одна ветвь или несколько."""
    if not solutions:
        return "Enter any two values to compute the rest."
    if len(solutions) > 1:
        return (
            f"Multiple valid branches detected ({len(solutions)}). Choose one from Branch. "
            "Negative V/I indicates direction (reference-dependent)."
        )
    return "Single unique solution from the provided inputs. Negative V/I indicates direction (reference-dependent)."


def format_raw_values(solution: Solution, config: FormatConfig = None) -> Dict[str, str]:
    """Сырые значения с единицами: V, R, P с 10 значащими цифрами, ток как в format_current_smart."""
    config = config or _DEFAULT_CONFIG
    return {
        "V": _raw(solution.V, "V", config),
        "I": format_current_smart(solution.I, config).raw,
        "R": _raw(solution.R, "Ω", config),
        "P": _raw(solution.P, "W", config),
    }


def format_result_report(solution: Solution, index: int = 0, config: FormatConfig = None) -> str:
    """
    Создает текст отчёта по выбранной ветви

    Args:
        solution: Выбранное решение
        index: Номер ветви (с нуля)
        config: Конфигурация форматирования

    Returns:
        Многострочный текст; энергия за час численно равна мощности
    """
    config = config or _DEFAULT_CONFIG
    current = format_current_smart(solution.I, config)
    watts = format_watts_decimal(solution.P, config)
    return (
        f"Ohm’s Law Result (Branch #{index + 1})\n"
        f"V = {format_eng(solution.V, 'V')}\n"
        f"I = {current.text} {current.unit}  ({_raw(solution.I, 'A', config)})\n"
        f"R = {format_eng(solution.R, 'Ω')}\n"
        f"P = {watts} W\n"
        f"Energy (1h) = {watts} Wh\n"
    )


def format_input_summary(known: KnownSet) -> str:
    """Сводка введённых значений: "In: V=5 V, I=—, R=10 Ω, P=—"."""

    def show(value: Optional[float], unit: str) -> str:
        return "—" if value is None else format_eng(value, unit)

    return (
        f"In: V={show(known.V, 'V')}, I={show(known.I, 'A')}, "
        f"R={show(known.R, 'Ω')}, P={show(known.P, 'W')}"
    )


def format_output_summary(solution: Solution) -> str:
    """Сводка решения: "Out: V=5 V, I=500 mA, R=10 Ω, P=2.5 W"."""
    current = format_current_smart(solution.I)
    return (
        f"Out: V={format_eng(solution.V, 'V')}, I={current.text} {current.unit}, "
        f"R={format_eng(solution.R, 'Ω')}, P={format_watts_decimal(solution.P)} W"
    )


def format_derived_values(solution: Solution, config: FormatConfig = None) -> Dict[str, str]:
    """Ток в миллиамперах с 3 знаками без незначащих нулей, при любом токе."""
    config = config or _DEFAULT_CONFIG
    if is_finite_number(solution.I):
        milliamps = f"{strip_trailing_zeros(f'{solution.I * 1000:.3f}')} mA"
    else:
        milliamps = config.placeholder
    return {"I_mA": milliamps}
