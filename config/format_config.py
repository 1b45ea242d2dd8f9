"""Конфигурация форматирования результатов."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class FormatConfig:
    """Параметры отображения величин."""

    # Инженерная запись
    significant_digits: int = 4
    min_exponent: int = -12  # пико
    max_exponent: int = 9    # гига

    # Сырые значения
    raw_current_digits: int = 8
    raw_report_digits: int = 10

    # Заглушка для нечисловых значений
    placeholder: str = "—"

    # Пороги |mA| -> знаков после запятой, последний порог без ограничения
    milliamp_decimals: List[Tuple[float, int]] = None
    # Пороги |W| -> знаков после запятой
    watt_decimals: List[Tuple[float, int]] = None

    def __post_init__(self):
        if self.milliamp_decimals is None:
            self.milliamp_decimals = [(10, 3), (100, 2), (1000, 1), (float("inf"), 0)]
        if self.watt_decimals is None:
            self.watt_decimals = [
                (0.001, 6),
                (0.01, 4),
                (0.1, 3),
                (1, 3),
                (10, 2),
                (100, 1),
                (float("inf"), 0),
            ]
