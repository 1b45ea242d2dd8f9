"""Оценка времени работы от аккумулятора.

Идеальная модель без учёта КПД и саморазряда:
hours = (mAh / 1000) / (mA / 1000), Wh = Ah × V.
"""

from dataclasses import dataclass
from typing import Optional

from base.errors import InputError
from base.utils import strip_trailing_zeros
from ohms_law.parser import parse


@dataclass
class BatteryEstimate:
    """Результат оценки.

    Attributes:
        hours: Время работы в часах
        capacity_ah: Ёмкость в ампер-часах
        energy_wh: Энергия в ватт-часах (None, если напряжение не задано)
    """
    hours: float
    capacity_ah: float
    energy_wh: Optional[float] = None

    @property
    def hours_text(self) -> str:
        return f"{strip_trailing_zeros(f'{self.hours:.2f}')} h"

    @property
    def capacity_text(self) -> str:
        return f"{strip_trailing_zeros(f'{self.capacity_ah:.3f}')} Ah"

    @property
    def energy_text(self) -> str:
        if self.energy_wh is None:
            return "—"
        return f"{strip_trailing_zeros(f'{self.energy_wh:.2f}')} Wh"


def estimate_battery(capacity: str, draw: str, voltage: Optional[str] = None) -> BatteryEstimate:
    """
    Оценивает время работы по ёмкости и потреблению

    Args:
        capacity: Ёмкость в мАч, текстом ("2000", "2k")
        draw: Потребление в мА, текстом ("150", "1k5")
        voltage: Напряжение аккумулятора в вольтах (необязательно)

    Returns:
        BatteryEstimate

    Raises:
        InputError: Не заданы ёмкость или потребление, значения не положительные
        ParseError: Текст не является числом
    """
    capacity = (capacity or "").strip()
    draw = (draw or "").strip()
    voltage = (voltage or "").strip()

    if not capacity or not draw:
        raise InputError("Enter capacity (mAh) and draw (mA).")

    capacity_mah = parse(capacity)
    draw_ma = parse(draw)
    if not capacity_mah > 0:
        raise InputError("Capacity must be > 0 mAh.")
    if not draw_ma > 0:
        raise InputError("Draw must be > 0 mA.")

    capacity_ah = capacity_mah / 1000.0
    hours = capacity_ah / (draw_ma / 1000.0)

    energy_wh = None
    if voltage:
        battery_voltage = parse(voltage)
        if not battery_voltage > 0:
            raise InputError("Battery voltage must be > 0 V.")
        energy_wh = capacity_ah * battery_voltage

    return BatteryEstimate(hours=hours, capacity_ah=capacity_ah, energy_wh=energy_wh)
