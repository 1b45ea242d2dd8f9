"""Калькуляторы пар известных величин.

Содержит калькуляторы (Strategy pattern), по одному на каждую пару:
- V-I, V-R, I-R
- V-P, I-P, R-P
"""

from .base import PairCalculator
from .direct import VoltageCurrentCalculator, VoltageResistanceCalculator, CurrentResistanceCalculator
from .power import VoltagePowerCalculator, CurrentPowerCalculator, ResistancePowerCalculator


def get_calculator_registry():
    """Создает калькуляторы в порядке вывода решений.

    Порядок определяет порядок решений в результате:
    V-I, V-R, I-R, V-P, I-P, R-P.

    Returns:
        Список экземпляров PairCalculator
    """
    return [
        VoltageCurrentCalculator(),
        VoltageResistanceCalculator(),
        CurrentResistanceCalculator(),
        VoltagePowerCalculator(),
        CurrentPowerCalculator(),
        ResistancePowerCalculator(),
    ]


__all__ = [
    "PairCalculator",
    "VoltageCurrentCalculator",
    "VoltageResistanceCalculator",
    "CurrentResistanceCalculator",
    "VoltagePowerCalculator",
    "CurrentPowerCalculator",
    "ResistancePowerCalculator",
    "get_calculator_registry",
]
