"""Калькуляторы пар без мощности: V-I, V-R, I-R."""

from typing import List

from base.errors import InputError
from ohms_law.quantities import Solution
from .base import PairCalculator


class VoltageCurrentCalculator(PairCalculator):
    """R = V / I, P = V·I."""

    pair = ("V", "I")

    def calculate(self, voltage: float, current: float) -> List[Solution]:
        if current == 0:
            if voltage != 0:
                raise InputError("V≠0 with I=0 implies infinite resistance. Provide R or P.")
            raise InputError("V=0 and I=0 gives infinite solutions. Provide another value.")

        resistance = voltage / current
        if resistance <= 0:
            return []
        return [Solution(V=voltage, I=current, R=resistance, P=voltage * current)]


class VoltageResistanceCalculator(PairCalculator):
    """I = V / R, P = V·I."""

    pair = ("V", "R")

    def calculate(self, voltage: float, resistance: float) -> List[Solution]:
        current = voltage / resistance
        return [Solution(V=voltage, I=current, R=resistance, P=voltage * current)]


class CurrentResistanceCalculator(PairCalculator):
    """V = I·R, P = V·I."""

    pair = ("I", "R")

    def calculate(self, current: float, resistance: float) -> List[Solution]:
        voltage = current * resistance
        return [Solution(V=voltage, I=current, R=resistance, P=voltage * current)]
