"""Калькуляторы пар с мощностью: V-P, I-P, R-P."""

import math
from typing import List

from base.errors import InputError
from ohms_law.quantities import Solution
from .base import PairCalculator


class VoltagePowerCalculator(PairCalculator):
    """I = P / V, R = V / I."""

    pair = ("V", "P")

    def calculate(self, voltage: float, power: float) -> List[Solution]:
        if voltage == 0:
            if power == 0:
                raise InputError("V=0 and P=0 gives infinite solutions. Provide another value.")
            raise InputError("V=0 with P>0 is impossible.")

        current = power / voltage
        if current == 0:
            if power == 0:
                raise InputError("V set but P=0 implies I=0; need R to solve uniquely.")
            # P / V ушло в ноль из-за потери точности
            raise InputError("Invalid input combination.")

        resistance = voltage / current
        if resistance <= 0:
            return []
        return [Solution(V=voltage, I=current, R=resistance, P=power)]


class CurrentPowerCalculator(PairCalculator):
    """R = P / I², V = I·R."""

    pair = ("I", "P")

    def calculate(self, current: float, power: float) -> List[Solution]:
        if current == 0:
            if power == 0:
                raise InputError("I=0 and P=0 gives infinite solutions. Provide another value.")
            raise InputError("I=0 with P>0 is impossible.")

        resistance = power / (current * current)
        if resistance <= 0:
            return []
        return [Solution(V=current * resistance, I=current, R=resistance, P=power)]


class ResistancePowerCalculator(PairCalculator):
    """|V| = √(P·R). Направление тока по R и P не определяется, поэтому две ветви."""

    pair = ("R", "P")

    def calculate(self, resistance: float, power: float) -> List[Solution]:
        if power < 0 or resistance <= 0:
            return []

        magnitude = math.sqrt(power * resistance)
        return [
            Solution(V=magnitude, I=magnitude / resistance, R=resistance, P=power),
            Solution(V=-magnitude, I=-magnitude / resistance, R=resistance, P=power),
        ]
