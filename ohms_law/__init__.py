"""Модуль расчёта по закону Ома.

Содержит парсер инженерной записи, решатель V = I·R, P = V·I, форматтеры
результатов и оценку работы от аккумулятора.
"""

from base.errors import InputError, OhmsLawError, ParseError
from ohms_law.battery import BatteryEstimate, estimate_battery
from ohms_law.formatter import (
    CurrentText,
    EngValue,
    format_current_smart,
    format_eng,
    format_engineering,
    format_watts_decimal,
)
from ohms_law.parser import parse
from ohms_law.quantities import QUANTITIES, KnownSet, Solution
from ohms_law.solver import OhmsSolver, solve
from ohms_law.verifier import SolutionVerifier

__all__ = [
    "parse",
    "solve",
    "OhmsSolver",
    "SolutionVerifier",
    "KnownSet",
    "Solution",
    "QUANTITIES",
    "EngValue",
    "CurrentText",
    "format_engineering",
    "format_eng",
    "format_current_smart",
    "format_watts_decimal",
    "BatteryEstimate",
    "estimate_battery",
    "OhmsLawError",
    "ParseError",
    "InputError",
]
