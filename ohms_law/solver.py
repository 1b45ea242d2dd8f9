"""Решатель закона Ома.

По любым двум из величин V, I, R, P находит все допустимые наборы
(V, I, R, P), согласованные с заданными значениями.
"""

import logging
from typing import List, Mapping, Optional, Union

from base.errors import InputError
from base.utils import is_finite_number
from config import SolverConfig
from ohms_law.calculators import get_calculator_registry
from ohms_law.quantities import KnownSet, Solution
from ohms_law.verifier import SolutionVerifier

logger = logging.getLogger(__name__)


class OhmsSolver:
    """Решает задачу закона Ома перебором пар известных величин.

    Каждая применимая пара (в порядке V-I, V-R, I-R, V-P, I-P, R-P) дает
    кандидатов; кандидат попадает в результат, только если совпадает со
    всеми заданными величинами и не дублирует уже найденное решение.
    Состояние между вызовами не хранится.

    Attributes:
        verifier: Проверка кандидатов с допусками из SolverConfig
        calculators: Калькуляторы пар в порядке вывода
    """

    def __init__(self, config: SolverConfig = None):
        self.config = config or SolverConfig()
        self.verifier = SolutionVerifier(self.config)
        self.calculators = get_calculator_registry()

    def solve(self, known: Union[KnownSet, Mapping[str, Optional[float]]]) -> List[Solution]:
        """
        Находит все решения для заданных величин

        Args:
            known: KnownSet или словарь {"V": 5, "R": 10}; None означает "не задано"

        Returns:
            Список решений в порядке вывода (две ветви для пары R-P)

        Raises:
            InputError: Недостаточно данных, нарушены ограничения или
                данные противоречивы
        """
        if not isinstance(known, KnownSet):
            known = KnownSet.from_mapping(known)
        values = known.present()
        self._validate(values)

        solutions: List[Solution] = []
        for calculator in self.calculators:
            if not calculator.applies(values):
                continue
            for candidate in calculator.derive(values):
                if self.verifier.accepts(candidate, values, solutions):
                    solutions.append(candidate)

        if not solutions:
            raise InputError("No valid solution found. Check for contradictory inputs.")

        logger.debug("solved %s: %d solution(s)", values, len(solutions))
        return solutions

    @staticmethod
    def _validate(values) -> None:
        if len(values) < 2:
            raise InputError("Enter at least two values (any two of V, I, R, P).")
        for name, value in values.items():
            if not is_finite_number(value):
                raise InputError(f"Value {name} must be a finite number.")
        if "R" in values and values["R"] <= 0:
            raise InputError("Resistance R must be > 0.")
        if "P" in values and values["P"] < 0:
            raise InputError("Power P must be ≥ 0.")


def solve(
    known: Union[KnownSet, Mapping[str, Optional[float]]],
    config: SolverConfig = None
) -> List[Solution]:
    """Удобная обертка над OhmsSolver().solve(known)."""
    return OhmsSolver(config).solve(known)
