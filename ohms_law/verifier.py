"""Модуль верификации кандидатов в решения.

Содержит SolutionVerifier для проверки кандидата на согласованность с
известными значениями и на выполнение законов V = I·R и P = V·I с учётом
допустимых погрешностей.
"""

from typing import Dict, Iterable

from base.utils import nearly_equal
from base.verifier import Verifier
from config import SolverConfig
from ohms_law.quantities import QUANTITIES, Solution


class SolutionVerifier(Verifier):
    """Верификатор решений закона Ома.

    Формула сравнения: |a - b| <= max(atol, rtol * max(|a|, |b|)).

    Attributes:
        rtol: Относительная погрешность
        atol: Абсолютная погрешность
    """

    def __init__(self, config: SolverConfig = None) -> None:
        super().__init__()
        self.config = config or SolverConfig()
        self.rtol: float = self.config.relative_tolerance
        self.atol: float = self.config.absolute_tolerance

    def _equal(self, a, b) -> bool:
        return nearly_equal(a, b, rel_tol=self.rtol, abs_tol=self.atol)

    def is_consistent(self, candidate: Dict[str, float], known: Dict[str, float]) -> bool:
        """Проверяет, что кандидат совпадает с каждым заданным значением."""
        return all(self._equal(candidate[name], value) for name, value in known.items())

    def is_physical(self, candidate: Dict[str, float]) -> bool:
        """Проверяет R > 0, V = I·R и P = V·I."""
        V, I, R, P = (candidate[name] for name in QUANTITIES)
        if not R > 0:
            return False
        return self._equal(V, I * R) and self._equal(P, V * I)

    def is_duplicate(self, candidate: Solution, solutions: Iterable[Solution]) -> bool:
        """Проверяет, есть ли уже решение, совпадающее по всем четырём величинам."""
        vector = candidate.as_array()
        return any(self._equal(solution.as_array(), vector) for solution in solutions)

    def accepts(self, candidate: Solution, known: Dict[str, float], solutions: Iterable[Solution]) -> bool:
        """Кандидат принимается, если он корректен, согласован и не дублирует найденные."""
        values = candidate.to_dict()
        return (
            self.is_physical(values)
            and self.is_consistent(values, known)
            and not self.is_duplicate(candidate, solutions)
        )
