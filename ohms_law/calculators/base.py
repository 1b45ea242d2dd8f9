"""Базовый класс для калькуляторов пар величин."""

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from ohms_law.quantities import Solution


class PairCalculator(ABC):
    """Базовый абстрактный класс для вывода решения из пары известных величин.

    Каждый калькулятор отвечает за одну пару (например, V и R) и возвращает
    кандидатов в решения. Проверка согласованности с остальными известными
    величинами и устранение дубликатов выполняются решателем.

    Attributes:
        pair: Пара обозначений величин, например ("V", "R")
    """

    pair: Tuple[str, str] = ()

    def applies(self, known: Dict[str, float]) -> bool:
        """Калькулятор применим, если обе величины пары заданы."""
        return all(name in known for name in self.pair)

    def derive(self, known: Dict[str, float]) -> List[Solution]:
        """Вычисляет кандидатов по значениям пары из known."""
        first, second = (known[name] for name in self.pair)
        return self.calculate(first, second)

    @abstractmethod
    def calculate(self, first: float, second: float) -> List[Solution]:
        """Вычисляет кандидатов в решения.

        Args:
            first: Значение первой величины пары
            second: Значение второй величины пары

        Returns:
            Список кандидатов (пустой, если решение физически невозможно, R <= 0)

        Raises:
            InputError: Для вырожденных случаев с нулевыми значениями
        """
        raise NotImplementedError("PairCalculator.calculate() не реализован")
