"""Базовый модуль для верификации решений.

Этот модуль содержит абстрактный класс Verifier, который определяет интерфейс
для проверки кандидатов в решения.
"""

from abc import ABC, abstractmethod
from typing import Dict


class Verifier(ABC):
    """Класс для верификатора решений

    Определяет интерфейс для проверки физической корректности кандидата
    и его согласованности с известными значениями. Все верификаторы должны
    наследоваться от этого класса.
    """

    @abstractmethod
    def is_consistent(self, candidate: Dict[str, float], known: Dict[str, float]) -> bool:
        """Проверяет, что кандидат совпадает со всеми известными значениями.

        Args:
            candidate: Полный набор величин {"V", "I", "R", "P"}
            known: Только заданные пользователем величины

        Returns:
            True если каждое известное значение совпадает в пределах допуска

        Raises:
            NotImplementedError: Если метод не реализован в подклассе
        """
        raise NotImplementedError("Verifier.is_consistent() не реализован")

    @abstractmethod
    def is_physical(self, candidate: Dict[str, float]) -> bool:
        """Проверяет законы V = I·R, P = V·I и условие R > 0.

        Raises:
            NotImplementedError: Если метод не реализован в подклассе
        """
        raise NotImplementedError("Verifier.is_physical() не реализован")
