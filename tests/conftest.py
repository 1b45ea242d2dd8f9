"""Конфигурация pytest."""

import pytest
import sys
import os

# Добавляем корневую папку в путь
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def divider_solution():
    """Фикстура с решением 5 В на 10 Ом."""
    from ohms_law.quantities import Solution
    return Solution(V=5.0, I=0.5, R=10.0, P=2.5)


@pytest.fixture
def two_branch_solutions():
    """Фикстура с двумя ветвями для R = 10 Ом, P = 2.5 Вт."""
    from ohms_law.quantities import Solution
    return [
        Solution(V=5.0, I=0.5, R=10.0, P=2.5),
        Solution(V=-5.0, I=-0.5, R=10.0, P=2.5),
    ]
