"""Конфигурация для решателя закона Ома."""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    # Точность сравнения решений
    relative_tolerance: float = 1e-9   # относительная погрешность
    absolute_tolerance: float = 1e-12  # абсолютная погрешность (около нуля)
