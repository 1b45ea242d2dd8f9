"""Модель данных: известные величины и решения.

Величины обозначаются ключами "V", "I", "R", "P" (вольты, амперы, омы, ватты).
"""

from dataclasses import asdict, dataclass, fields
from typing import Dict, Mapping, Optional

import numpy as np

from base.errors import InputError

QUANTITIES = ("V", "I", "R", "P")


@dataclass
class KnownSet:
    """Известные величины одного запроса; незаданная величина равна None, а не нулю."""
    V: Optional[float] = None
    I: Optional[float] = None
    R: Optional[float] = None
    P: Optional[float] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Optional[float]]) -> 'KnownSet':
        """Создает KnownSet из словаря {"V": 5, "R": 10}.

        Raises:
            InputError: Если в словаре есть неизвестная величина
        """
        unknown = [key for key in values if key not in QUANTITIES]
        if unknown:
            raise InputError(f"Unknown quantity: {', '.join(map(str, unknown))}.")
        return cls(**{key: values[key] for key in QUANTITIES if key in values})

    def present(self) -> Dict[str, float]:
        """Заданные величины в порядке V, I, R, P."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def to_dict(self) -> Dict[str, Optional[float]]:
        return asdict(self)


@dataclass
class Solution:
    """Полный набор величин, удовлетворяющий V = I·R и P = V·I."""
    V: float
    I: float
    R: float
    P: float

    def as_array(self) -> np.ndarray:
        """Вектор [V, I, R, P] для поэлементного сравнения."""
        return np.array([self.V, self.I, self.R, self.P], dtype=float)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, values: Mapping[str, float]) -> 'Solution':
        return cls(**{key: float(values[key]) for key in QUANTITIES})
