"""Модуль данных для записей истории вычислений.

Содержит класс Record, связывающий введённые значения с выбранным
решением. Хранение записей остаётся на стороне вызывающего кода,
здесь только сериализация.
"""

import json
import time
from typing import Optional, Dict, Any


class Record:
    """Запись одного вычисления.

    Attributes:
        input: Известные значения {"V": 5.0, "I": None, ...}
        output: Выбранное решение {"V": ..., "I": ..., "R": ..., "P": ...}
        timestamp: Время вычисления в миллисекундах с начала эпохи
    """

    def __init__(
        self,
        input: Dict[str, Optional[float]],
        output: Dict[str, float],
        timestamp: Optional[int] = None
    ) -> None:
        self.input = dict(input)
        self.output = dict(output)
        self.timestamp = timestamp if timestamp is not None else int(time.time() * 1000)

    def to_json(self) -> Dict[str, Any]:
        """Преобразует объект в словарь.

        Returns:
            Словарь с полями ts, input, out
        """
        return {
            "ts": self.timestamp,
            "input": self.input,
            "out": self.output,
        }

    def to_json_str(self) -> str:
        """Преобразует объект в JSON строку."""
        return json.dumps(self.to_json(), ensure_ascii=False)

    @classmethod
    def from_json_dict(cls, json_dict: Dict[str, Any]) -> 'Record':
        """Создает объект Record из словаря.

        Args:
            json_dict: Словарь с ключами ts, input, out

        Returns:
            Новый объект Record
        """
        return cls(
            input=json_dict.get("input", {}),
            output=json_dict.get("out", {}),
            timestamp=json_dict.get("ts"),
        )

    @classmethod
    def from_json_str(cls, json_str: str) -> 'Record':
        """Создает объект Record из JSON строки."""
        return cls.from_json_dict(json.loads(json_str))
