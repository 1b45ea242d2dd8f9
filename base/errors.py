"""Исключения закона Ома.

Все ошибки ядра являются терминальными для одного вызова: частичного
результата нет, сообщение предназначено для показа пользователю как есть.
"""


class OhmsLawError(ValueError):
    """Базовая ошибка вычислений по закону Ома."""


class ParseError(OhmsLawError):
    """Текст не удалось разобрать как число (пустой или некорректный ввод)."""


class InputError(OhmsLawError):
    """Некорректный набор известных величин.

    Недостаточно значений, нарушены ограничения (R <= 0, P < 0),
    вырожденный случай с нулями или противоречивые данные.
    """
