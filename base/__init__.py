"""Базовые классы и утилиты: ошибки, записи, верификатор, сравнение чисел."""
