"""Конфигурационные модули."""

from .solver_config import SolverConfig
from .format_config import FormatConfig

__all__ = ["SolverConfig", "FormatConfig"]
