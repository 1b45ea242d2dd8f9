"""Тесты для текстовых отчётов."""

import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ohms_law.quantities import KnownSet, Solution
from ohms_law.report import (
    branch_labels,
    format_branch_label,
    format_derived_values,
    format_input_summary,
    format_output_summary,
    format_raw_values,
    format_result_report,
    select_branch,
    solution_notes,
)


class TestBranches:
    """Тесты выбора и подписей ветвей."""

    def test_branch_label(self, divider_solution):
        """Тест подписи ветви."""
        assert format_branch_label(0, divider_solution) == "#1: V 5 V | I 500m A | R 10 Ω | P 2.5 W"

    def test_branch_labels(self, two_branch_solutions):
        """Тест нумерации ветвей."""
        labels = branch_labels(two_branch_solutions)
        assert len(labels) == 2
        assert labels[1].startswith("#2: V -5 V | I -500m A")

    def test_select_branch(self, two_branch_solutions):
        """Тест выбора ветви по номеру."""
        assert select_branch(two_branch_solutions, 1).V == -5.0
        with pytest.raises(IndexError):
            select_branch(two_branch_solutions, 2)
        with pytest.raises(IndexError):
            select_branch(two_branch_solutions, -1)

    def test_notes(self, divider_solution, two_branch_solutions):
        """Тест пояснений к результату."""
        assert solution_notes([]) == "Enter any two values to compute the rest."
        assert solution_notes([divider_solution]).startswith("Single unique solution")
        assert "Multiple valid branches detected (2)" in solution_notes(two_branch_solutions)


class TestReport:
    """Тесты итогового отчёта и сводок."""

    def test_result_report(self, divider_solution):
        """Тест текста отчёта."""
        report = format_result_report(divider_solution)
        assert report == (
            "Ohm’s Law Result (Branch #1)\n"
            "V = 5 V\n"
            "I = 500 mA  (0.5000000000 A)\n"
            "R = 10 Ω\n"
            "P = 2.5 W\n"
            "Energy (1h) = 2.5 Wh\n"
        )

    def test_report_branch_number(self, two_branch_solutions):
        """Тест номера ветви в заголовке."""
        report = format_result_report(two_branch_solutions[1], index=1)
        assert report.startswith("Ohm’s Law Result (Branch #2)")
        assert "I = -500 mA" in report

    def test_raw_values(self, divider_solution):
        """Тест сырых значений."""
        raw = format_raw_values(divider_solution)
        assert raw == {
            "V": "5.000000000 V",
            "I": "5.0000000E-1 A",
            "R": "10.00000000 Ω",
            "P": "2.500000000 W",
        }

    def test_input_summary(self):
        """Тест сводки ввода с незаданными величинами."""
        assert format_input_summary(KnownSet(V=5, R=10)) == "In: V=5 V, I=—, R=10 Ω, P=—"

    def test_output_summary(self, divider_solution):
        """Тест сводки решения."""
        assert format_output_summary(divider_solution) == "Out: V=5 V, I=500 mA, R=10 Ω, P=2.5 W"

    def test_raw_values_small_magnitudes(self):
        """Тест обычной записи сырых значений вплоть до микро."""
        raw = format_raw_values(Solution(V=1e-5, I=1e-3, R=0.01, P=1e-8))
        assert raw["V"] == "0.00001000000000 V"
        assert raw["R"] == "0.01000000000 Ω"
        assert raw["P"] == "1.000000000e-8 W"

    def test_derived_values(self, divider_solution):
        """Тест тока в миллиамперах."""
        assert format_derived_values(divider_solution) == {"I_mA": "500 mA"}
        assert format_derived_values(Solution(V=12, I=2, R=6, P=24)) == {"I_mA": "2000 mA"}
        assert format_derived_values(Solution(V=1, I=0.0125, R=80, P=0.0125)) == {"I_mA": "12.5 mA"}
