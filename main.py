"""
Скрипт для расчёта по закону Ома из командной строки

Основные функции:
- Разбор введённых значений (4k7, 1.5m, 10 Ω)
- Решение и вывод выбранной ветви
- Оценка времени работы от аккумулятора
"""

import argparse
import logging
import sys
from pathlib import Path

# Добавляем текущую папку в путь
sys.path.append(str(Path(__file__).parent))

from base.data import Record
from base.errors import OhmsLawError
from ohms_law import KnownSet, estimate_battery, parse, solve
from ohms_law.report import (
    branch_labels,
    format_derived_values,
    format_input_summary,
    format_raw_values,
    format_result_report,
    select_branch,
    solution_notes,
)


def read_inputs(args: argparse.Namespace) -> KnownSet:
    """Разбирает текстовые значения V, I, R, P; пустые поля остаются незаданными."""
    values = {}
    for name in ("V", "I", "R", "P"):
        raw = getattr(args, name)
        if raw is None or not raw.strip():
            continue
        values[name] = parse(raw)
    return KnownSet.from_mapping(values)


def run_solver(args: argparse.Namespace) -> None:
    """Решает задачу и печатает отчёт по выбранной ветви."""
    known = read_inputs(args)
    solutions = solve(known)
    solution = select_branch(solutions, args.branch - 1)

    if args.json:
        print(Record(known.to_dict(), solution.to_dict()).to_json_str())
        return

    print(format_input_summary(known))
    print("=" * 60)
    for label in branch_labels(solutions):
        print(label)
    print("=" * 60)
    print(format_result_report(solution, args.branch - 1))
    for name, raw in format_raw_values(solution).items():
        print(f"raw {name}: {raw}")
    for name, value in format_derived_values(solution).items():
        print(f"{name}: {value}")
    print(f"\n{solution_notes(solutions)}")


def run_battery(args: argparse.Namespace) -> None:
    """Печатает оценку времени работы от аккумулятора."""
    capacity, draw, *voltage = args.battery
    estimate = estimate_battery(capacity, draw, voltage[0] if voltage else None)
    print(f"Runtime:  {estimate.hours_text}")
    print(f"Capacity: {estimate.capacity_text}")
    print(f"Energy:   {estimate.energy_text}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ohm's law calculator: enter any two of V, I, R, P."
    )
    parser.add_argument("-V", help="voltage, e.g. 5, 3.3, 1.5k")
    parser.add_argument("-I", help="current, e.g. 0.5, 20m, 150mA")
    parser.add_argument("-R", help="resistance, e.g. 10, 4k7, 4R7, 1M")
    parser.add_argument("-P", help="power, e.g. 2.5, 250m")
    parser.add_argument("--branch", type=int, default=1, help="branch number for multi-solution results")
    parser.add_argument("--json", action="store_true", help="print the result as a JSON record")
    parser.add_argument(
        "--battery",
        nargs="+",
        metavar="VALUE",
        help="battery runtime: CAPACITY_mAh DRAW_mA [VOLTAGE]",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    """Главная функция: разбор аргументов и запуск расчёта.

    Returns:
        Код возврата: 0 при успехе, 1 при ошибке ввода
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.battery is not None and not 2 <= len(args.battery) <= 3:
        parser.error("--battery expects CAPACITY_mAh DRAW_mA [VOLTAGE]")

    try:
        if args.battery:
            run_battery(args)
        else:
            run_solver(args)
    except (OhmsLawError, IndexError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
