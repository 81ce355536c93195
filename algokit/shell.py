"""Shell sort with several gap sequences, counting element moves."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

OUTPUT_FILE = "output.txt"

FORMULAS = {
    1: "hi+1 = 3hi + 1",
    2: "hi+1 = 2hi + 1",
    3: "hi+1 = 2hi",
}

FIXED_INCREMENTS: tuple[tuple[str, tuple[int, ...]], ...] = (
    ("h_i+1 = 3h_i + 1", (364, 121, 40, 13, 4, 1)),
    ("h_i+1 = 2h_i + 1", (255, 127, 63, 31, 15, 7, 3, 1)),
    ("h_i+1 = 2h_i", (128, 64, 32, 16, 8, 4, 2, 1)),
)


@dataclass
class ShellSortResult:
    """Sorted values, the number of element moves and a snapshot per gap."""

    values: list[int]
    swaps: int
    passes: list[tuple[int, tuple[int, ...]]] = field(default_factory=list)


def generate_steps(count: int, formula: int) -> list[int]:
    """Build the gap sequence for ``count`` elements.

    Formula 1 is h' = 3h + 1, formula 2 is h' = 2h + 1 (both growing from 1
    while below ``count``), formula 3 halves ``count`` down to 1. The
    sequence is returned in reverse order of generation.
    """
    steps: list[int] = []
    if formula in (1, 2):
        factor = 3 if formula == 1 else 2
        step = 1
        while step < count:
            steps.append(step)
            step = factor * step + 1
    elif formula == 3:
        step = count // 2
        while step > 0:
            steps.append(step)
            step //= 2
    else:
        raise ValueError(f"unknown gap formula: {formula}")
    steps.reverse()
    return steps


def shell_sort(values: Iterable[int], steps: Iterable[int]) -> ShellSortResult:
    """Sort with the given gaps in order, without changing the input."""
    data = list(values)
    swaps = 0
    passes = []
    for step in steps:
        if step < 1:
            raise ValueError(f"gap must be positive: {step}")
        for i in range(step, len(data)):
            current = data[i]
            j = i
            while j >= step and data[j - step] > current:
                data[j] = data[j - step]
                j -= step
                swaps += 1
            data[j] = current
        passes.append((step, tuple(data)))
    return ShellSortResult(data, swaps, passes)


def random_values(
    count: int, low: int, high: int, rng: random.Random | None = None
) -> list[int]:
    """Generate ``count`` integers between ``low`` and ``high`` inclusive."""
    if count < 0:
        raise ValueError("count must not be negative")
    if low > high:
        raise ValueError("low must not exceed high")
    rng = rng or random.Random()
    return [rng.randint(low, high) for _ in range(count)]


def _render(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _pass_lines(result: ShellSortResult) -> Iterator[str]:
    for step, snapshot in result.passes:
        yield f"После сортировки с шагом {step}: {_render(snapshot)}"


def _run_generated(values: Sequence[int], out: TextIO) -> None:
    generated = f"Сгенерированная последовательность: {_render(values)}"
    out.write(generated + "\n")
    for formula, label in FORMULAS.items():
        header = f"Сортировка с шагом {label}:"
        out.write(header + "\n")
        print(header)
        result = shell_sort(values, generate_steps(len(values), formula))
        for line in _pass_lines(result):
            print(line)
            out.write(line + "\n")
        out.write(f"Полностью отсортированная последовательность: {_render(result.values)}\n")
        out.write(f"Количество перестановок: {result.swaps}\n")
        print(f"Количество перестановок: {result.swaps}")


def _run_fixed(values: Sequence[int]) -> None:
    print(f"Исходная последовательность: {_render(values)}")
    for label, increments in FIXED_INCREMENTS:
        print(f"Сортировка с шагами {label}:")
        for line in _pass_lines(shell_sort(values, increments)):
            print(line)
    print(
        "Полностью отсортированная последовательность (для всех шагов): "
        f"{_render(sorted(values))}"
    )


def main(argv: list[str] | None = None) -> int:
    """Shell-sort random numbers with three gap sequences."""
    parser = argparse.ArgumentParser(description="Shell sort with different gap sequences.")
    parser.add_argument("--fixed", action="store_true", help="use the fixed gap tables")
    parser.add_argument("inputs", nargs="*", help="answers to the prompts")
    args = parser.parse_args(argv)
    tokens = iter(args.inputs) if args.inputs else _stdin_tokens()

    print("Введите количество чисел в сортируемой последовательности: ", end="", flush=True)
    try:
        count = int(next(tokens, "0"))
    except ValueError:
        count = 0
    low, high = (0, 100) if args.fixed else (-10000, 10000)
    try:
        values = random_values(count, low, high)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    if args.fixed:
        _run_fixed(values)
        return 0

    print(f"Сгенерированная последовательность: {_render(values)}")
    try:
        with Path(OUTPUT_FILE).open("w", encoding="utf-8") as out:
            _run_generated(values, out)
    except OSError:
        print("Не удалось открыть файл для записи!", file=sys.stderr)
        return 1
    print(f"Результаты сохранены в файл {OUTPUT_FILE}")
    return 0


if __name__ == "__main__":
    sys.exit(main())