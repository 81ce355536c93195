"""Merge sort that counts its recursive calls and logs runs to a file."""

from __future__ import annotations

import heapq
import random
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

RESULTS_FILE = "sort_results.txt"


@dataclass
class MergeSortResult:
    """Sorted values and the number of splitting calls made."""

    values: list[int]
    calls: int


def merge(left: Iterable[int], right: Iterable[int]) -> list[int]:
    """Stably merge two sorted sequences, preferring ``left`` on ties."""
    return list(heapq.merge(left, right))


def merge_sort(values: Iterable[int]) -> MergeSortResult:
    """Sort ascending without changing the input."""
    data = list(values)
    calls = 0

    def sort(low: int, high: int) -> None:
        nonlocal calls
        if low < high:
            calls += 1
            mid = low + (high - low) // 2
            sort(low, mid)
            sort(mid + 1, high)
            data[low : high + 1] = merge(data[low : mid + 1], data[mid + 1 : high + 1])

    sort(0, len(data) - 1)
    return MergeSortResult(data, calls)


def random_values(count: int, negative: bool, rng: random.Random | None = None) -> list[int]:
    """Generate -50..49 when ``negative`` is set, otherwise 0..99."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random()
    offset = 50 if negative else 0
    return [rng.randrange(100) - offset for _ in range(count)]


def _tokens(argv: Iterable[str] | None) -> Iterator[str]:
    if argv is not None:
        yield from argv
        return
    for line in sys.stdin:
        yield from line.split()


def _render(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Generate random numbers, merge-sort them and append a summary to a file."""
    tokens = _tokens(argv)
    print("Введите количество чисел для сортировки: ", end="", flush=True)
    try:
        count = int(next(tokens, "0"))
    except ValueError:
        count = 0
    print("Выберите тип чисел (n - натуральные, o - с отрицательными): ", end="", flush=True)
    negative = next(tokens, "")[:1] == "o"

    try:
        values = random_values(count, negative)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(f"Сгенерированная последовательность: {_render(values)}")
    result = merge_sort(values)
    print(f"Отсортированная последовательность: {_render(result.values)}")
    print(f"Количество рекурсивных вызовов: {result.calls}")
    print(f"Все успешно записалось в {RESULTS_FILE}")

    kind = "С отрицательными" if negative else "Натуральные"
    with Path(RESULTS_FILE).open("a", encoding="utf-8") as out:
        out.write(f"Количество элементов: {count}\n")
        out.write(f"Тип чисел: {kind}\n")
        out.write(f"Рекурсивных вызовов: {result.calls}\n")
        out.write("------------------------\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())