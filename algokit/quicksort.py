"""Quick sort with a last-element pivot, recording intermediate states."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class QuickSortResult:
    """Sorted values, total swaps and the recorded intermediate states.

    Each step is a snapshot of the array and the swap count at that moment.
    """

    values: list[int]
    swaps: int
    steps: list[tuple[tuple[int, ...], int]] = field(default_factory=list)


def _sort(values: Iterable[int], *, take_equal: bool, record_before: bool) -> QuickSortResult:
    data = list(values)
    swaps = 0
    steps: list[tuple[tuple[int, ...], int]] = []

    def partition(low: int, high: int) -> int:
        nonlocal swaps
        pivot = data[high]
        boundary = low - 1
        for j in range(low, high):
            if data[j] < pivot or (take_equal and data[j] == pivot):
                boundary += 1
                data[boundary], data[j] = data[j], data[boundary]
                swaps += 1
        data[boundary + 1], data[high] = data[high], data[boundary + 1]
        swaps += 1
        return boundary + 1

    def sort(low: int, high: int) -> None:
        if low < high:
            pivot_index = partition(low, high)
            if record_before:
                steps.append((tuple(data[: high + 1]), swaps))
            sort(low, pivot_index - 1)
            sort(pivot_index + 1, high)
            if not record_before:
                steps.append((tuple(data), swaps))

    sort(0, len(data) - 1)
    return QuickSortResult(data, swaps, steps)


def quick_sort(values: Iterable[int]) -> QuickSortResult:
    """Sort ascending, recording the whole array after each finished range."""
    return _sort(values, take_equal=True, record_before=False)


def quick_sort_with_swaps(values: Iterable[int]) -> QuickSortResult:
    """Sort ascending, recording the prefix up to the range end after each partition."""
    return _sort(values, take_equal=False, record_before=True)


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


def _read_count(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens, "0"))
    except ValueError:
        return 0


def _run_plain(tokens: Iterator[str]) -> int:
    print(
        "Введите количество чисел в сортируемой последовательности(от -50 до 50): ",
        end="",
        flush=True,
    )
    count = _read_count(tokens)
    try:
        values = random_values(count, -50, 50)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"Исходная последовательность: {_render(values)}")
    result = quick_sort(values)
    for snapshot, _ in result.steps:
        print(f"Промежуточный результат: {_render(snapshot)}")
    print(f"Полностью отсортированная последовательность: {_render(result.values)}")
    return 0


def _run_counted(tokens: Iterator[str]) -> int:
    print("Введите количество целых чисел для генерации: ", end="", flush=True)
    count = _read_count(tokens)
    if count <= 0:
        print("Ошибка: количество целых чисел должно быть положительным.")
        return 1
    print("Хотите генерировать только положительные числа? (y/n): ", end="", flush=True)
    choice = next(tokens, "")[:1]
    low, high = (0, 99) if choice in ("y", "Y") else (-99, 99)
    values = random_values(count, low, high)

    print(f"Сгенерированные числа: {_render(values)}")
    result = quick_sort_with_swaps(values)
    for snapshot, swaps in result.steps:
        print(
            f"Промежуточный результат сортировки: {_render(snapshot)}"
            f"| Количество перестановок: {swaps}"
        )
    print(f"Отсортированные числа: {_render(result.values)}")
    print(f"Общее количество перестановок: {result.swaps}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Quick-sort random numbers, showing intermediate results."""
    parser = argparse.ArgumentParser(description="Quick sort of random numbers.")
    parser.add_argument(
        "--plain", action="store_true", help="range -50..50, no swap counting"
    )
    parser.add_argument("inputs", nargs="*", help="answers to the prompts")
    args = parser.parse_args(argv)
    tokens = iter(args.inputs) if args.inputs else _stdin_tokens()
    if args.plain:
        return _run_plain(tokens)
    return _run_counted(tokens)


if __name__ == "__main__":
    sys.exit(main())