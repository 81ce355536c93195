"""Heap sort that records each extraction step and counts swaps."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class HeapSortResult:
    """Sorted values, total swaps and a snapshot after each extraction."""

    values: list[int]
    swaps: int
    steps: list[tuple[tuple[int, ...], int]] = field(default_factory=list)


def sift_down(values: list[int], size: int, root: int) -> int:
    """Restore the max-heap property below ``root``; return the swaps made."""
    swaps = 0
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return swaps
        values[root], values[largest] = values[largest], values[root]
        swaps += 1
        root = largest


def heap_sort(values: Iterable[int]) -> HeapSortResult:
    """Sort ascending without changing the input."""
    data = list(values)
    size = len(data)
    swaps = 0
    for root in range(size // 2 - 1, -1, -1):
        swaps += sift_down(data, size, root)

    steps = []
    for end in range(size - 1, -1, -1):
        data[0], data[end] = data[end], data[0]
        swaps += 1
        steps.append((tuple(data), swaps))
        swaps += sift_down(data, end, 0)
    return HeapSortResult(data, swaps, steps)


def random_values(
    count: int, positive_only: bool, rng: random.Random | None = None
) -> list[int]:
    """Generate 0..99 or, with negatives allowed, -99..99."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random()
    if positive_only:
        return [rng.randrange(100) for _ in range(count)]
    return [rng.randrange(199) - 99 for _ in range(count)]


def _tokens(argv: Iterable[str] | None) -> Iterator[str]:
    if argv is not None:
        yield from argv
        return
    for line in sys.stdin:
        yield from line.split()


def _render(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Generate random numbers and heap-sort them, showing every step."""
    tokens = _tokens(argv)
    print("Введите количество целых чисел для сортировки: ", end="", flush=True)
    try:
        count = int(next(tokens, "0"))
    except ValueError:
        count = 0
    print("Хотите генерировать только положительные числа? (y/n): ", end="", flush=True)
    choice = next(tokens, "")
    try:
        values = random_values(count, choice[:1] in ("y", "Y"))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(f"Сгенерированная последовательность: {_render(values)}")
    result = heap_sort(values)
    for snapshot, swaps in result.steps:
        print(
            "Промежуточный результат (после перемещения элемента): "
            f"{_render(snapshot)}| Количество перестановок: {swaps}"
        )
    print(f"Полностью отсортированная последовательность: {_render(result.values)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())