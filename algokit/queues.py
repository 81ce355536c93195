"""Merging two ordered sequences through queues."""

from __future__ import annotations

import re
import sys
from collections import deque
from collections.abc import Iterable, Iterator

_INTEGER = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_END = "e"


def _merge(first: Iterable[int], second: Iterable[int], keep_both: bool) -> list[int]:
    left, right = deque(first), deque(second)
    merged: list[int] = []
    while left and right:
        if left[0] < right[0]:
            merged.append(left.popleft())
        elif left[0] > right[0]:
            merged.append(right.popleft())
        else:
            merged.append(left.popleft())
            equal = right.popleft()
            if keep_both:
                merged.append(equal)
    merged.extend(left)
    merged.extend(right)
    return merged


def merge_unique(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ordered sequences, keeping one of each pair of equal heads."""
    return _merge(first, second, keep_both=False)


def merge_with_duplicates(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ordered sequences, keeping every element."""
    return _merge(first, second, keep_both=True)


def _parse_int(text: str) -> int:
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _tokens(argv: Iterable[str] | None) -> Iterator[str]:
    if argv is not None:
        yield from argv
        return
    for line in sys.stdin:
        yield from line.split()


def _read_set(tokens: Iterator[str]) -> list[int]:
    values = []
    for token in tokens:
        if token == _END:
            break
        values.append(_parse_int(token))
    return values


def _render(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Read two ordered sets and print both kinds of merge."""
    tokens = _tokens(argv)
    try:
        print(f"Введите УПОРЯДОЧЕННЫЙ список элементов 1 множества (для выхода нажми '{_END}'):")
        first = _read_set(tokens)
        print(f"Введите УПОРЯДОЧЕННЫЙ список элементов 2 множества (для выхода нажми '{_END}'):")
        second = _read_set(tokens)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(f"\nРезультат объединения без дубликатов (Q3): {_render(merge_unique(first, second))}")
    # Both queues are refilled from the second set before the second merge.
    duplicates = merge_with_duplicates(second, second)
    print(f"Результат объединения с дубликатами (Q3): {_render(duplicates)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())