"""Sum of the decimal digits of a number, computed two ways."""

from __future__ import annotations

import sys

_DIGITS = "0123456789"


def digits_of(text: str) -> list[int]:
    """Return the decimal digits found in ``text``, in order."""
    return [int(char) for char in text if char in _DIGITS]


def sum_digits_iterative(text: str) -> int:
    """Sum the digits of ``text`` with a loop."""
    return sum(digits_of(text))


def _recursive_trace(text: str, index: int = 0) -> tuple[int, str]:
    if index >= len(text):
        return 0, ""
    rest_sum, rest_terms = _recursive_trace(text, index + 1)
    char = text[index]
    if char not in _DIGITS:
        return rest_sum, rest_terms
    separator = " + " if index < len(text) - 1 else ""
    return int(char) + rest_sum, f"{char}{separator}{rest_terms}"


def sum_digits_recursive(text: str) -> int:
    """Sum the digits of ``text`` recursively."""
    return _recursive_trace(text)[0]


def format_terms(digits: list[int]) -> str:
    """Join digits as the terms of a sum."""
    return " + ".join(str(digit) for digit in digits)


def main(argv: list[str] | None = None) -> int:
    """Read a number and print its digit sum computed both ways."""
    print(
        "Введите целое положительное число "
        "(максимально допустимое число =  123456789123456789): "
    )
    if argv is not None:
        number = argv[0] if argv else ""
    else:
        words = sys.stdin.read().split()
        number = words[0] if words else ""

    if number.startswith("-"):
        number = number[1:]
        print("Сумма числа без -: ")

    digits = digits_of(number)
    total = sum(digits)
    print(f"Слагаемые (итеративно): {format_terms(digits)} = {total}")

    recursive_total, terms = _recursive_trace(number)
    print(f"Слагаемые (рекурсивно): {terms} = {recursive_total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())