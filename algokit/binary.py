"""Binary representation of small integers, shown forwards and reversed."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator

_ULONG_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\s*([+-]?)(\d+)")
LOW, HIGH = 9, 15


def to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer."""
    if n < 0:
        raise ValueError("number must not be negative")
    return format(n, "b")


def _parse_unsigned(text: str) -> int:
    match = _UNSIGNED.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    sign, digits = match.groups()
    value = int(digits)
    if value > _ULONG_MAX:
        raise OverflowError(f"number too large: {text!r}")
    if sign == "-":
        value = -value % (_ULONG_MAX + 1)
    return value


def _tokens(argv: Iterable[str] | None) -> Iterator[str]:
    if argv is not None:
        yield from argv
        return
    for line in sys.stdin:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read numbers until ``Q`` and print each in binary."""
    tokens = _tokens(argv)
    while True:
        print(f"Введите целое число ({LOW}-{HIGH}) или Q для завершения: ", end="", flush=True)
        token = next(tokens, None)
        if token is None:
            print()
            break
        if token == "Q":
            print("Программа завершена!")
            break
        try:
            number = _parse_unsigned(token)
        except OverflowError:
            print("Число слишком велико.")
            continue
        except ValueError:
            print("Некорректный ввод. Пожалуйста, введите целое число или Q для завершения.")
            continue
        if not LOW <= number <= HIGH:
            print(f"Пожалуйста, введите число в диапазоне от {LOW} до {HIGH}.")
            continue
        binary = to_binary(number)
        print(f"Число в двоичной форме: {binary}")
        print(f"Число в двоичной форме (в обратном порядке): {binary[::-1]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())