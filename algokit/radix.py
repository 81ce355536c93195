"""LSD radix sort of non-negative integers and of fixed-length words."""

from __future__ import annotations

import random
import re
import string
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

OUTPUT_FILE = "output.txt"

_LETTERS = frozenset(string.ascii_letters)
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


@dataclass
class RadixSortResult:
    """Sorted items and the sequence after each pass, labelled by position."""

    values: list
    passes: list[tuple[int, list]] = field(default_factory=list)


def radix_sort_numbers(values: Iterable[int], digits: int) -> RadixSortResult:
    """Sort non-negative integers by their lowest ``digits`` decimal digits."""
    data = list(values)
    if any(value < 0 for value in data):
        raise ValueError("radix sort needs non-negative numbers")
    passes = []
    divisor = 1
    for position in range(1, digits + 1):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in data:
            buckets[value // divisor % 10].append(value)
        data = [value for bucket in buckets for value in bucket]
        passes.append((position, list(data)))
        divisor *= 10
    return RadixSortResult(data, passes)


def is_valid_word(word: str, length: int) -> bool:
    """Tell whether ``word`` has exactly ``length`` English letters."""
    return len(word) == length and all(char in _LETTERS for char in word)


def radix_sort_words(words: Iterable[str], length: int) -> RadixSortResult:
    """Sort words of ``length`` English letters, ignoring case."""
    data = list(words)
    for word in data:
        if not is_valid_word(word, length):
            raise ValueError(f"not a word of {length} English letters: {word!r}")
    passes = []
    for position in range(length - 1, -1, -1):
        buckets: list[list[str]] = [[] for _ in range(26)]
        for word in data:
            buckets[ord(word[position].lower()) - ord("a")].append(word)
        data = [word for bucket in buckets for word in bucket]
        passes.append((position + 1, list(data)))
    return RadixSortResult(data, passes)


def digit_count(values: Iterable[int]) -> int:
    """Return the largest number of decimal digits among ``values``."""
    return max((len(str(abs(value))) for value in values), default=0)


def random_numbers(count: int, digits: int, rng: random.Random | None = None) -> list[int]:
    """Generate ``count`` integers with at most ``digits`` decimal digits."""
    if count < 0:
        raise ValueError("count must not be negative")
    if digits < 0:
        raise ValueError("digits must not be negative")
    rng = rng or random.Random()
    return [rng.randrange(10**digits) for _ in range(count)]


class _Reader:
    """Reads whitespace-separated tokens and whole lines from one line source."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._rest: str | None = None

    def _next_line(self) -> str:
        try:
            return next(self._lines).rstrip("\r\n")
        except StopIteration:
            raise EOFError("input ended") from None

    def token(self) -> str:
        while True:
            if self._rest is None:
                self._rest = self._next_line()
            match = re.match(r"\s*(\S+)", self._rest)
            if match is None:
                self._rest = None
                continue
            self._rest = self._rest[match.end() :]
            return match.group(1)

    def skip_char(self) -> None:
        if self._rest is None:
            return
        self._rest = self._rest[1:] if self._rest else None

    def line(self) -> str:
        if self._rest is not None:
            rest, self._rest = self._rest, None
            return rest
        return self._next_line()


def _render(items: Iterable) -> str:
    return "".join(f"{item} " for item in items)


def _report_sort(result: RadixSortResult, emit: Callable[[str], None]) -> None:
    for position, sequence in result.passes:
        emit(
            "Промежуточная последовательность после сортировки по разряду "
            f"{position}: {_render(sequence)}\n"
        )
    emit(f"Полностью отсортированная последовательность: {_render(result.values)}\n")


def _parse_int(text: str) -> int:
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def _read_numbers(reader: _Reader, count: int) -> list[int]:
    print(f"Введите {count} положительных чисел (0 допустимо) по одному на строке:")
    print("(Если вы ввели больше, то будет выведено только указанное количество чисел!)")
    numbers: list[int] = []
    while len(numbers) < count:
        text = reader.line()
        try:
            value = _parse_int(text)
        except OverflowError:
            print("Ошибка: Число вне допустимого диапазона. Попробуйте ещё раз.")
            continue
        except ValueError:
            print("Ошибка: Пожалуйста, вводите только целые числа. Попробуйте ещё раз.")
            continue
        if value < 0:
            print("Ошибка: Вводите только положительные числа или 0. Попробуйте еще раз.")
            continue
        numbers.append(value)
    return numbers


def _read_words(reader: _Reader, count: int, length: int, emit: Callable[[str], None]) -> list[str]:
    print(f"Введите слова (каждое слово должно состоять из {length} букв):")
    words = []
    for _ in range(count):
        while True:
            word = reader.line().lower()
            if is_valid_word(word, length):
                words.append(word)
                break
            message = (
                f"Ошибка: слово должно состоять из {length} букв и не содержать цифр. "
                "А также состоять только из букв английского алфавита. Попробуйте еще раз:\n"
            )
            emit(message)
            print(message, end="")
    return words


def _run(reader: _Reader, out: TextIO) -> int:
    def emit(message: str) -> None:
        print(message, end="")
        out.write(message)

    try:
        print("Введите количество чисел: ", end="", flush=True)
        count = int(reader.token())
        print("Введите количество разрядов в числах: ", end="", flush=True)
        digits = int(reader.token())
        print("Выберите способ заполнения чисел: ")
        print("1) Вручную")
        print("2) Рандомными числами")
        choice = reader.token()
        reader.skip_char()

        if choice == "2":
            numbers = random_numbers(count, digits)
            passes = digits
        elif choice == "1":
            numbers = _read_numbers(reader, count)
            passes = None
        else:
            message = "Некорректный выбор!\n"
            emit(message)
            print(message, end="")
            return 1

        emit(f"Исходная последовательность чисел: {_render(numbers)}\n")
        if passes is None:
            passes = digit_count(numbers)
        _report_sort(radix_sort_numbers(numbers, passes), emit)

        print("Введите количество слов: ", end="", flush=True)
        word_count = int(reader.token())
        print("Вводите только буквы английского алфавита, иначе будет выведена ошибка)")
        print("Введите количество букв в словах: ", end="", flush=True)
        length = int(reader.token())
        reader.skip_char()

        words = _read_words(reader, word_count, length, emit)
    except (EOFError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1

    _report_sort(radix_sort_words(words, length), emit)
    return 0


def _stdin_lines() -> Iterator[str]:
    yield from sys.stdin


def main(argv: list[str] | None = None) -> int:
    """Radix-sort numbers and then words, echoing the log to a file.

    When ``argv`` is given, each element stands for one input line.
    """
    reader = _Reader(argv if argv is not None else _stdin_lines())
    try:
        out = Path(OUTPUT_FILE).open("w", encoding="utf-8")
    except OSError:
        print("Не удалось открыть файл для записи!", file=sys.stderr)
        return 1
    with out:
        code = _run(reader, out)
    if code == 0:
        print(f"Результаты сохранены в файл {OUTPUT_FILE}")
    return code


if __name__ == "__main__":
    sys.exit(main())