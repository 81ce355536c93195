"""Checking that round, square and curly brackets are correctly paired."""

from __future__ import annotations

import sys
from dataclasses import dataclass

_OPENING = frozenset("([{")
_MATCHING = {")": "(", "]": "[", "}": "{"}

NO_BRACKETS = "В строке скобок нет."
HAS_ERRORS = "Есть ошибки!"
ALL_CORRECT = "Скобки расставлены правильно."


@dataclass(frozen=True)
class BracketReport:
    """Outcome of checking one expression.

    ``has_brackets`` is set only when an opening bracket was seen.
    ``errors`` holds the problems found while scanning, in input order.
    ``unclosed`` lists the opening brackets left over, innermost first.
    """

    has_brackets: bool
    errors: tuple[str, ...] = ()
    unclosed: tuple[str, ...] = ()

    @property
    def balanced(self) -> bool:
        return not self.errors and not self.unclosed

    @property
    def verdict(self) -> str:
        if not self.has_brackets:
            return NO_BRACKETS
        if not self.balanced:
            return HAS_ERRORS
        return ALL_CORRECT


def check(expression: str) -> BracketReport:
    """Scan ``expression`` and report how its brackets are paired."""
    stack: list[str] = []
    has_brackets = False
    errors: list[str] = []

    for char in expression:
        if char in _OPENING:
            stack.append(char)
            has_brackets = True
        elif char in _MATCHING:
            if not stack:
                errors.append(
                    f"Ошибка: найдена закрывающая скобка '{char}' "
                    "без соответствующей открывающей."
                )
                continue
            top = stack.pop()
            if top != _MATCHING[char]:
                errors.append(f"Ошибка: несоответствующие скобки '{top}' и '{char}'.")

    return BracketReport(has_brackets, tuple(errors), tuple(reversed(stack)))


def format_report(report: BracketReport) -> str:
    """Render a report as the lines shown to the user."""
    lines = list(report.errors)
    if report.unclosed:
        lines.append(
            "Ошибка: есть открывающие скобки без соответствующих закрывающих: "
            + "".join(f"{char} " for char in report.unclosed)
        )
    lines.append(report.verdict)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Check one line given as arguments or read from standard input."""
    if argv is not None:
        expression = " ".join(argv)
    else:
        print("Введите строку для проверки: ", end="", flush=True)
        line = sys.stdin.readline()
        expression = line.rstrip("\n")
    print(format_report(check(expression)))
    return 0


if __name__ == "__main__":
    sys.exit(main())