import pytest

from algokit.digits import (
    digits_of,
    format_terms,
    main,
    sum_digits_iterative,
    sum_digits_recursive,
)


def test_digits_of_skips_non_digits():
    assert digits_of("a1-b2") == [1, 2]
    assert digits_of("") == []


@pytest.mark.parametrize("text", ["", "0", "7", "123456789123456789", "-42", "9x9"])
def test_iterative_and_recursive_agree(text):
    assert sum_digits_iterative(text) == sum_digits_recursive(text)


@pytest.mark.parametrize("a, b", [("12", "34"), ("", "5"), ("999", "0001")])
def test_sum_is_additive_over_concatenation(a, b):
    assert sum_digits_iterative(a + b) == sum_digits_iterative(a) + sum_digits_iterative(b)
    assert sum_digits_recursive(a + b) == sum_digits_recursive(a) + sum_digits_recursive(b)


def test_zeros_sum_to_zero():
    assert sum_digits_recursive("0" * 50) == 0


def test_single_digit():
    assert sum_digits_iterative("9") == 9


def test_format_terms():
    assert format_terms([1, 2, 3]) == "1 + 2 + 3"
    assert format_terms([]) == ""


def test_main_strips_minus(capsys):
    assert main(["-123"]) == 0
    out = capsys.readouterr().out
    total = sum_digits_iterative("123")
    assert "Сумма числа без -:" in out
    assert f"Слагаемые (итеративно): {format_terms([1, 2, 3])} = {total}" in out
    assert f"Слагаемые (рекурсивно): {format_terms([1, 2, 3])} = {total}" in out