import random

import pytest

from algokit.radix import (
    OUTPUT_FILE,
    digit_count,
    is_valid_word,
    main,
    radix_sort_numbers,
    radix_sort_words,
    random_numbers,
)

SAMPLE = [170, 45, 75, 90, 802, 24, 2, 66]


def test_sorts_sample_numbers():
    result = radix_sort_numbers(SAMPLE, 3)
    assert result.values == sorted(SAMPLE)
    assert [position for position, _ in result.passes] == [1, 2, 3]


def test_first_pass_orders_by_units():
    first = radix_sort_numbers(SAMPLE, 1).passes[0][1]
    assert first == [170, 90, 802, 2, 24, 45, 75, 66]


def test_partial_digits_sort_by_low_digits_stably():
    rng = random.Random(4)
    values = [rng.randrange(1000) for _ in range(60)]
    result = radix_sort_numbers(values, 2)
    assert result.values == sorted(values, key=lambda value: value % 100)


def test_zero_digits_leave_order():
    assert radix_sort_numbers([3, 1, 2], 0).values == [3, 1, 2]


def test_input_not_changed():
    values = list(SAMPLE)
    radix_sort_numbers(values, 3)
    assert values == SAMPLE


def test_negative_numbers_rejected():
    with pytest.raises(ValueError):
        radix_sort_numbers([1, -2], 1)


def test_sorts_words():
    words = ["dog", "cat", "bat", "cab"]
    result = radix_sort_words(words, 3)
    assert result.values == sorted(words)
    assert [position for position, _ in result.passes] == [3, 2, 1]


def test_words_ignore_case():
    words = ["Dog", "cat", "Bat"]
    assert radix_sort_words(words, 3).values == sorted(words, key=str.lower)


@pytest.mark.parametrize("words", [["ab1"], ["abcd"], ["абв"]])
def test_invalid_words_rejected(words):
    with pytest.raises(ValueError):
        radix_sort_words(words, 3)


@pytest.mark.parametrize(
    ("word", "expected"),
    [("abc", True), ("AbC", True), ("ab1", False), ("abcd", False), ("абв", False)],
)
def test_is_valid_word(word, expected):
    assert is_valid_word(word, 3) is expected


def test_digit_count():
    assert digit_count([5, 123, -4567]) == len("4567")
    assert digit_count([]) == 0


def test_random_numbers():
    values = random_numbers(100, 2, random.Random(9))
    assert len(values) == 100
    assert all(0 <= value < 100 for value in values)
    assert values == random_numbers(100, 2, random.Random(9))


def test_random_numbers_errors():
    with pytest.raises(ValueError):
        random_numbers(-1, 2)
    with pytest.raises(ValueError):
        random_numbers(1, -1)


def test_random_numbers_sort_fully():
    values = random_numbers(40, 3, random.Random(5))
    assert radix_sort_numbers(values, 3).values == sorted(values)


def test_main_random_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["3", "2", "2", "2", "2", "Cd", "ab"]) == 0
    text = (tmp_path / OUTPUT_FILE).read_text(encoding="utf-8")
    assert "Полностью отсортированная последовательность: ab cd \n" in text
    assert text.startswith("Исходная последовательность чисел:")


def test_main_manual_path(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    lines = ["2", "1", "1", "5", "x", "-3", "12", "1", "3", "c4t", "cat"]
    assert main(lines) == 0
    out = capsys.readouterr().out
    assert "вводите только целые числа" in out
    assert "Вводите только положительные числа" in out
    text = (tmp_path / OUTPUT_FILE).read_text(encoding="utf-8")
    assert "Исходная последовательность чисел: 5 12 \n" in text
    assert "Полностью отсортированная последовательность: 5 12 \n" in text
    assert "Ошибка: слово должно состоять из 3 букв" in text


def test_main_invalid_choice(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["1", "1", "3"]) == 1
    assert "Некорректный выбор!" in (tmp_path / OUTPUT_FILE).read_text(encoding="utf-8")


def test_main_input_ends_early(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["2"]) == 1